"""Visible stand-ins for whitespace in edit messages."""

INVISIBLE_GLYPHS = {
    " ": "·",  # Middle Dot
    "\n": "⏎",  # Return Symbol
    "\t": "↹",  # Left Arrow To Bar Over Right Arrow To Bar
    "\r": "␍",  # Carriage Return Symbol
}

_TRANSLATION = str.maketrans(INVISIBLE_GLYPHS)


def show_invisibles(text: str) -> str:
    """Replace space, newline, tab and carriage return with visible glyphs.

    Every other character, including other Unicode whitespace, is kept.

    Example:
        >>> show_invisibles("a b\\tc")
        'a·b↹c'
    """
    return text.translate(_TRANSLATION)
