"""Offset to line/column mapping for reporting."""

import bisect
import re

from oxlint_x.models.problems import Location

_LINE_BREAK_RE = re.compile(r"\r\n|[\n\r\u2028\u2029]")


class SourceLocator:
    """Maps offsets in a text to 1-based lines and 0-based columns.

    Line breaks are \\r\\n, \\r, \\n, U+2028 and U+2029. A \\r\\n pair counts
    as one break.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._line_starts = [0] + [match.end() for match in _LINE_BREAK_RE.finditer(text)]

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def clamp(self, offset: int) -> int:
        """Bound offset to [0, len(text)]."""
        return max(0, min(offset, len(self.text)))

    def location(self, offset: int) -> Location:
        """Return the Location of offset.

        Raises:
            ValueError: If offset is outside [0, len(text)]
        """
        if offset < 0 or offset > len(self.text):
            raise ValueError(f"Offset {offset} is outside text of length {len(self.text)}")
        line_index = bisect.bisect_right(self._line_starts, offset) - 1
        return Location(line=line_index + 1, column=offset - self._line_starts[line_index])

    def offset(self, location: Location) -> int:
        """Return the offset of a Location (inverse of ``location``)."""
        if location.line > self.line_count:
            raise ValueError(f"Line {location.line} is past the last line ({self.line_count})")
        return self._line_starts[location.line - 1] + location.column
