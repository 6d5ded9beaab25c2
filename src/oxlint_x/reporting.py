"""Turn oxlint diagnostics and coalesced edits into located problems.

Diagnostics are located from their first labelled span. Edits become
fixable problems whose message shows whitespace with visible glyphs, e.g.
``Replace `x=1` with `x·=·1```.
"""

from collections.abc import Sequence

from loguru import logger

from oxlint_x.core.invisibles import show_invisibles
from oxlint_x.core.locator import SourceLocator
from oxlint_x.models.diagnostics import LintResult
from oxlint_x.models.edits import CoalescedEdit, EditOperation
from oxlint_x.models.problems import Problem, TextPatch

FORMAT_RULE_ID = "oxlint/format"


def _severity(value: str) -> str:
    return "error" if value.lower() in ("error", "deny") else "warning"


def diagnostic_problems(source: str, result: LintResult) -> list[Problem]:
    """Locate each diagnostic in source.

    Diagnostics without a labelled span are skipped; spans that fall outside
    the source are logged and skipped.
    """
    locator = SourceLocator(source)
    problems: list[Problem] = []

    for diagnostic in result.diagnostics:
        label = diagnostic.labels[0] if diagnostic.labels else None
        if label is None or label.span is None:
            continue

        span = label.span
        try:
            start = locator.location(span.offset)
            end = locator.location(locator.clamp(span.offset + span.length))
        except ValueError as e:
            logger.warning("Invalid span for {}: {}", diagnostic.code, e)
            continue

        message = f"{diagnostic.message} ({diagnostic.code})" if diagnostic.code else diagnostic.message
        problems.append(
            Problem(
                message=message,
                rule_id=diagnostic.code or "oxlint",
                severity=_severity(diagnostic.severity),
                start=start,
                end=end,
            )
        )

    return problems


def describe_edit(edit: CoalescedEdit) -> str:
    """Human readable description of an edit."""
    if edit.operation == EditOperation.INSERT:
        return f"Insert `{show_invisibles(edit.insert_text)}`"
    if edit.operation == EditOperation.DELETE:
        return f"Delete `{show_invisibles(edit.delete_text)}`"
    return f"Replace `{show_invisibles(edit.delete_text)}` with `{show_invisibles(edit.insert_text)}`"


def difference_problems(source: str, edits: Sequence[CoalescedEdit]) -> list[Problem]:
    """Build one fixable problem per coalesced edit."""
    locator = SourceLocator(source)
    problems: list[Problem] = []

    for edit in edits:
        end_offset = edit.offset + len(edit.delete_text)
        problems.append(
            Problem(
                message=describe_edit(edit),
                rule_id=FORMAT_RULE_ID,
                start=locator.location(edit.offset),
                end=locator.location(end_offset),
                fix=TextPatch(start=edit.offset, end=end_offset, text=edit.insert_text),
            )
        )

    return problems


def apply_patches(source: str, patches: Sequence[TextPatch]) -> str:
    """Apply non-overlapping patches to source.

    Patches are sorted by start offset first.

    Raises:
        ValueError: If two patches overlap or a patch is out of range
    """
    parts: list[str] = []
    cursor = 0

    for patch in sorted(patches, key=lambda p: (p.start, p.end)):
        if patch.start < cursor or patch.end < patch.start or patch.end > len(source):
            raise ValueError(f"Patch [{patch.start}, {patch.end}) overlaps or is out of range")
        parts.append(source[cursor:patch.start])
        parts.append(patch.text)
        cursor = patch.end

    parts.append(source[cursor:])
    return "".join(parts)
