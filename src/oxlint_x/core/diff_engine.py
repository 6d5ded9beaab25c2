"""Diff engine for reconciling original and fixed source text.

This module turns a character-level edit script into a short list of
reportable edits:

1. raw_diff: EQUAL/INSERT/DELETE script built on difflib.SequenceMatcher
2. coalesce: batches raw operations on the same logical line into single
   Insert/Delete/Replace edits anchored at offsets in the original text
3. apply_differences: replays coalesced edits against the original text

Batching rules:
- INSERT and DELETE operations are always batched
- An EQUAL run that contains a line ending flushes the batch; the edit never
  spans a line break in unchanged text
- An EQUAL run without a line ending joins the batch, so several changes on
  one line are reported as one Replace
- The final operation of the script never joins a batch

The offset cursor only moves over text that exists in the original source:
INSERT never advances it.
"""

import difflib
import re
from collections.abc import Iterable, Sequence
from enum import Enum

from oxlint_x.models.edits import (
    CoalescedEdit,
    DeleteEdit,
    DiffOp,
    InsertEdit,
    RawEditOp,
    ReplaceEdit,
)

LINE_ENDING_RE = re.compile(r"\r\n|[\n\r\u2028\u2029]")


class UnexpectedDiffOperationError(RuntimeError):
    """Raised when an edit script contains an unknown operation kind."""


class CoalescerState(Enum):
    """States of the coalescing state machine."""

    IDLE = "idle"
    BATCHING = "batching"


def contains_line_ending(text: str) -> bool:
    """Return True if text contains \\r\\n, \\n, \\r, U+2028 or U+2029."""
    return LINE_ENDING_RE.search(text) is not None


def raw_diff(source: str, target: str) -> list[RawEditOp]:
    """Compute a character-level edit script from source to target.

    Uses difflib.SequenceMatcher with autojunk disabled so that long inputs
    are matched exactly. A ``replace`` opcode becomes DELETE followed by
    INSERT.

    Args:
        source: Original text
        target: Transformed text

    Returns:
        Ordered list of RawEditOp. Concatenating EQUAL+DELETE text yields
        source; concatenating EQUAL+INSERT text yields target.
    """
    if source == target:
        return [RawEditOp(DiffOp.EQUAL, source)] if source else []

    matcher = difflib.SequenceMatcher(None, source, target, autojunk=False)
    ops: list[RawEditOp] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            ops.append(RawEditOp(DiffOp.EQUAL, source[i1:i2]))
        elif tag == "delete":
            ops.append(RawEditOp(DiffOp.DELETE, source[i1:i2]))
        elif tag == "insert":
            ops.append(RawEditOp(DiffOp.INSERT, target[j1:j2]))
        else:  # replace
            ops.append(RawEditOp(DiffOp.DELETE, source[i1:i2]))
            ops.append(RawEditOp(DiffOp.INSERT, target[j1:j2]))

    return ops


class DiffCoalescer:
    """State machine folding raw edit operations into coalesced edits.

    One instance handles one edit script. Feed operations in order with
    ``feed`` and call ``finish`` once at the end of input.
    """

    def __init__(self) -> None:
        self.offset = 0
        self.batch: list[RawEditOp] = []
        self.edits: list[CoalescedEdit] = []

    @property
    def state(self) -> CoalescerState:
        return CoalescerState.BATCHING if self.batch else CoalescerState.IDLE

    def feed(self, op: RawEditOp, *, last: bool = False) -> None:
        """Consume one raw operation.

        Args:
            op: The next operation of the script
            last: True when op is the final operation of the script

        Raises:
            UnexpectedDiffOperationError: If op.kind is not a DiffOp
        """
        kind, text = op

        if kind == DiffOp.INSERT or kind == DiffOp.DELETE:
            self.batch.append(op)
        elif kind == DiffOp.EQUAL:
            if last:
                return
            if self.state is CoalescerState.IDLE:
                self.offset += len(text)
            elif contains_line_ending(text):
                self.flush()
                self.offset += len(text)
            else:
                self.batch.append(op)
        else:
            raise UnexpectedDiffOperationError(f'Unexpected diff operation "{kind}"')

    def finish(self) -> list[CoalescedEdit]:
        """Flush any pending batch and return the emitted edits."""
        if self.batch:
            self.flush()
        return self.edits

    def flush(self) -> None:
        """Collapse the pending batch into at most one edit."""
        delete_text = ""
        insert_text = ""

        for kind, text in self.batch:
            if kind == DiffOp.INSERT:
                insert_text += text
            elif kind == DiffOp.DELETE:
                delete_text += text
            else:
                # Unchanged text exists on both sides of the edit
                delete_text += text
                insert_text += text

        if delete_text and insert_text:
            self.edits.append(
                ReplaceEdit(offset=self.offset, delete_text=delete_text, insert_text=insert_text)
            )
        elif insert_text:
            self.edits.append(InsertEdit(offset=self.offset, insert_text=insert_text))
        elif delete_text:
            self.edits.append(DeleteEdit(offset=self.offset, delete_text=delete_text))

        self.offset += len(delete_text)
        self.batch.clear()


def coalesce(raw_ops: Iterable[RawEditOp]) -> list[CoalescedEdit]:
    """Coalesce a raw edit script into line-aware Insert/Delete/Replace edits.

    Args:
        raw_ops: Complete, ordered edit script for one (source, target) pair

    Returns:
        Edits in ascending, non-overlapping offset order. Empty iff the
        script contains no INSERT or DELETE text.

    Raises:
        UnexpectedDiffOperationError: If the script contains an unknown kind
    """
    ops = list(raw_ops)
    coalescer = DiffCoalescer()
    for index, op in enumerate(ops):
        coalescer.feed(op, last=index == len(ops) - 1)
    return coalescer.finish()


def generate_differences(source: str, target: str) -> list[CoalescedEdit]:
    """Compute coalesced edits turning source into target."""
    return coalesce(raw_diff(source, target))


def apply_differences(source: str, edits: Sequence[CoalescedEdit]) -> str:
    """Apply coalesced edits to the original source.

    Args:
        source: Original text the edit offsets refer to
        edits: Edits in ascending offset order

    Returns:
        The transformed text

    Raises:
        ValueError: If edits overlap, are out of order, or the deleted text
            does not match the source at the edit offset
    """
    parts: list[str] = []
    cursor = 0

    for edit in edits:
        if edit.offset < cursor:
            raise ValueError(f"Edit at offset {edit.offset} overlaps previous edit ending at {cursor}")
        end = edit.offset + len(edit.delete_text)
        if source[edit.offset:end] != edit.delete_text:
            raise ValueError(f"Deleted text does not match source at offset {edit.offset}")
        parts.append(source[cursor:edit.offset])
        parts.append(edit.insert_text)
        cursor = end

    parts.append(source[cursor:])
    return "".join(parts)
