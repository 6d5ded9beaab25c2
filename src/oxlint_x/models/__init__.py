"""Pydantic models for edits, oxlint output and reported problems."""

from .diagnostics import Label, LintResult, OxlintDiagnostic, Span
from .edits import (
    CoalescedEdit,
    DeleteEdit,
    DiffOp,
    EditOperation,
    InsertEdit,
    RawEditOp,
    ReplaceEdit,
)
from .problems import CheckReport, Location, Problem, TextPatch

__all__ = [
    "CheckReport",
    "CoalescedEdit",
    "DeleteEdit",
    "DiffOp",
    "EditOperation",
    "InsertEdit",
    "Label",
    "LintResult",
    "Location",
    "OxlintDiagnostic",
    "Problem",
    "RawEditOp",
    "ReplaceEdit",
    "Span",
    "TextPatch",
]
