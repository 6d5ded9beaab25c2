"""Located problems handed to callers of the linter facade."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .edits import CoalescedEdit


class Location(BaseModel):
    """Line (1-based) and column (0-based) position."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(..., ge=0, description="0-based column")


class TextPatch(BaseModel):
    """Replace ``source[start:end]`` with ``text``."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, description="Start offset (inclusive)")
    end: int = Field(..., ge=0, description="End offset (exclusive)")
    text: str = Field(default="", description="Replacement text")


class Problem(BaseModel):
    """A reportable lint or formatting problem."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human readable message")
    rule_id: str = Field(..., description="Originating rule or 'oxlint/format'")
    severity: Literal["error", "warning"] = Field(default="warning", description="Problem severity")
    start: Location = Field(..., description="Start location")
    end: Location = Field(..., description="End location")
    fix: TextPatch | None = Field(default=None, description="Patch that fixes the problem")


class CheckReport(BaseModel):
    """Combined lint and format result for one file."""

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(..., description="Path of the checked file")
    problems: list[Problem] = Field(default_factory=list, description="All problems, diagnostics first")
    formatted: str | None = Field(default=None, description="Fixed text, None when nothing was run")
    differences: list[CoalescedEdit] = Field(default_factory=list, description="Coalesced edits")

    @property
    def fixable(self) -> list[Problem]:
        return [problem for problem in self.problems if problem.fix is not None]
