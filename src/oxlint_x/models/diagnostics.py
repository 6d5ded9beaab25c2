"""Models for oxlint's ``--format=json`` output.

Only the fields consumed by the reporting layer are declared; anything else
oxlint emits is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class Span(BaseModel):
    """Character span in the linted file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    offset: int = Field(..., ge=0, description="Start offset")
    length: int = Field(default=0, ge=0, description="Span length")


class Label(BaseModel):
    """A labelled span attached to a diagnostic."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    label: str | None = Field(default=None, description="Optional label text")
    span: Span | None = Field(default=None, description="Location of the label")


class OxlintDiagnostic(BaseModel):
    """A single oxlint diagnostic."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str = Field(..., description="Diagnostic message")
    code: str = Field(default="", description="Rule code, e.g. eslint(no-debugger)")
    severity: str = Field(default="warning", description="Severity reported by oxlint")
    help: str | None = Field(default=None, description="Help text")
    url: str | None = Field(default=None, description="Rule documentation URL")
    filename: str | None = Field(default=None, description="File the diagnostic belongs to")
    labels: list[Label] = Field(default_factory=list, description="Labelled spans")


class LintResult(BaseModel):
    """Decoded oxlint JSON report."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    diagnostics: list[OxlintDiagnostic] = Field(default_factory=list, description="Diagnostics")
    number_of_files: int | None = Field(default=None, description="Files linted")
    number_of_rules: int | None = Field(default=None, description="Rules run")
