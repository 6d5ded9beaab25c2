"""Edit models produced by the diff engine.

All edit models use Pydantic v2 BaseModel with frozen=True for immutability.
Offsets always index into the original (pre-edit) source text.
"""

from enum import IntEnum, StrEnum
from typing import Annotated, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class DiffOp(IntEnum):
    """Raw edit-script operation kinds (diff-match-patch numbering)."""

    DELETE = -1
    EQUAL = 0
    INSERT = 1


class RawEditOp(NamedTuple):
    """One step of a character-level edit script."""

    kind: DiffOp
    text: str


class EditOperation(StrEnum):
    """Operation names for coalesced edits."""

    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


class InsertEdit(BaseModel):
    """Text inserted before ``offset`` in the original source."""

    model_config = ConfigDict(frozen=True)

    operation: Literal["insert"] = "insert"
    offset: int = Field(..., ge=0, description="Offset in the original source")
    insert_text: str = Field(..., description="Text to insert")

    @property
    def delete_text(self) -> str:
        return ""


class DeleteEdit(BaseModel):
    """Text removed from the original source starting at ``offset``."""

    model_config = ConfigDict(frozen=True)

    operation: Literal["delete"] = "delete"
    offset: int = Field(..., ge=0, description="Offset in the original source")
    delete_text: str = Field(..., description="Text to delete")

    @property
    def insert_text(self) -> str:
        return ""


class ReplaceEdit(BaseModel):
    """Text at ``offset`` replaced by new text."""

    model_config = ConfigDict(frozen=True)

    operation: Literal["replace"] = "replace"
    offset: int = Field(..., ge=0, description="Offset in the original source")
    delete_text: str = Field(..., description="Text to delete")
    insert_text: str = Field(..., description="Replacement text")


CoalescedEdit = Annotated[InsertEdit | DeleteEdit | ReplaceEdit, Field(discriminator="operation")]
