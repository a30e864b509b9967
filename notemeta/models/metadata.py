"""
Metadata models for LLM replies.

MetadataRecord is the closed schema a model reply must satisfy. Parsing a
reply yields a ParseOutcome: either ParseSuccess carrying the record, or
ParseFailure carrying a category, an error message and a suggestion.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MetadataRecord(BaseModel):
    """
    Generated note metadata.

    Every field is optional, but a field that is present must be a string.
    Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    tags: str | None = Field(default=None, description="Comma-joined tags, e.g. 'a,b,c'")
    description: str | None = Field(default=None, description="Short summary of the note")
    title: str | None = Field(default=None, description="Note title")

    @field_validator("tags", "description", "title", mode="before")
    @classmethod
    def reject_null(cls, value):
        """Omitted fields default to None; an explicit null is an error."""
        if value is None:
            raise ValueError("Input should be a valid string, not null")
        return value

    def tag_list(self) -> list[str]:
        """
        Split the comma-joined tags string.

        Returns:
            Stripped, non-empty tags in order
        """
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


class ParseErrorCategory(str, Enum):
    """Why a model reply could not be turned into a MetadataRecord."""

    NO_JSON_FOUND = "NoJsonFound"
    INVALID_JSON = "InvalidJson"
    SCHEMA_VALIDATION_FAILED = "SchemaValidationFailed"


class ParseSuccess(BaseModel):
    """Reply parsed and validated."""

    ok: Literal[True] = True
    data: MetadataRecord


class ParseFailure(BaseModel):
    """Reply rejected, with what failed and why it likely happened."""

    ok: Literal[False] = False
    category: ParseErrorCategory
    error: str = Field(..., description="What failed")
    suggestion: str = Field(..., description="Likely cause and remediation")


ParseOutcome = ParseSuccess | ParseFailure
