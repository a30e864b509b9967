"""
Result model for a metadata generation run.
"""

from typing import Any

from pydantic import BaseModel, Field

from notemeta.models.metadata import MetadataRecord, ParseFailure


class GenerationResult(BaseModel):
    """
    Outcome of generating metadata for a single note.

    `generated` is True when the LLM was called and its reply parsed.
    `parse_error` is set when the reply was rejected; nothing is written then.
    """

    path: str = Field(..., description="Note path relative to the vault root")
    generated: bool = Field(default=False, description="Whether the LLM was asked for metadata")
    record: MetadataRecord | None = Field(default=None, description="Parsed model reply")
    parse_error: ParseFailure | None = Field(default=None, description="Why the reply was rejected")
    updated_fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Front matter keys written, with the values submitted for them",
    )

    @property
    def has_changes(self) -> bool:
        """Check if any front matter key was written."""
        return bool(self.updated_fields)
