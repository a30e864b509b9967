"""
Tests for metadata and generation result models.
"""

import pytest
from pydantic import ValidationError

from notemeta.models import (
    GenerationResult,
    MetadataRecord,
    ParseErrorCategory,
    ParseFailure,
    ParseSuccess,
)


class TestMetadataRecord:
    """Tests for the closed metadata schema."""

    def test_all_fields(self):
        """Test creating a record with every field."""
        record = MetadataRecord(tags="a,b", description="desc", title="Title")

        assert record.tags == "a,b"
        assert record.description == "desc"
        assert record.title == "Title"

    def test_fields_optional(self):
        """Test every field defaults to None."""
        record = MetadataRecord()

        assert record.tags is None
        assert record.description is None
        assert record.title is None

    def test_extra_key_rejected(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            MetadataRecord.model_validate({"tags": "a", "category": "x"})

        assert exc_info.value.errors()[0]["loc"] == ("category",)

    def test_explicit_null_rejected(self):
        """Test an explicit null is rejected even though the field is optional."""
        with pytest.raises(ValidationError):
            MetadataRecord.model_validate({"description": None})

    def test_number_not_coerced(self):
        """Test numbers are not coerced to strings."""
        with pytest.raises(ValidationError):
            MetadataRecord.model_validate({"title": 42})

    def test_list_rejected(self):
        """Test lists are rejected for tags."""
        with pytest.raises(ValidationError):
            MetadataRecord.model_validate({"tags": ["a", "b"]})

    @pytest.mark.parametrize(
        "tags,expected",
        [
            ("python, ai ,notes", ["python", "ai", "notes"]),
            ("single", ["single"]),
            ("a,,b,", ["a", "b"]),
            ("", []),
            (None, []),
        ],
    )
    def test_tag_list(self, tags, expected):
        """Test splitting comma-joined tags."""
        record = MetadataRecord() if tags is None else MetadataRecord(tags=tags)
        assert record.tag_list() == expected


class TestParseOutcomes:
    """Tests for ParseSuccess and ParseFailure."""

    def test_success(self):
        """Test success carries the record."""
        outcome = ParseSuccess(data=MetadataRecord(tags="x"))

        assert outcome.ok is True
        assert outcome.data.tags == "x"

    def test_failure(self):
        """Test failure carries category, error and suggestion."""
        outcome = ParseFailure(
            category=ParseErrorCategory.INVALID_JSON,
            error="Invalid JSON: boom",
            suggestion="Check the model output.",
        )

        assert outcome.ok is False
        assert outcome.category == ParseErrorCategory.INVALID_JSON

    def test_failure_serializes_category_name(self):
        """Test the category serializes to its public name."""
        outcome = ParseFailure(
            category=ParseErrorCategory.SCHEMA_VALIDATION_FAILED,
            error="e",
            suggestion="s",
        )

        assert outcome.model_dump(mode="json")["category"] == "SchemaValidationFailed"


class TestGenerationResult:
    """Tests for GenerationResult."""

    def test_defaults(self):
        """Test a fresh result has no changes."""
        result = GenerationResult(path="note.md")

        assert result.generated is False
        assert result.record is None
        assert result.parse_error is None
        assert result.has_changes is False

    def test_has_changes(self):
        """Test has_changes reflects written fields."""
        result = GenerationResult(path="note.md", updated_fields={"tags": ["a"]})

        assert result.has_changes is True
