"""
Parse raw LLM replies into validated metadata.

The reply is untrusted free text that may wrap JSON in prose or markdown
fences. Extraction is permissive (first "{" to last "}"), validation is
strict (closed MetadataRecord schema). Failures are returned, never raised.

Known limitation: the brace span is not depth-aware, so a reply holding
several separate JSON objects yields one span covering all of them and
fails as InvalidJson.
"""

import json

from pydantic import ValidationError as PydanticValidationError

from notemeta.models.metadata import (
    MetadataRecord,
    ParseErrorCategory,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
)
from notemeta.utils.logger import get_logger

logger = get_logger(__name__)


def extract_json_span(text: str) -> str | None:
    """
    Return the text from the first "{" to the last "}", inclusive.

    Args:
        text: Raw reply text

    Returns:
        Candidate JSON text, or None if no such span exists
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def format_validation_issues(error: PydanticValidationError) -> str:
    """Join pydantic errors as "<path>: <reason>" separated by "; "."""
    issues = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"]) or "(root)"
        issues.append(f"{path}: {issue['msg']}")
    return "; ".join(issues)


def parse_response(text: str) -> ParseOutcome:
    """
    Parse an LLM reply into a MetadataRecord.

    Args:
        text: Raw reply text

    Returns:
        ParseSuccess with the record, or ParseFailure with category,
        error message and suggestion
    """
    candidate = extract_json_span(text or "")
    if candidate is None:
        logger.warning("No JSON object found in model response")
        return ParseFailure(
            category=ParseErrorCategory.NO_JSON_FOUND,
            error="No JSON object found in model response",
            suggestion="The model may have returned malformed data. Check API logs.",
        )

    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Model response is not valid JSON: {e}")
        return ParseFailure(
            category=ParseErrorCategory.INVALID_JSON,
            error=f"Invalid JSON: {e}",
            suggestion="Response contains text that looks like JSON but isn't valid.",
        )

    try:
        record = MetadataRecord.model_validate(parsed)
    except PydanticValidationError as e:
        issues = format_validation_issues(e)
        logger.warning(f"Model response failed validation: {issues}")
        return ParseFailure(
            category=ParseErrorCategory.SCHEMA_VALIDATION_FAILED,
            error=f"Response validation failed: {issues}",
            suggestion="Model response structure doesn't match expected format.",
        )

    return ParseSuccess(data=record)
