"""
Data models for NoteMeta.

Core models:
- MetadataRecord: tags/description/title generated for a note
- ParseSuccess, ParseFailure: outcome of parsing a model reply
- GenerationResult: outcome of one metadata generation run
"""

from notemeta.models.generation import GenerationResult
from notemeta.models.metadata import (
    MetadataRecord,
    ParseErrorCategory,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
)

__all__ = [
    "GenerationResult",
    "MetadataRecord",
    "ParseErrorCategory",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
]
