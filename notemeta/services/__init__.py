"""
Service layer for NoteMeta.

Contains:
- MetadataGenerator: end-to-end metadata workflow for a note
- parse_response: model reply -> validated MetadataRecord
- build_metadata_prompt: instruction prompt around note content
"""

from notemeta.services.metadata_generator import MetadataGenerator
from notemeta.services.prompt import build_metadata_prompt
from notemeta.services.response_parser import parse_response

__all__ = [
    "MetadataGenerator",
    "build_metadata_prompt",
    "parse_response",
]
