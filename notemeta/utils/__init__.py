"""Utility modules for NoteMeta."""

from notemeta.utils.exceptions import (
    AuthenticationError,
    ConfigurationError,
    LLMError,
    NoteMetaError,
    NoteStoreError,
    NotFoundError,
    OverloadedError,
    RateLimitError,
    ValidationError,
)
from notemeta.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Exceptions
    "NoteMetaError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
    "NoteStoreError",
    "LLMError",
    "AuthenticationError",
    "RateLimitError",
    "OverloadedError",
]
