"""
Custom exception hierarchy for NoteMeta.

Provides structured error types for the note metadata workflow.
All exceptions inherit from NoteMetaError for easy catching.

Model replies that fail to parse are NOT exceptions: the response
parser returns a ParseFailure value instead.
"""


class NoteMetaError(Exception):
    """
    Base exception for all NoteMeta errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize NoteMeta error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(NoteMetaError):
    """
    Validation errors.
    Raised when input validation fails (empty prompt, non-markdown file, bad path).
    """

    pass


class NotFoundError(NoteMetaError):
    """
    Resource not found errors.
    Raised when a requested note doesn't exist.
    """

    pass


class ConfigurationError(NoteMetaError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class NoteStoreError(NoteMetaError):
    """
    Note store errors.
    Raised when a note or its front matter cannot be read or written.
    """

    pass


class LLMError(NoteMetaError):
    """
    LLM transport errors.
    Raised when the LLM API call fails for a reason not covered below.
    """

    pass


class AuthenticationError(LLMError):
    """
    LLM authentication errors.
    Raised when the provider rejects the configured API key.
    """

    pass


class RateLimitError(LLMError):
    """
    LLM rate limit errors.
    Raised when the provider throttles the request.
    """

    pass


class OverloadedError(LLMError):
    """
    LLM overload errors.
    Raised when the provider is temporarily unable to serve requests.
    """

    pass
