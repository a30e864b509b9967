"""
Abstract base class for LLM providers.
Handles plain text generation; reply parsing happens in the response parser.
"""

from abc import ABC, abstractmethod

from notemeta.utils.exceptions import (
    AuthenticationError,
    LLMError,
    OverloadedError,
    RateLimitError,
)

OVERLOADED_STATUS_CODES = (503, 529)


class LLMProvider(ABC):
    """
    Abstract base for LLM text generation providers.

    Responsibilities:
    - Single-turn text completion
    - Mapping provider errors onto the LLMError family
    """

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        max_tokens: int = 2048,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion from prompt.

        Args:
            prompt: The input prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature (0.0 = deterministic, 1.0 = creative)
            **kwargs: Provider-specific parameters

        Returns:
            Raw reply text

        Raises:
            ValidationError: If the prompt is empty
            AuthenticationError: If the API key is rejected
            RateLimitError: If the provider throttles the request
            OverloadedError: If the provider is overloaded
            LLMError: For any other provider failure
        """
        pass

    @abstractmethod
    async def close(self):
        """
        Close any open connections.
        Optional to override if provider needs cleanup.
        """


def classify_llm_error(error: Exception, provider: str) -> LLMError:
    """
    Map a provider SDK exception onto the LLMError family.

    Uses the HTTP status code when the SDK exposes one, otherwise
    the error markers found in provider error messages.

    Args:
        error: Exception raised by the provider SDK
        provider: Provider name for messages

    Returns:
        LLMError (or subclass) to raise in its place
    """
    status = getattr(error, "status_code", None)
    detail = str(error)
    lowered = detail.lower()
    context = {"provider": provider, "status_code": status, "error_type": type(error).__name__}

    if status == 401 or "authentication_error" in lowered:
        return AuthenticationError(
            f"Authentication failed. Please check your {provider} API key.", context
        )
    if status == 429 or "rate_limit" in lowered:
        return RateLimitError(
            "Rate limit exceeded. Please wait a moment and try again.", context
        )
    if status in OVERLOADED_STATUS_CODES or "overloaded" in lowered:
        return OverloadedError(
            f"{provider} API is currently overloaded. Please try again in a moment.", context
        )
    return LLMError(f"Error calling {provider} API: {detail}", context)
