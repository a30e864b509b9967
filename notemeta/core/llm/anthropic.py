"""
Anthropic LLM provider using official SDK.
"""

from anthropic import AsyncAnthropic

from notemeta.core.llm.base import LLMProvider, classify_llm_error
from notemeta.utils.exceptions import LLMError, ValidationError
from notemeta.utils.logger import get_logger

logger = get_logger(__name__)


class AnthropicLLM(LLMProvider):
    """
    Anthropic LLM provider for text generation.

    Uses the Messages API with a single user turn.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        base_url: str | None = None,
        timeout: float = 120.0,
    ):
        """
        Initialize Anthropic LLM provider.

        Args:
            api_key: Anthropic API key
            model: Model name (e.g., "claude-sonnet-4-5-20250929")
            base_url: Optional custom base URL
            timeout: Request timeout in seconds
        """
        self.model = model

        self.client = AsyncAnthropic(api_key=api_key, base_url=base_url, timeout=timeout)

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 2048,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion using Anthropic.

        Args:
            prompt: Input prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional parameters (e.g., stop_sequences, system)
        Returns:
            Text of the first content block
        Raises:
            ValidationError: If prompt is empty
            LLMError: If the API call fails or returns no text
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except Exception as e:
            logger.error(f"Anthropic API error ({type(e).__name__}, model={self.model}): {e}")
            raise classify_llm_error(e, "Anthropic") from e

        if message.content and message.content[0].type == "text":
            return message.content[0].text

        raise LLMError("No text content in response", {"model": self.model})

    async def close(self):
        """Close Anthropic client."""
        await self.client.close()
