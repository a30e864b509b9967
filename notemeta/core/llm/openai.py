"""
OpenAI LLM provider using official SDK.
"""

from openai import AsyncOpenAI

from notemeta.core.llm.base import LLMProvider, classify_llm_error
from notemeta.utils.exceptions import LLMError, ValidationError
from notemeta.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAILLM(LLMProvider):
    """
    OpenAI LLM provider for text generation.

    Uses the chat completions API; works with OpenAI-compatible servers via base_url.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        organization: str | None = None,
        base_url: str | None = None,
        timeout: float = 120.0,
    ):
        """
        Initialize OpenAI LLM provider.

        Args:
            api_key: OpenAI API key
            model: Model name (e.g., "gpt-4o", "gpt-4o-mini")
            organization: Optional organization ID
            base_url: Optional custom base URL
            timeout: Request timeout in seconds
        """
        self.model = model

        self.client = AsyncOpenAI(
            api_key=api_key, organization=organization, base_url=base_url, timeout=timeout
        )

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 2048,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion using OpenAI.

        Args:
            prompt: Input prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional parameters (e.g., stop, presence_penalty)
        Returns:
            Reply text
        Raises:
            ValidationError: If prompt is empty
            LLMError: If OpenAI API call fails or returns empty content
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        params = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
            "max_tokens": max_tokens,
            **kwargs,
        }

        try:
            response = await self.client.chat.completions.create(**params)
        except Exception as e:
            logger.error(f"OpenAI API error ({type(e).__name__}, model={self.model}): {e}")
            raise classify_llm_error(e, "OpenAI") from e

        content = response.choices[0].message.content
        if not content:
            raise LLMError("OpenAI returned empty content", {"model": self.model})

        return content

    async def close(self):
        """Close OpenAI client."""
        await self.client.close()
