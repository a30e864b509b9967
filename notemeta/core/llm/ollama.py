"""
Ollama LLM provider using native ollama-python SDK.
"""

import ollama

from notemeta.core.llm.base import LLMProvider, classify_llm_error
from notemeta.utils.exceptions import LLMError, ValidationError
from notemeta.utils.logger import get_logger

logger = get_logger(__name__)


class OllamaLLM(LLMProvider):
    """
    Ollama LLM provider for text generation.

    Uses native ollama-python SDK for chat completions. The reply is
    returned as-is; JSON extraction is left to the response parser.
    """

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "llama3.1:8b",
        timeout: float = 120.0,
    ):
        """
        Initialize Ollama LLM provider.

        Args:
            host: Ollama server URL
            model: Model name for text generation (e.g., "llama3.1", "mistral")
            timeout: Request timeout in seconds
        """
        self.host = host
        self.model = model
        self.timeout = timeout

        self.client = ollama.AsyncClient(host=host, timeout=timeout)

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 2048,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion using Ollama.

        Args:
            prompt: Input prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional options (passed to Ollama)

        Returns:
            Reply text

        Raises:
            ValidationError: If prompt is empty
            LLMError: If the request fails or returns empty content
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        options = {
            "temperature": temperature,
            "num_predict": max_tokens,
            **kwargs.get("options", {}),
        }

        try:
            response = await self.client.chat(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                options=options,
                **{k: v for k, v in kwargs.items() if k != "options"},
            )
        except Exception as e:
            logger.error(f"Ollama error ({type(e).__name__}, model={self.model}): {e}")
            raise classify_llm_error(e, "Ollama") from e

        content = response["message"]["content"]
        if not content:
            raise LLMError("Ollama returned empty content", {"model": self.model})

        return content

    async def close(self):
        """Close client (Ollama SDK handles cleanup internally)."""
        pass
