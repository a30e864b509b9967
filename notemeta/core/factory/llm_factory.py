"""
Factory for creating LLM providers.
"""

from notemeta.config import LLMConfig
from notemeta.core.llm.anthropic import AnthropicLLM
from notemeta.core.llm.base import LLMProvider
from notemeta.core.llm.ollama import OllamaLLM
from notemeta.core.llm.openai import OpenAILLM
from notemeta.utils.exceptions import ConfigurationError


class LLMFactory:
    """Factory for creating LLM providers from configuration."""

    @staticmethod
    def create(config: LLMConfig) -> LLMProvider:
        """
        Create LLM provider from configuration.

        Args:
            config: LLM configuration

        Returns:
            LLM provider instance

        Raises:
            ConfigurationError: If the provider is unsupported or its API key is missing
        """
        if config.provider == "anthropic":
            if not config.api_key:
                raise ConfigurationError(
                    "Please configure your Anthropic API key (NOTEMETA_LLM_API_KEY)"
                )
            return AnthropicLLM(
                api_key=config.api_key,
                model=config.model,
                base_url=config.base_url,
                timeout=config.timeout,
            )
        elif config.provider == "openai":
            if not config.api_key:
                raise ConfigurationError("OpenAI API key is required")
            return OpenAILLM(
                api_key=config.api_key,
                model=config.model,
                base_url=config.base_url,
                timeout=config.timeout,
            )
        elif config.provider == "ollama":
            return OllamaLLM(
                host=config.base_url or "http://localhost:11434",
                model=config.model,
                timeout=config.timeout,
            )
        else:
            raise ConfigurationError(f"Unsupported LLM provider: {config.provider}")
