"""
LLM provider abstraction layer for text generation.

Supported providers:
- Anthropic (official SDK)
- OpenAI (official SDK)
- Ollama (native SDK)
"""
from notemeta.core.llm.anthropic import AnthropicLLM
from notemeta.core.llm.base import LLMProvider, classify_llm_error
from notemeta.core.llm.ollama import OllamaLLM
from notemeta.core.llm.openai import OpenAILLM

__all__ = [
    "AnthropicLLM",
    "LLMProvider",
    "OllamaLLM",
    "OpenAILLM",
    "classify_llm_error",
]
