"""
Factory modules for creating NoteMeta components.
"""

from notemeta.core.factory.llm_factory import LLMFactory

__all__ = [
    "LLMFactory",
]
