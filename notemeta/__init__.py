"""NoteMeta: LLM-generated tags, descriptions and titles for markdown notes."""

__version__ = "1.0.0"
