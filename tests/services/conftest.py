"""Fixtures for service tests.

The LLM is replaced by a scripted provider so the workflow runs without
network access.
"""

import pytest

from notemeta.config import GenerationConfig
from notemeta.core.llm.base import LLMProvider
from notemeta.core.note_store import NoteStore
from notemeta.services.metadata_generator import MetadataGenerator


class ScriptedLLM(LLMProvider):
    """LLM provider returning a fixed reply (or raising a fixed error)."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []
        self.calls: list[dict] = []

    async def complete(self, prompt: str, max_tokens: int = 2048, temperature: float = 0.0, **kwargs):
        self.prompts.append(prompt)
        self.calls.append({"max_tokens": max_tokens, "temperature": temperature, **kwargs})
        if self.error:
            raise self.error
        return self.reply

    async def close(self):
        pass


@pytest.fixture
def llm():
    """Scripted LLM returning a complete metadata object."""
    return ScriptedLLM(
        reply='Sure!\n```json\n{"tags": "python, testing", "description": "About tests", "title": "\\"Testing Notes\\""}\n```'
    )


@pytest.fixture
def notes(tmp_path):
    """Create a vault with a few notes."""
    (tmp_path / "empty.md").write_text("# Testing\nWriting tests with pytest.\n", encoding="utf-8")
    (tmp_path / "complete.md").write_text(
        "---\ntags: [existing]\ndescription: Kept\ntitle: Kept Title\n---\nBody\n",
        encoding="utf-8",
    )
    (tmp_path / "partial.md").write_text(
        "---\ntags: [existing]\ndescription: '  '\n---\nBody text\n", encoding="utf-8"
    )
    (tmp_path / "note.txt").write_text("not markdown", encoding="utf-8")
    return tmp_path


@pytest.fixture
def store(notes):
    """Note store over the test vault."""
    return NoteStore(notes)


@pytest.fixture
def make_generator(llm, store):
    """Build a generator with optional config overrides."""

    def _make(reply_llm: LLMProvider | None = None, **overrides) -> MetadataGenerator:
        return MetadataGenerator(
            llm=reply_llm or llm,
            store=store,
            config=GenerationConfig(**overrides),
        )

    return _make


@pytest.fixture
def make_llm():
    """Build a scripted LLM with a custom reply or error."""

    def _make(reply: str = "", error: Exception | None = None) -> ScriptedLLM:
        return ScriptedLLM(reply=reply, error=error)

    return _make
