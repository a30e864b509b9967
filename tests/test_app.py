"""
Tests for the REST API.

The lifespan is not run; service globals are patched per test.
"""

import pytest
from fastapi.testclient import TestClient

import app as app_module
from notemeta.core.llm.base import LLMProvider
from notemeta.core.note_store import NoteStore, split_frontmatter
from notemeta.services.metadata_generator import MetadataGenerator
from notemeta.utils.exceptions import AuthenticationError, LLMError, OverloadedError, RateLimitError


class FixedLLM(LLMProvider):
    """LLM provider with a fixed reply or error."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error

    async def complete(self, prompt: str, max_tokens: int = 2048, temperature: float = 0.0, **kwargs):
        if self.error:
            raise self.error
        return self.reply

    async def close(self):
        pass


@pytest.fixture
def client():
    """Test client without startup."""
    return TestClient(app_module.app)


@pytest.fixture
def vault(tmp_path):
    """Create a small vault."""
    (tmp_path / "note.md").write_text("# Plan\nShip the release #work\n", encoding="utf-8")
    (tmp_path / "done.md").write_text(
        "---\ntags: [work, home]\ndescription: Done\ntitle: Done\n---\nFinished\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def use_generator(monkeypatch, vault):
    """Install a generator backed by a fixed-reply LLM."""

    def _install(reply: str = "", error: Exception | None = None) -> MetadataGenerator:
        store = NoteStore(vault)
        generator = MetadataGenerator(llm=FixedLLM(reply, error), store=store)
        monkeypatch.setattr(app_module, "store", store)
        monkeypatch.setattr(app_module, "generator", generator)
        return generator

    return _install


@pytest.mark.unit
class TestInfoEndpoints:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        """Test API information."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "NoteMeta API"

    def test_health_degraded_without_generator(self, client, monkeypatch):
        """Test health reports degraded when no generator is configured."""
        monkeypatch.setattr(app_module, "generator", None)

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["generator_initialized"] is False

    def test_health_with_generator(self, client, use_generator):
        """Test health reports healthy with a generator."""
        use_generator("{}")

        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["generator_initialized"] is True


@pytest.mark.unit
class TestTruncateEndpoint:
    """Tests for /content/truncate."""

    def test_head_only_default(self, client):
        """Test the default strategy keeps the head."""
        response = client.post("/content/truncate", json={"text": "a b c d e", "budget": 2})

        assert response.status_code == 200
        assert response.json() == {"content": "a b...", "token_count": 5}

    def test_head_tail(self, client):
        """Test head_tail by strategy value."""
        response = client.post(
            "/content/truncate",
            json={"text": "a b c d e f g h i j", "budget": 5, "strategy": "head_tail"},
        )

        assert response.json()["content"] == "a b c d\n...\nj"

    def test_disabled_budget(self, client):
        """Test budget <= 0 returns the text unchanged."""
        response = client.post("/content/truncate", json={"text": "keep   this", "budget": 0})

        assert response.json()["content"] == "keep   this"

    def test_unknown_strategy(self, client):
        """Test unknown strategies are rejected."""
        response = client.post("/content/truncate", json={"text": "x", "strategy": "middle"})

        assert response.status_code == 422


@pytest.mark.unit
class TestParseEndpoint:
    """Tests for /responses/parse."""

    def test_success(self, client):
        """Test a valid reply is returned as data."""
        response = client.post("/responses/parse", json={"text": 'ok {"tags": "a,b"} done'})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "data": {"tags": "a,b"}}

    def test_failure(self, client):
        """Test a rejected reply is still 200 with its category."""
        response = client.post("/responses/parse", json={"text": "nothing here"})

        data = response.json()
        assert response.status_code == 200
        assert data["ok"] is False
        assert data["category"] == "NoJsonFound"
        assert data["suggestion"]

    def test_schema_failure(self, client):
        """Test extra keys are reported as SchemaValidationFailed."""
        response = client.post("/responses/parse", json={"text": '{"tags": "a", "mood": "x"}'})

        assert response.json()["category"] == "SchemaValidationFailed"


@pytest.mark.unit
class TestMetadataEndpoint:
    """Tests for /notes/metadata."""

    def test_not_initialized(self, client, monkeypatch):
        """Test 503 when no generator is configured."""
        monkeypatch.setattr(app_module, "generator", None)

        response = client.post("/notes/metadata", json={"path": "note.md"})

        assert response.status_code == 503

    def test_generates_metadata(self, client, use_generator, vault):
        """Test metadata is generated and written."""
        use_generator('{"tags": "plan, release", "description": "Release plan", "title": "Plan"}')

        response = client.post("/notes/metadata", json={"path": "note.md"})

        data = response.json()
        assert response.status_code == 200
        assert data["generated"] is True
        assert data["updated_fields"]["tags"] == ["plan", "release"]
        written, _ = split_frontmatter((vault / "note.md").read_text(encoding="utf-8"))
        assert written["tags"] == ["plan", "release"]

    def test_complete_note_skipped(self, client, use_generator):
        """Test complete notes are returned without generation."""
        use_generator("unused")

        data = client.post("/notes/metadata", json={"path": "done.md"}).json()

        assert data["generated"] is False
        assert data["updated_fields"] == {}

    def test_parse_failure_is_422(self, client, use_generator):
        """Test rejected replies map to 422 with the failure details."""
        use_generator('{"tags": 5}')

        response = client.post("/notes/metadata", json={"path": "note.md"})

        assert response.status_code == 422
        assert response.json()["detail"]["category"] == "SchemaValidationFailed"

    def test_not_markdown_is_400(self, client, use_generator):
        """Test non-markdown paths map to 400."""
        use_generator("{}")

        response = client.post("/notes/metadata", json={"path": "note.txt"})

        assert response.status_code == 400

    def test_missing_note_is_404(self, client, use_generator):
        """Test missing notes map to 404."""
        use_generator("{}")

        response = client.post("/notes/metadata", json={"path": "missing.md"})

        assert response.status_code == 404

    def test_outside_vault_is_400(self, client, use_generator):
        """Test paths escaping the vault map to 400."""
        use_generator("{}")

        response = client.post("/notes/metadata", json={"path": "../escape.md"})

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "error,status",
        [
            (AuthenticationError("Authentication failed"), 401),
            (RateLimitError("Rate limit exceeded"), 429),
            (OverloadedError("Overloaded"), 503),
            (LLMError("Error calling API"), 502),
        ],
    )
    def test_llm_errors(self, client, use_generator, error, status):
        """Test LLM errors map to their HTTP status codes."""
        use_generator(error=error)

        response = client.post("/notes/metadata", json={"path": "note.md"})

        assert response.status_code == status
        assert response.json()["detail"] == error.message


@pytest.mark.unit
class TestTagsEndpoint:
    """Tests for /tags."""

    def test_counts_tags(self, client, use_generator, monkeypatch):
        """Test tag counts across the vault."""
        use_generator("{}")
        monkeypatch.setattr(app_module, "config", None)

        response = client.get("/tags")

        assert response.status_code == 200
        assert response.json() == {"work": 2, "home": 1}

    def test_not_initialized(self, client, monkeypatch):
        """Test 503 without a note store."""
        monkeypatch.setattr(app_module, "store", None)

        assert client.get("/tags").status_code == 503
