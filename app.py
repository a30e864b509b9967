"""
NoteMeta FastAPI Application

A REST API server for LLM-generated note metadata.
Provides endpoints for truncating content, parsing model replies and
generating front matter for notes in the configured vault.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from notemeta import __version__
from notemeta.config import Config
from notemeta.core.factory import LLMFactory
from notemeta.core.llm.base import LLMProvider
from notemeta.core.note_store import NoteStore
from notemeta.core.tokenizer import TruncationStrategy, count_tokens, truncate
from notemeta.models.generation import GenerationResult
from notemeta.models.metadata import ParseFailure, ParseSuccess
from notemeta.services.metadata_generator import MetadataGenerator
from notemeta.services.response_parser import parse_response
from notemeta.utils.exceptions import (
    AuthenticationError,
    LLMError,
    NoteMetaError,
    NotFoundError,
    OverloadedError,
    RateLimitError,
    ValidationError,
)
from notemeta.utils.logger import get_logger, setup_logging

# Global service instances
generator: MetadataGenerator | None = None
store: NoteStore | None = None
llm: LLMProvider | None = None
config: Config | None = None
logger = get_logger(__name__)


# Pydantic models for API
class TruncateRequest(BaseModel):
    """Request model for truncating content."""

    text: str = Field(..., description="Content to truncate")
    budget: int = Field(default=1000, description="Token budget; <= 0 disables truncation")
    strategy: TruncationStrategy = Field(default=TruncationStrategy.HEAD_ONLY)


class TruncateResponse(BaseModel):
    """Response model for truncated content."""

    content: str
    token_count: int


class ParseRequest(BaseModel):
    """Request model for parsing a model reply."""

    text: str = Field(..., description="Raw LLM reply")


class GenerateMetadataRequest(BaseModel):
    """Request model for generating metadata for a note."""

    path: str = Field(..., description="Note path relative to the vault root")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    generator_initialized: bool
    vault_root: str | None
    llm: str | None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global generator, store, llm, config

    # Load configuration from environment or use defaults
    config = Config.from_env()

    setup_logging(config.logging)

    logger.info("Starting NoteMeta server")
    logger.info(
        f"Configuration: LLM={config.llm.provider}/{config.llm.model}, "
        f"vault={config.vault.root}, truncate={config.generation.truncate_method.value}"
    )

    store = NoteStore(config.vault.root)

    try:
        llm = LLMFactory.create(config.llm)
    except NoteMetaError as e:
        # Tokenizer and parser endpoints stay available without an LLM
        logger.warning(f"LLM provider not configured: {e.message}")
        llm = None

    if llm:
        generator = MetadataGenerator(
            llm=llm,
            store=store,
            config=config.generation,
            max_response_tokens=config.llm.max_tokens,
            temperature=config.llm.temperature,
        )
        logger.info("Metadata generator initialized")

    yield

    logger.info("Shutting down NoteMeta server")
    if llm:
        await llm.close()
    generator = None
    llm = None
    logger.info("Cleanup complete")


# Create FastAPI app
app = FastAPI(
    title="NoteMeta API",
    description="LLM-generated tags, descriptions and titles for markdown notes",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def llm_error_status(error: LLMError) -> int:
    """Map an LLM transport error onto an HTTP status code."""
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, RateLimitError):
        return 429
    if isinstance(error, OverloadedError):
        return 503
    return 502


# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy" if generator else "degraded",
        generator_initialized=generator is not None,
        vault_root=str(store.root) if store else None,
        llm=f"{config.llm.provider}/{config.llm.model}" if config and llm else None,
    )


@app.post("/content/truncate", response_model=TruncateResponse)
async def truncate_content(request: TruncateRequest):
    """
    Truncate content to a token budget.

    Strategies:
    - head_only: keep the first tokens
    - head_tail: keep 80% head and 20% tail
    - heading: outline of headings plus the start of the body
    """
    content = truncate(request.text, request.budget, request.strategy)
    return TruncateResponse(content=content, token_count=count_tokens(content))


@app.post(
    "/responses/parse",
    response_model=ParseSuccess | ParseFailure,
    response_model_exclude_none=True,
)
async def parse_model_response(request: ParseRequest):
    """
    Parse a raw LLM reply into validated metadata.

    Always returns 200; check `ok` and `category` for failures.
    """
    return parse_response(request.text)


@app.post("/notes/metadata", response_model=GenerationResult, response_model_exclude_none=True)
async def generate_metadata(request: GenerateMetadataRequest):
    """
    Generate tags, description and title for a note and write them to its front matter.

    Returns 422 when the LLM reply cannot be parsed into metadata.
    """
    if not generator:
        raise HTTPException(status_code=503, detail="Metadata generator not initialized")

    try:
        result = await generator.generate(request.path)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    except LLMError as e:
        raise HTTPException(status_code=llm_error_status(e), detail=e.message) from e
    except NoteMetaError as e:
        logger.error(f"Error generating metadata: {e.message}")
        raise HTTPException(status_code=500, detail=e.message) from e

    if result.parse_error:
        raise HTTPException(status_code=422, detail=result.parse_error.model_dump(mode="json"))
    return result


@app.get("/tags")
async def get_tags():
    """Count tag usage across the vault (front matter and inline tags)."""
    if not store:
        raise HTTPException(status_code=503, detail="Note store not initialized")

    tags_field = config.generation.tags_field_name if config else "tags"
    return store.load_tags(tags_field=tags_field)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "NoteMeta API",
        "version": __version__,
        "description": "LLM-generated tags, descriptions and titles for markdown notes",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
