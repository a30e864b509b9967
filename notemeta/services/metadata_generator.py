"""
Metadata generation workflow.

For one note:
1. Decide whether the LLM is needed (missing fields or forced regeneration)
2. Truncate the note body to the configured token budget
3. Ask the LLM for tags, description and title
4. Parse and validate the reply
5. Merge the values into the note's front matter
6. Write static custom metadata
"""

from pathlib import Path
from typing import Any

from notemeta.config import GenerationConfig
from notemeta.core.llm.base import LLMProvider
from notemeta.core.note_store import MergePolicy, NoteStore
from notemeta.core.tokenizer import truncate
from notemeta.models.generation import GenerationResult
from notemeta.models.metadata import MetadataRecord, ParseFailure
from notemeta.services.prompt import build_metadata_prompt
from notemeta.services.response_parser import parse_response
from notemeta.utils.exceptions import ValidationError
from notemeta.utils.logger import get_logger

logger = get_logger(__name__)

MARKDOWN_SUFFIX = ".md"


def is_blank(value: Any) -> bool:
    """Check if a front matter value counts as missing."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def strip_quotes(title: str) -> str:
    """Strip whitespace and one pair of matching surrounding quotes."""
    title = title.strip()
    if len(title) >= 2 and title[0] == title[-1] and title[0] in ("'", '"'):
        title = title[1:-1]
    return title


def parse_custom_value(value: str) -> str | bool:
    """Convert "true"/"false" (any case) to booleans."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    return value


class MetadataGenerator:
    """
    Generates front matter metadata for markdown notes with an LLM.

    Usage:
        generator = MetadataGenerator(llm=llm, store=NoteStore("~/notes"), config=config.generation)
        result = await generator.generate("ideas/today.md")
    """

    def __init__(
        self,
        llm: LLMProvider,
        store: NoteStore,
        config: GenerationConfig | None = None,
        max_response_tokens: int = 2048,
        temperature: float = 0.0,
    ):
        """
        Initialize metadata generator.

        Args:
            llm: LLM provider used for generation
            store: Note store holding the notes
            config: Generation settings (defaults if not provided)
            max_response_tokens: Maximum tokens the LLM may generate
            temperature: Sampling temperature
        """
        self.llm = llm
        self.store = store
        self.config = config or GenerationConfig()
        self.max_response_tokens = max_response_tokens
        self.temperature = temperature

    def needs_metadata(self, frontmatter: dict[str, Any]) -> bool:
        """
        Check if the LLM should be asked for metadata.

        Args:
            frontmatter: Current front matter of the note

        Returns:
            True if a generated field is missing or regeneration is forced
        """
        config = self.config
        return (
            config.force
            or is_blank(frontmatter.get(config.tags_field_name))
            or is_blank(frontmatter.get(config.description_field_name))
            or (config.enable_title and is_blank(frontmatter.get(config.title_field_name)))
        )

    def prepare_content(self, body: str) -> str:
        """Truncate note content to the configured budget."""
        if self.config.truncate_content:
            return truncate(body, self.config.max_tokens, self.config.truncate_method)
        return truncate(body, -1)

    def build_prompt(self, content: str) -> str:
        """Build the LLM prompt for prepared content."""
        return build_metadata_prompt(
            content=content,
            tags_prompt=self.config.tags_prompt,
            description_prompt=self.config.description_prompt,
            title_prompt=self.config.title_prompt,
        )

    async def request_metadata(self, body: str) -> MetadataRecord | ParseFailure:
        """
        Ask the LLM for metadata and parse its reply.

        Args:
            body: Note content

        Returns:
            Validated MetadataRecord, or ParseFailure if the reply was rejected

        Raises:
            LLMError: If the LLM call fails
        """
        content = self.prepare_content(body)
        logger.info(f"Content extracted (length): {len(content)}")

        reply = await self.llm.complete(
            self.build_prompt(content),
            max_tokens=self.max_response_tokens,
            temperature=self.temperature,
        )
        logger.debug(f"LLM reply received (length): {len(reply)}")

        outcome = parse_response(reply)
        if isinstance(outcome, ParseFailure):
            logger.warning(
                f"Rejected LLM reply ({outcome.category.value}): {outcome.error}. {outcome.suggestion}"
            )
            return outcome
        return outcome.data

    async def generate(self, path: str | Path) -> GenerationResult:
        """
        Generate and write metadata for a note.

        Args:
            path: Note path relative to the store root

        Returns:
            GenerationResult describing what was written

        Raises:
            ValidationError: If the path is not a markdown file
            NotFoundError: If the note doesn't exist
            LLMError: If the LLM call fails
        """
        if Path(path).suffix.lower() != MARKDOWN_SUFFIX:
            raise ValidationError(f"Not a markdown file: {path}")

        config = self.config
        frontmatter = self.store.frontmatter(path)
        result = GenerationResult(path=str(path))

        needs_metadata = self.needs_metadata(frontmatter)
        logger.info(
            f"Metadata generation check for {path}: needs_metadata={needs_metadata}, "
            f"force={config.force}"
        )

        if needs_metadata:
            outcome = await self.request_metadata(self.store.body(path))
            if isinstance(outcome, ParseFailure):
                result.parse_error = outcome
                return result

            result.generated = True
            result.record = outcome
            self._apply_record(path, frontmatter, outcome, result)

        for meta in config.custom_metadata:
            if meta.key and meta.value:
                value = parse_custom_value(meta.value)
                policy = MergePolicy.UPDATE if config.force else MergePolicy.KEEP
                self._write(path, meta.key, value, policy, result)

        if result.has_changes:
            logger.info(f"Metadata updated for {path}: {sorted(result.updated_fields)}")
        return result

    def _apply_record(
        self,
        path: str | Path,
        frontmatter: dict[str, Any],
        record: MetadataRecord,
        result: GenerationResult,
    ) -> None:
        config = self.config

        tags = record.tag_list()
        if tags:
            self._write(path, config.tags_field_name, tags, MergePolicy.APPEND, result)

        if record.description:
            policy = self._policy_for(frontmatter.get(config.description_field_name))
            self._write(path, config.description_field_name, record.description, policy, result)

        if config.enable_title and record.title:
            policy = self._policy_for(frontmatter.get(config.title_field_name))
            self._write(path, config.title_field_name, strip_quotes(record.title), policy, result)

    def _policy_for(self, current: Any) -> MergePolicy:
        if self.config.force or is_blank(current):
            return MergePolicy.UPDATE
        return MergePolicy.KEEP

    def _write(
        self,
        path: str | Path,
        key: str,
        value: Any,
        policy: MergePolicy,
        result: GenerationResult,
    ) -> None:
        if self.store.update_frontmatter(path, key, value, policy):
            result.updated_fields[key] = value
