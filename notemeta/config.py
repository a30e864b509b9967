"""
Configuration for NoteMeta.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from notemeta.core.tokenizer import TruncationStrategy

DEFAULT_TAGS_PROMPT = (
    "Select 3-5 relevant tags in lowercase with hyphens instead of spaces "
    "(e.g., 'knowledge-management', 'note-taking')"
)
DEFAULT_DESCRIPTION_PROMPT = (
    "Write a concise but useful summary in 1-2 sentences that captures "
    "the main purpose and key points"
)
DEFAULT_TITLE_PROMPT = (
    "Create a simple, concise title with minimal adjectives that clearly states the topic"
)


class UpdateMethod(str, Enum):
    """Whether existing front matter values are regenerated."""

    ALWAYS_REGENERATE = "always_regenerate"
    PRESERVE_EXISTING = "preserve_existing"


# Names used by earlier releases of the settings file
LEGACY_UPDATE_METHODS = {
    "force": UpdateMethod.ALWAYS_REGENERATE,
    "update_all": UpdateMethod.ALWAYS_REGENERATE,
    "no-llm": UpdateMethod.PRESERVE_EXISTING,
    "empty_only": UpdateMethod.PRESERVE_EXISTING,
}


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = "anthropic"  # anthropic, openai, ollama
    model: str = "claude-sonnet-4-5-20250929"
    base_url: str | None = None
    api_key: str | None = None
    temperature: float = 0.0
    max_tokens: int = 2048
    timeout: float = 120.0


class CustomMetadata(BaseModel):
    """Static key/value written to every processed note."""

    key: str
    value: str


class GenerationConfig(BaseModel):
    """Metadata generation behaviour."""

    # Field names in front matter
    tags_field_name: str = "tags"
    description_field_name: str = "description"
    title_field_name: str = "title"

    enable_title: bool = True

    # Content truncation
    truncate_content: bool = True
    max_tokens: int = 1000
    truncate_method: TruncationStrategy = TruncationStrategy.HEAD_ONLY

    update_method: UpdateMethod = UpdateMethod.PRESERVE_EXISTING

    # Prompts
    tags_prompt: str = DEFAULT_TAGS_PROMPT
    description_prompt: str = DEFAULT_DESCRIPTION_PROMPT
    title_prompt: str = DEFAULT_TITLE_PROMPT

    custom_metadata: list[CustomMetadata] = Field(default_factory=list)

    @field_validator("update_method", mode="before")
    @classmethod
    def migrate_update_method(cls, value: Any) -> Any:
        """Map legacy update method names onto the current ones."""
        if isinstance(value, str) and value in LEGACY_UPDATE_METHODS:
            return LEGACY_UPDATE_METHODS[value]
        return value

    @property
    def force(self) -> bool:
        """Check if existing values should be overwritten."""
        return self.update_method == UpdateMethod.ALWAYS_REGENERATE


class VaultConfig(BaseModel):
    """Notes directory configuration."""

    root: str = "."


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = True
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    vault: VaultConfig = Field(default_factory=VaultConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Config instance

        Environment variables:
            NOTEMETA_LLM_PROVIDER: LLM provider (anthropic, openai, ollama)
            NOTEMETA_LLM_MODEL: LLM model name
            NOTEMETA_LLM_BASE_URL: LLM base URL
            NOTEMETA_LLM_API_KEY: LLM API key
            NOTEMETA_TAGS_FIELD / NOTEMETA_DESCRIPTION_FIELD / NOTEMETA_TITLE_FIELD: front matter keys
            NOTEMETA_ENABLE_TITLE: Generate titles (true/false)
            NOTEMETA_TRUNCATE_CONTENT: Truncate note content (true/false)
            NOTEMETA_MAX_TOKENS: Content token budget
            NOTEMETA_TRUNCATE_METHOD: head_only, head_tail or heading
            NOTEMETA_UPDATE_METHOD: always_regenerate or preserve_existing
            NOTEMETA_TAGS_PROMPT / NOTEMETA_DESCRIPTION_PROMPT / NOTEMETA_TITLE_PROMPT: instructions
            NOTEMETA_VAULT_ROOT: Notes directory
            NOTEMETA_LOG_LEVEL: Log level
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None or value == "":
                return default
            # Convert boolean strings
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            # Convert numeric strings
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        generation_defaults = GenerationConfig()

        return cls(
            llm=LLMConfig(
                provider=get_env("NOTEMETA_LLM_PROVIDER", "anthropic"),
                model=get_env("NOTEMETA_LLM_MODEL", "claude-sonnet-4-5-20250929"),
                base_url=get_env("NOTEMETA_LLM_BASE_URL"),
                api_key=get_env("NOTEMETA_LLM_API_KEY"),
                temperature=get_env("NOTEMETA_LLM_TEMPERATURE", 0.0),
                max_tokens=get_env("NOTEMETA_LLM_MAX_TOKENS", 2048),
                timeout=get_env("NOTEMETA_LLM_TIMEOUT", 120.0),
            ),
            generation=GenerationConfig(
                tags_field_name=get_env("NOTEMETA_TAGS_FIELD", "tags"),
                description_field_name=get_env("NOTEMETA_DESCRIPTION_FIELD", "description"),
                title_field_name=get_env("NOTEMETA_TITLE_FIELD", "title"),
                enable_title=get_env("NOTEMETA_ENABLE_TITLE", True),
                truncate_content=get_env("NOTEMETA_TRUNCATE_CONTENT", True),
                max_tokens=get_env("NOTEMETA_MAX_TOKENS", 1000),
                truncate_method=get_env("NOTEMETA_TRUNCATE_METHOD", "head_only"),
                update_method=get_env("NOTEMETA_UPDATE_METHOD", "preserve_existing"),
                tags_prompt=get_env("NOTEMETA_TAGS_PROMPT", generation_defaults.tags_prompt),
                description_prompt=get_env(
                    "NOTEMETA_DESCRIPTION_PROMPT", generation_defaults.description_prompt
                ),
                title_prompt=get_env("NOTEMETA_TITLE_PROMPT", generation_defaults.title_prompt),
            ),
            vault=VaultConfig(root=get_env("NOTEMETA_VAULT_ROOT", ".")),
            logging=LoggingConfig(
                level=get_env("NOTEMETA_LOG_LEVEL", "INFO"),
                log_to_file=get_env("NOTEMETA_LOG_TO_FILE", True),
                log_dir=get_env("NOTEMETA_LOG_DIR", "logs"),
                file_rotation=get_env("NOTEMETA_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("NOTEMETA_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("NOTEMETA_LOG_COMPRESSION", "zip"),
                serialize=get_env("NOTEMETA_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Merge: env vars override YAML, key by key (non-default values only)
        final_dict = {**config_dict}
        default = cls()
        for section in ("llm", "generation", "vault", "logging"):
            env_values = getattr(env_config, section).model_dump()
            default_values = getattr(default, section).model_dump()
            overrides = {
                key: value for key, value in env_values.items() if value != default_values[key]
            }
            if overrides:
                final_dict[section] = {**(config_dict.get(section) or {}), **overrides}

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
