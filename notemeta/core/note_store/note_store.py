"""
File-backed note store.

Reads markdown notes under a vault root, caches each note's parsed front
matter until the file changes, and writes merged front matter back.
"""

import copy
import re
from collections import Counter
from pathlib import Path
from typing import Any

from notemeta.core.note_store.frontmatter import (
    MergePolicy,
    merge_value,
    render_note,
    split_frontmatter,
)
from notemeta.utils.exceptions import NoteStoreError, NotFoundError, ValidationError
from notemeta.utils.logger import get_logger

logger = get_logger(__name__)

INLINE_TAG_PATTERN = re.compile(r"(?<![\w#/])#([\w/-]+)")


class NoteStore:
    """
    Markdown notes on disk, addressed by paths relative to a root directory.

    Usage:
        store = NoteStore("~/notes")
        fm = store.frontmatter("ideas/today.md")
        store.update_frontmatter("ideas/today.md", "tags", ["python"], MergePolicy.APPEND)
    """

    def __init__(self, root: str | Path):
        """
        Initialize note store.

        Args:
            root: Vault root directory
        """
        self.root = Path(root).expanduser().resolve()
        self._cache: dict[Path, tuple[int, dict[str, Any], str]] = {}

    def resolve(self, path: str | Path) -> Path:
        """
        Resolve a note path inside the vault.

        Raises:
            ValidationError: If the path points outside the vault root
        """
        resolved = (self.root / path).resolve()
        if not resolved.is_relative_to(self.root):
            raise ValidationError(f"Path is outside the vault: {path}", {"root": str(self.root)})
        return resolved

    def read(self, path: str | Path) -> str:
        """
        Read full note text.

        Raises:
            NotFoundError: If the note doesn't exist
        """
        resolved = self.resolve(path)
        if not resolved.is_file():
            raise NotFoundError(f"Note not found: {path}")
        return resolved.read_text(encoding="utf-8")

    def _parse(self, path: str | Path) -> tuple[dict[str, Any], str]:
        resolved = self.resolve(path)
        if not resolved.is_file():
            raise NotFoundError(f"Note not found: {path}")

        mtime = resolved.stat().st_mtime_ns
        cached = self._cache.get(resolved)
        if cached and cached[0] == mtime:
            return cached[1], cached[2]

        frontmatter, body = split_frontmatter(resolved.read_text(encoding="utf-8"))
        self._cache[resolved] = (mtime, frontmatter, body)
        return frontmatter, body

    def frontmatter(self, path: str | Path) -> dict[str, Any]:
        """
        Get the parsed front matter of a note.

        Returns a copy; cached until the file's modification time changes.
        """
        return copy.deepcopy(self._parse(path)[0])

    def body(self, path: str | Path) -> str:
        """Get the note text after the front matter (stripped when a block is present)."""
        return self._parse(path)[1]

    def update_frontmatter(
        self,
        path: str | Path,
        key: str,
        value: Any,
        policy: MergePolicy = MergePolicy.UPDATE,
    ) -> bool:
        """
        Read-modify-write one front matter key.

        Args:
            path: Note path
            key: Front matter key
            value: Value to merge (None is ignored)
            policy: Merge policy

        Returns:
            True if the note was rewritten
        """
        policy = MergePolicy(policy)
        resolved = self.resolve(path)
        frontmatter, body = split_frontmatter(self.read(path))

        if not merge_value(frontmatter, key, value, policy):
            return False

        try:
            resolved.write_text(render_note(frontmatter, body), encoding="utf-8")
        except OSError as e:
            raise NoteStoreError(f"Failed to write note {path}: {e}") from e

        self._cache.pop(resolved, None)
        logger.debug(f"Updated front matter key '{key}' in {path} ({policy.value})")
        return True

    def markdown_files(self) -> list[Path]:
        """List markdown notes relative to the root, skipping hidden directories."""
        files = []
        for file in self.root.rglob("*.md"):
            relative = file.relative_to(self.root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            files.append(relative)
        return sorted(files)

    def load_tags(self, tags_field: str = "tags") -> dict[str, int]:
        """
        Count tag usage across the vault.

        Counts front matter tags and inline #tags; the leading "#" is dropped.

        Args:
            tags_field: Front matter key holding tags

        Returns:
            Mapping of tag to number of occurrences
        """
        counts: Counter[str] = Counter()
        for path in self.markdown_files():
            try:
                frontmatter, body = self._parse(path)
            except NoteStoreError as e:
                logger.warning(f"Skipping {path} while loading tags: {e.message}")
                continue

            raw_tags = frontmatter.get(tags_field)
            if isinstance(raw_tags, str):
                raw_tags = raw_tags.split(",")
            for tag in raw_tags if isinstance(raw_tags, list) else []:
                name = str(tag).strip().lstrip("#")
                if name:
                    counts[name] += 1

            for name in INLINE_TAG_PATTERN.findall(body):
                if not name.isdigit():
                    counts[name] += 1

        return dict(counts)
