"""
YAML front matter parsing, merging and rendering.

The front matter is the "---" delimited YAML block at the start of a
markdown note. Values generated for a note are merged into it under a
MergePolicy.
"""

from enum import Enum
from typing import Any

import frontmatter
import yaml

from notemeta.utils.exceptions import NoteStoreError

YAML_HANDLER = frontmatter.YAMLHandler()


class MergePolicy(str, Enum):
    """How a generated value is combined with an existing one."""

    APPEND = "append"  # concatenate strings, union lists
    UPDATE = "update"  # overwrite
    KEEP = "keep"  # write only if the key is absent


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """
    Split a note into its front matter and body.

    Notes without a leading "---" block are returned unchanged as body.
    When a block is present, the body is stripped of surrounding whitespace.

    Args:
        text: Full note text

    Returns:
        Tuple of (front matter mapping, body text)

    Raises:
        NoteStoreError: If the front matter is not valid YAML or not a mapping
    """
    if not YAML_HANDLER.detect(text):
        return {}, text

    try:
        post = frontmatter.loads(text, handler=YAML_HANDLER)
    except yaml.YAMLError as e:
        raise NoteStoreError(f"Invalid front matter: {e}") from e

    if not post.metadata:
        _reject_non_mapping(text)

    return dict(post.metadata), post.content


def _reject_non_mapping(text: str) -> None:
    # python-frontmatter silently drops a block that isn't a mapping
    try:
        block, _ = YAML_HANDLER.split(text.strip())
    except ValueError:
        return
    data = YAML_HANDLER.load(block)
    if data is not None and not isinstance(data, dict):
        raise NoteStoreError("Front matter must be a mapping", {"type": type(data).__name__})


def render_note(metadata: dict[str, Any], body: str) -> str:
    """Render front matter and body back into note text."""
    if not metadata:
        return body
    post = frontmatter.Post(body)
    post.metadata.update(metadata)
    return frontmatter.dumps(post, sort_keys=False) + "\n"


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [value]


def merge_value(
    metadata: dict[str, Any], key: str, value: Any, policy: MergePolicy
) -> bool:
    """
    Merge a value into a front matter mapping in place.

    Args:
        metadata: Mapping to update
        key: Front matter key
        value: Value to merge; None is ignored
        policy: Merge policy

    Returns:
        True if the mapping changed
    """
    if value is None:
        return False

    exists = key in metadata
    old_value = metadata.get(key)

    if policy == MergePolicy.KEEP:
        if exists:
            return False
        new_value = value
    elif policy == MergePolicy.APPEND and isinstance(value, str):
        new_value = ("" if old_value is None else str(old_value)) + value
    elif policy == MergePolicy.APPEND and isinstance(value, list):
        new_value = []
        for item in _as_list(old_value) + value:
            if item not in new_value:
                new_value.append(item)
    else:
        new_value = value

    if exists and old_value == new_value:
        return False

    metadata[key] = new_value
    return True
