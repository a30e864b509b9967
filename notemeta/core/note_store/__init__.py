"""
Note store: markdown notes on disk and their YAML front matter.
"""

from notemeta.core.note_store.frontmatter import (
    MergePolicy,
    merge_value,
    render_note,
    split_frontmatter,
)
from notemeta.core.note_store.note_store import NoteStore

__all__ = [
    "MergePolicy",
    "NoteStore",
    "merge_value",
    "render_note",
    "split_frontmatter",
]
