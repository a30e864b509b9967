"""
Fixtures for note store tests.
"""

import pytest

from notemeta.core.note_store import NoteStore


@pytest.fixture
def vault(tmp_path):
    """Create a small vault of markdown notes."""
    (tmp_path / "daily").mkdir()
    (tmp_path / ".obsidian").mkdir()

    (tmp_path / "with_fm.md").write_text(
        "---\ntags:\n  - python\n  - notes\ndescription: Existing\n---\n# Heading\nBody with #inline tag.\n",
        encoding="utf-8",
    )
    (tmp_path / "plain.md").write_text("Just text #python and #123 and #项目\n", encoding="utf-8")
    (tmp_path / "daily" / "today.md").write_text(
        "---\ntags: python, daily\n---\nNothing here\n", encoding="utf-8"
    )
    (tmp_path / ".obsidian" / "hidden.md").write_text("#secret\n", encoding="utf-8")
    (tmp_path / "readme.txt").write_text("#ignored\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def store(vault):
    """Create a note store over the test vault."""
    return NoteStore(vault)
