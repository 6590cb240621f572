"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from notectl.models.config import CorpusConfig


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def notes_tree(tmp_path: Path) -> Path:
    """Create a small notes directory.

    Layout::

        notes/
            a.org
            .hidden.org
            c.txt
            sub/b.org.gpg
            sub/deep/e.org.age
            .attach/d.org
    """
    root = tmp_path / "notes"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / ".attach").mkdir()
    (root / "a.org").write_text("* A\n")
    (root / ".hidden.org").write_text("* Hidden\n")
    (root / "c.txt").write_text("plain text\n")
    (root / "sub" / "b.org.gpg").write_bytes(b"\x85\x02encrypted")
    (root / "sub" / "deep" / "e.org.age").write_bytes(b"age-encryption.org/v1")
    (root / ".attach" / "d.org").write_text("* D\n")
    return root


@pytest.fixture
def notes_config(notes_tree: Path) -> CorpusConfig:
    """Corpus config for notes_tree excluding attachment directories."""
    return CorpusConfig(root=notes_tree, exclude=r"\.attach/", backends=[])


@pytest.fixture
def expected_files(notes_tree: Path) -> set[str]:
    """Canonical paths of the managed files in notes_tree."""
    root = notes_tree.resolve()
    return {
        str(root / "a.org"),
        str(root / ".hidden.org"),
        str(root / "sub" / "b.org.gpg"),
        str(root / "sub" / "deep" / "e.org.age"),
    }


@pytest.fixture
def find_output(notes_tree: Path) -> str:
    """Output of ``find -L notes -type f ( -name *.org ... )`` for notes_tree."""
    return "\n".join(
        [
            f"{notes_tree}/a.org",
            f"{notes_tree}/.hidden.org",
            f"{notes_tree}/sub/b.org.gpg",
            f"{notes_tree}/sub/deep/e.org.age",
            f"{notes_tree}/.attach/d.org",
        ]
    ) + "\n"
