"""Shared fixtures for stowaway tests."""

import os
from pathlib import Path

import pytest


def _snapshot(root: Path) -> dict[str, str | None]:
    """Map every entry below root to its symlink value (None if not a symlink)."""
    entries = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            path = Path(dirpath) / name
            value = str(path.readlink()) if path.is_symlink() else None
            entries[str(path.relative_to(root))] = value
    return entries


@pytest.fixture
def snapshot():
    """Return a function recording the entries of a directory tree."""
    return _snapshot


@pytest.fixture
def make_tree():
    """Return a function creating files and directories below a root.

    Names ending in "/" become directories, everything else an empty file.
    """

    def make(root: Path, names: list[str]) -> None:
        for name in names:
            path = root / name
            if name.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()

    return make
