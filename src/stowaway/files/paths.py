"""Path inspection helpers."""

import os
from pathlib import Path


def exists(path: Path) -> bool:
    """Check whether anything, including a broken symlink, exists at path.

    Unlike Path.exists(), only a missing path gives False; every other
    error (permission denied, a file used as a directory, ...) propagates.
    """
    try:
        path.lstat()
    except FileNotFoundError:
        return False
    return True


def is_empty_dir(path: Path) -> bool:
    """Check whether the directory at path (following symlinks) has no entries.

    Raises:
        OSError: If path cannot be listed
    """
    with os.scandir(path) as it:
        return next(it, None) is None


def ancestors(path: Path) -> list[Path]:
    """Return the ancestors of path, nearest first, up to the filesystem root."""
    return list(path.parents)
