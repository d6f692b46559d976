"""Symlink operations."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def create_symlink(link_path: Path, value: Path) -> None:
    """Create a symlink at link_path whose stored value is value.

    The value is written verbatim, so an absolute value stays absolute.

    Raises:
        FileExistsError: If anything already exists at link_path
    """
    logger.debug("Creating symlink %s -> %s", link_path, value)
    link_path.symlink_to(value)


def read_symlink(link_path: Path) -> Path:
    """Return the stored value of a symlink without resolving it."""
    return link_path.readlink()


def remove_path(path: Path) -> None:
    """Remove a file, a symlink or an empty directory.

    Symlinks are unlinked even when they point at a directory.

    Raises:
        FileNotFoundError: If nothing exists at path
        OSError: If path is a non-empty directory or cannot be removed
    """
    if path.is_dir() and not path.is_symlink():
        logger.debug("Removing directory %s", path)
        path.rmdir()
    else:
        logger.debug("Removing %s", path)
        path.unlink()
