"""File and directory discovery operations."""

import os
import stat
from collections.abc import Iterator
from pathlib import Path


def walk_tree(root: Path) -> Iterator[tuple[Path, int]]:
    """Walk a directory tree in a stable order.

    Names inside each directory are visited in sorted order, depth first,
    with every directory yielded before its children. Symlinks are never
    followed, except for ``root`` itself.

    Args:
        root: Directory to walk (may be a symlink to a directory)

    Yields:
        (relative path, st_mode) for every entry below root. The root
        itself is not yielded.
    """
    yield from _walk(root, Path())


def _walk(root: Path, rel_dir: Path) -> Iterator[tuple[Path, int]]:
    with os.scandir(root / rel_dir) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        rel_path = rel_dir / entry.name
        mode = entry.stat(follow_symlinks=False).st_mode
        yield rel_path, mode
        if stat.S_ISDIR(mode):
            yield from _walk(root, rel_path)


def discover_files(package_dir: Path) -> Iterator[Path]:
    """Discover all linkable entries in package directory, lazily.

    Args:
        package_dir: Directory to scan for files

    Yields:
        Relative paths of every regular file or symlink, in walk order.
        Symlinks to directories are included but not descended into.
    """
    for rel_path, mode in walk_tree(package_dir):
        if stat.S_ISREG(mode) or stat.S_ISLNK(mode):
            yield rel_path
