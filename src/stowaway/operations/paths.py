"""Path normalization and state directory layout."""

import hashlib
from pathlib import Path

from stowaway.config import DEFAULT_STATE_DIR
from stowaway.files import read_symlink


def normalize_package_dir(package_dir: Path) -> Path:
    """Normalize and validate package directory path.

    Args:
        package_dir: Package root

    Returns:
        Absolute path to package directory

    Raises:
        FileNotFoundError: If package_dir does not exist
        NotADirectoryError: If package_dir is not a directory
    """
    package_dir = package_dir.resolve()

    if not package_dir.exists():
        raise FileNotFoundError(f"Package directory does not exist: {package_dir}")
    if not package_dir.is_dir():
        raise NotADirectoryError(f"Package path is not a directory: {package_dir}")

    return package_dir


def normalize_target_dir(target_dir: Path) -> Path:
    """Normalize and validate target directory path.

    Args:
        target_dir: Directory where symlinks will be created

    Returns:
        Absolute path to target directory

    Raises:
        FileNotFoundError: If target_dir does not exist
        NotADirectoryError: If target_dir is not a directory
    """
    target_dir = target_dir.resolve()

    if not target_dir.exists():
        raise FileNotFoundError(f"Target directory does not exist: {target_dir}")
    if not target_dir.is_dir():
        raise NotADirectoryError(f"Target path is not a directory: {target_dir}")

    return target_dir


def package_id(package_dir: Path) -> str:
    """Short stable identifier derived from an absolute package path."""
    digest = hashlib.md5(str(package_dir).encode(), usedforsecurity=False)
    return digest.hexdigest()[:6]


def state_root(target_dir: Path, state_dir: str = DEFAULT_STATE_DIR) -> Path:
    """Directory inside the target that holds every package's state."""
    return target_dir / state_dir


def state_path(
    target_dir: Path, package_dir: Path, state_dir: str = DEFAULT_STATE_DIR
) -> Path:
    """State directory of the package at package_dir installed into target_dir."""
    return state_root(target_dir, state_dir) / package_id(package_dir)


def installed_sources(
    target_dir: Path,
    prefix: Path | None = None,
    state_dir: str = DEFAULT_STATE_DIR,
) -> list[Path]:
    """List the source directories of every package installed into target_dir.

    Args:
        target_dir: Target directory to inspect
        prefix: If given, only sources whose path starts with it are kept
        state_dir: Name of the state root inside the target

    Returns:
        Source anchor values, ordered by state directory name
    """
    root = state_root(target_dir, state_dir)
    try:
        states = sorted(p for p in root.iterdir() if p.is_dir())
    except FileNotFoundError:
        return []

    sources = [read_symlink(state / "source") for state in states]
    if prefix is None:
        return sources

    prefix_str = str(prefix.resolve())
    return [source for source in sources if str(source).startswith(prefix_str)]
