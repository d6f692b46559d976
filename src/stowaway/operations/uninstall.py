"""Uninstall operation: remove exactly what an install created."""

from __future__ import annotations

import logging
import shutil
from typing import TYPE_CHECKING

from stowaway.exceptions import PackageNotInstalledError
from stowaway.files import ancestors
from stowaway.files import exists
from stowaway.files import is_empty_dir
from stowaway.files import read_symlink
from stowaway.files import remove_path

if TYPE_CHECKING:
    from pathlib import Path

    from stowaway.package import LocalPackage

logger = logging.getLogger(__name__)


def uninstall_package(package: LocalPackage) -> None:
    """Uninstall a package using only the bookkeeping in its state directory.

    Every entry of links/ names an installed symlink (through the target
    anchor). Each one is removed, then its entry, then any ancestor
    directories left empty. Finally the whole state directory goes.

    An installed symlink that is already gone is treated as cleaned up.

    Args:
        package: Package to uninstall

    Raises:
        PackageNotInstalledError: If the package state does not exist
        OSError: If removing a link or an emptied directory fails. The
            state directory is left in place so uninstall can be retried.
    """
    if not exists(package.state):
        raise PackageNotInstalledError(package.state)

    logger.info("Uninstalling %s from %s", package.name, package.target)

    for entry in _link_entries(package.links):
        installed_path = read_symlink(entry)

        try:
            remove_path(installed_path)
        except FileNotFoundError:
            logger.debug("Already removed: %s", installed_path)

        remove_path(entry)
        _remove_empty_parents(installed_path)

    shutil.rmtree(package.state)
    logger.info("Uninstalled %s", package.name)


def _link_entries(links: Path) -> list[Path]:
    """Entries of the links directory, sorted by name.

    A missing links directory (install interrupted right after the state
    directory appeared) has no entries.
    """
    try:
        return sorted(links.iterdir())
    except FileNotFoundError:
        return []


def _remove_empty_parents(path: Path) -> None:
    """Remove empty ancestors of path, nearest first.

    Stops at the first non-empty ancestor, or silently at the first one
    that cannot be inspected. Removal errors propagate.
    """
    for parent in ancestors(path):
        try:
            empty = is_empty_dir(parent)
        except OSError:
            break

        if not empty:
            break

        remove_path(parent)
