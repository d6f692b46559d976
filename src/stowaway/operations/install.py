"""Install operation: build the symlink farm and its bookkeeping."""

from __future__ import annotations

import errno
import logging
import os
from typing import TYPE_CHECKING

from stowaway.exceptions import PackageAlreadyInstalledError
from stowaway.files import create_symlink
from stowaway.files import discover_files
from stowaway.files import exists

if TYPE_CHECKING:
    from stowaway.package import LocalPackage

logger = logging.getLogger(__name__)

LINKS_DIR_MODE = 0o700
TARGET_DIR_MODE = 0o755


def install_package(package: LocalPackage) -> None:
    """Install a package by creating symlinks in its target.

    Creates, in order: the links directory (and with it the state
    directory), the source and target anchors, then for every linkable
    entry of the source tree a numbered entry in links/ followed by the
    installed symlink itself. Entries are addressed through the anchors,
    so the bookkeeping stays valid if the caller's paths change later.

    Args:
        package: Package to install

    Raises:
        PackageAlreadyInstalledError: If the package state already exists
        FileExistsError: If something already occupies an install path. It is
            left alone and not recorded in links/.
        OSError: If any filesystem step fails. Nothing is rolled back; the
            package reads as installed and uninstall is the recovery path.
    """
    if exists(package.state):
        raise PackageAlreadyInstalledError(package.state)

    logger.info("Installing %s into %s", package.name, package.target)

    package.links.mkdir(mode=LINKS_DIR_MODE, parents=True)
    create_symlink(package.source_link, package.source)
    create_symlink(package.target_link, package.target)

    count = 0
    for rel_path in discover_files(package.source_link):
        install_path = package.target_link / rel_path

        # Never record a path this install did not create
        if exists(install_path):
            raise FileExistsError(
                errno.EEXIST, os.strerror(errno.EEXIST), str(install_path)
            )

        # links/<n> always exists before the link it records
        create_symlink(package.links / str(count), install_path)
        count += 1

        install_path.parent.mkdir(mode=TARGET_DIR_MODE, parents=True, exist_ok=True)
        create_symlink(install_path, package.source_link / rel_path)

    logger.info("Installed %s (%d links)", package.name, count)
