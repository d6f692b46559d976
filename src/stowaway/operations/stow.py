"""Batch install/uninstall with bracketing hooks."""

import logging
from collections.abc import Sequence

from stowaway.models import Hook
from stowaway.models import Package
from stowaway.models import StowOptions

logger = logging.getLogger(__name__)


def stow(packages: Sequence[Package], options: StowOptions | None = None) -> None:
    """Install (or with options.delete, uninstall) a batch of packages.

    Runs in three passes, each finished before the next starts:

    1. the before_install_all (before_uninstall_all) hook of every package;
    2. per package: if installed, before_uninstall, uninstall and
       after_uninstall; then, unless deleting, before_install, install
       and after_install. Installed packages are therefore always
       reinstalled from scratch;
    3. the after_install_all (after_uninstall_all) hook of every package.

    The first error stops the whole batch and propagates.
    """
    if options is None:
        options = StowOptions()

    if options.delete:
        before_all, after_all = Hook.BEFORE_UNINSTALL_ALL, Hook.AFTER_UNINSTALL_ALL
    else:
        before_all, after_all = Hook.BEFORE_INSTALL_ALL, Hook.AFTER_INSTALL_ALL

    for package in packages:
        package.run_hook_if_exists(before_all)

    for package in packages:
        if package.installed():
            package.run_hook_if_exists(Hook.BEFORE_UNINSTALL)
            package.uninstall()
            package.run_hook_if_exists(Hook.AFTER_UNINSTALL)

        if not options.delete:
            package.run_hook_if_exists(Hook.BEFORE_INSTALL)
            package.install()
            package.run_hook_if_exists(Hook.AFTER_INSTALL)

    for package in packages:
        package.run_hook_if_exists(after_all)

    logger.info(
        "%s %d package(s)", "Deleted" if options.delete else "Stowed", len(packages)
    )


def reinstall(package: Package) -> None:
    """Install a package, uninstalling it first if needed. No hooks run."""
    if package.installed():
        package.uninstall()
    package.install()


def remove(package: Package) -> bool:
    """Uninstall a package if it is installed. No hooks run.

    Returns:
        True if the package was installed and has been removed
    """
    if not package.installed():
        return False
    package.uninstall()
    return True
