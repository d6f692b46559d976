"""High-level operations for stowaway."""

from stowaway.operations.hooks import run_hook_if_exists
from stowaway.operations.install import install_package
from stowaway.operations.paths import installed_sources
from stowaway.operations.paths import normalize_package_dir
from stowaway.operations.paths import normalize_target_dir
from stowaway.operations.paths import state_path
from stowaway.operations.stow import reinstall
from stowaway.operations.stow import remove
from stowaway.operations.stow import stow
from stowaway.operations.uninstall import uninstall_package

__all__ = [
    "install_package",
    "installed_sources",
    "normalize_package_dir",
    "normalize_target_dir",
    "reinstall",
    "remove",
    "run_hook_if_exists",
    "state_path",
    "stow",
    "uninstall_package",
]
