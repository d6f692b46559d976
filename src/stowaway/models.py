"""Data models for stowaway."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Hook(str, Enum):
    """Lifecycle hook names, matching executable names in a package's hooks dir."""

    BEFORE_INSTALL = "before_install"
    AFTER_INSTALL = "after_install"
    BEFORE_UNINSTALL = "before_uninstall"
    AFTER_UNINSTALL = "after_uninstall"
    BEFORE_INSTALL_ALL = "before_install_all"
    AFTER_INSTALL_ALL = "after_install_all"
    BEFORE_UNINSTALL_ALL = "before_uninstall_all"
    AFTER_UNINSTALL_ALL = "after_uninstall_all"


@dataclass
class Manifest:
    """Parsed stowaway.toml of a package."""

    name: str  # Display name
    source: str = "src"  # Subdirectory of the package root that gets linked
    hooks: str = "hooks"  # Subdirectory of the package root holding hooks


@dataclass
class StowOptions:
    """Options for a batch stow."""

    delete: bool = False  # Only uninstall, never (re)install


class Package(Protocol):
    """Anything the stow orchestrator can install and uninstall."""

    @property
    def name(self) -> str: ...

    def installed(self) -> bool: ...

    def install(self) -> None: ...

    def uninstall(self) -> None: ...

    def run_hook_if_exists(self, hook: Hook | str) -> None: ...
