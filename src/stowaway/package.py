"""Packages on disk and the loader that finds them."""

from dataclasses import dataclass
from pathlib import Path
from typing import Self

from stowaway.files import exists
from stowaway.manifest import MANIFEST_FILENAME
from stowaway.manifest import load_manifest
from stowaway.models import Hook
from stowaway.models import Manifest
from stowaway.operations.hooks import run_hook_if_exists
from stowaway.operations.install import install_package
from stowaway.operations.uninstall import uninstall_package


@dataclass
class LocalPackage:
    """A package stored on the local filesystem.

    All install state lives under ``state``. The directory existing is what
    makes the package installed.
    """

    state: Path  # Bookkeeping directory, unique per (target, source)
    source: Path  # Tree whose contents get symlinked
    package_root: Path  # Package root; equals source for simple packages
    target: Path  # Directory the symlinks are created under
    manifest: Manifest | None = None  # None for simple packages

    @property
    def source_link(self) -> Path:
        """Anchor symlink in state pointing to source."""
        return self.state / "source"

    @property
    def target_link(self) -> Path:
        """Anchor symlink in state pointing to target."""
        return self.state / "target"

    @property
    def links(self) -> Path:
        """Directory of numbered symlinks, one per installed symlink."""
        return self.state / "links"

    @property
    def name(self) -> str:
        if self.manifest is None:
            return self.source.name
        return self.manifest.name

    @classmethod
    def load(cls, state: Path, source: Path, target: Path) -> Self:
        """Load the package rooted at source.

        Only the source tree is read. A stowaway.toml at the root makes it
        a manifest package whose linked tree is a subdirectory; without one
        the whole root is linked and the package has no hooks.

        Args:
            state: Where the package keeps its install state
            source: Package root
            target: Directory to install into

        Raises:
            ManifestError: If stowaway.toml is malformed
        """
        package = cls(state=state, source=source, package_root=source, target=target)

        manifest_path = source / MANIFEST_FILENAME
        if exists(manifest_path):
            package.manifest = load_manifest(manifest_path, source)
            package.source = source / package.manifest.source

        return package

    def installed(self) -> bool:
        return exists(self.state)

    def install(self) -> None:
        install_package(self)

    def uninstall(self) -> None:
        uninstall_package(self)

    def run_hook_if_exists(self, hook: Hook | str) -> None:
        run_hook_if_exists(self, hook)
