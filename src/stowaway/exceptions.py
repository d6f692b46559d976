"""Custom exceptions for stowaway."""

from pathlib import Path


class StowawayError(Exception):
    """Base exception for stowaway."""


class PackageAlreadyInstalledError(StowawayError):
    """Package state directory already exists."""

    def __init__(self, state: Path):
        self.state = state
        super().__init__(f"Package already installed (state at {state})")


class PackageNotInstalledError(StowawayError):
    """Package state directory does not exist."""

    def __init__(self, state: Path):
        self.state = state
        super().__init__(f"Package not installed (no state at {state})")


class ManifestError(StowawayError):
    """Package manifest is invalid or malformed."""


class ConfigError(StowawayError):
    """Settings file is invalid or malformed."""


class HookError(StowawayError):
    """Hook failed to start or exited with a non-zero status."""

    def __init__(self, hook: str, executable: Path, returncode: int | None = None):
        self.hook = hook
        self.executable = executable
        self.returncode = returncode
        if returncode is None:
            message = f"Hook {hook} could not be run: {executable}"
        else:
            message = f"Hook {hook} exited with status {returncode}: {executable}"
        super().__init__(message)
