"""User settings for stowaway."""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from stowaway.exceptions import ConfigError

DEFAULT_STATE_DIR = ".stowaway"


@dataclass
class Settings:
    """Settings read from the user's config.toml."""

    target: Path | None = None  # Default target directory (None: cwd)
    state_dir: str = DEFAULT_STATE_DIR  # State root name inside the target

    @classmethod
    def default_path(cls) -> Path:
        """Get default settings location using platformdirs."""
        return user_config_path("stowaway") / "config.toml"

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from TOML."""
        target = data.get("target")
        if target is not None and not isinstance(target, str):
            raise ConfigError("Setting 'target' must be a string")

        state_dir = data.get("state_dir", DEFAULT_STATE_DIR)
        if not isinstance(state_dir, str) or not state_dir or "/" in state_dir:
            raise ConfigError("Setting 'state_dir' must be a plain directory name")

        return cls(
            target=Path(target).expanduser() if target is not None else None,
            state_dir=state_dir,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load settings from TOML file. Returns defaults if it doesn't exist.

        Args:
            path: Path to settings file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            data = tomllib.loads(path.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in settings {path}: {e}") from e

        return cls.from_dict(data)
