"""Package manifest (stowaway.toml) loading."""

import tomllib
from pathlib import Path

from stowaway.exceptions import ManifestError
from stowaway.models import Manifest

MANIFEST_FILENAME = "stowaway.toml"

_FIELDS = ("name", "source", "hooks")


def default_manifest(package_root: Path) -> Manifest:
    """Manifest used for keys missing from a package's stowaway.toml."""
    return Manifest(name=package_root.name, source="src", hooks="hooks")


def manifest_from_dict(data: dict, defaults: Manifest) -> Manifest:
    """Overlay the keys present in data on top of defaults.

    Unknown keys are ignored.

    Raises:
        ManifestError: If a known key has a non-string value
    """
    values = {field: getattr(defaults, field) for field in _FIELDS}
    for field in _FIELDS:
        if field not in data:
            continue
        value = data[field]
        if not isinstance(value, str):
            raise ManifestError(
                f"Manifest key '{field}' must be a string, got {type(value).__name__}"
            )
        values[field] = value
    return Manifest(**values)


def load_manifest(path: Path, package_root: Path) -> Manifest:
    """Load a manifest file, filling absent keys with defaults.

    Args:
        path: Path to the stowaway.toml file
        package_root: Package root the defaults are derived from

    Raises:
        ManifestError: If the file is not valid TOML or has bad values
        OSError: If the file cannot be read
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in manifest {path}: {e}") from e

    return manifest_from_dict(data, default_manifest(package_root))
