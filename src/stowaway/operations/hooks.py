"""Hook execution."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from stowaway.exceptions import HookError
from stowaway.files import exists
from stowaway.models import Hook

if TYPE_CHECKING:
    from stowaway.package import LocalPackage

logger = logging.getLogger(__name__)


def hook_environment(package: LocalPackage) -> dict[str, str]:
    """The complete environment a hook runs with.

    Nothing is inherited from the calling process, PATH included, so hooks
    must call other programs by absolute path.
    """
    return {
        "STOWAWAY_SOURCE": str(package.source),
        "STOWAWAY_TARGET": str(package.target),
        "STOWAWAY_PACKAGE_ROOT": str(package.package_root),
    }


def run_hook_if_exists(package: LocalPackage, hook: Hook | str) -> None:
    """Run a package hook, if the package has a manifest and the hook exists.

    The hook gets the package state directory as its only argument.

    Args:
        package: Package whose hooks directory is searched
        hook: Hook name

    Raises:
        HookError: If the hook cannot be started or exits non-zero
    """
    if package.manifest is None:
        return

    name = hook.value if isinstance(hook, Hook) else hook
    executable = package.package_root / package.manifest.hooks / name
    if not exists(executable):
        return

    logger.info("Running %s hook for %s", name, package.name)
    try:
        subprocess.run(
            [str(executable), str(package.state)],
            env=hook_environment(package),
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise HookError(name, executable, e.returncode) from e
    except OSError as e:
        raise HookError(name, executable) from e
