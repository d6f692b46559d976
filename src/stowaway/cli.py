"""Command-line interface for stowaway."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from stowaway import __version__
from stowaway.config import Settings
from stowaway.exceptions import ConfigError
from stowaway.exceptions import HookError
from stowaway.exceptions import ManifestError
from stowaway.exceptions import PackageAlreadyInstalledError
from stowaway.exceptions import PackageNotInstalledError
from stowaway.exceptions import StowawayError
from stowaway.models import StowOptions
from stowaway.operations import installed_sources
from stowaway.operations import normalize_package_dir
from stowaway.operations import normalize_target_dir
from stowaway.operations import reinstall
from stowaway.operations import remove
from stowaway.operations import state_path
from stowaway.operations import stow as stow_packages
from stowaway.output import print_error
from stowaway.output import print_installed
from stowaway.output import print_sources
from stowaway.output import print_stow_plan
from stowaway.output import print_stow_result
from stowaway.output import print_uninstalled
from stowaway.output import prompt_selection
from stowaway.package import LocalPackage

app = typer.Typer(help="Symlink farm manager")

TargetOption = Annotated[
    Path | None,
    typer.Option(
        "--target",
        "-t",
        help="Installation target (default: settings file, then $PWD)",
    ),
]
PackagesArgument = Annotated[
    list[Path], typer.Argument(help="Package directories", show_default=False)
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"stowaway {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every filesystem change")
    ] = False,
) -> None:
    """Symlink farm manager."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@contextmanager
def _report_errors(partial: str | None = None) -> Iterator[None]:
    """Turn stowaway and filesystem errors into a message and exit code 1."""
    try:
        yield
    except (PackageAlreadyInstalledError, PackageNotInstalledError) as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except ManifestError as e:
        print_error(f"Manifest error: {e}")
        raise typer.Exit(1) from None
    except ConfigError as e:
        print_error(f"Settings error: {e}")
        raise typer.Exit(1) from None
    except HookError as e:
        print_error(str(e), partial=partial)
        raise typer.Exit(1) from None
    except PermissionError as e:
        print_error(f"Permission denied: {e}", partial=partial)
        raise typer.Exit(1) from None
    except FileExistsError as e:
        print_error(f"File exists in target: {e}", partial=partial)
        raise typer.Exit(1) from None
    except OSError as e:
        print_error(f"Filesystem error: {e}", partial=partial)
        raise typer.Exit(1) from None
    except StowawayError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None


def _resolve_target(target: Path | None, settings: Settings) -> Path:
    if target is None:
        target = settings.target if settings.target is not None else Path.cwd()
    return normalize_target_dir(target)


def _load_packages(
    sources: list[Path], target: Path, settings: Settings, must_exist: bool = True
) -> list[LocalPackage]:
    packages = []
    for source in sources:
        # A package being removed may already be gone from disk
        source = normalize_package_dir(source) if must_exist else source.resolve()
        state = state_path(target, source, settings.state_dir)
        packages.append(LocalPackage.load(state, source, target))
    return packages


@app.command()
def stow(
    packages: PackagesArgument,
    target: TargetOption = None,
    delete: Annotated[
        bool, typer.Option("--delete", "-D", help="Uninstall the packages")
    ] = False,
    interactive: Annotated[
        bool,
        typer.Option(
            "--interactive",
            "-i",
            help="Choose which of the given packages to process",
        ),
    ] = False,
) -> None:
    """Install (or with --delete, uninstall) packages, running their hooks."""
    with _report_errors("uninstalled" if delete else "installed"):
        settings = Settings.load()
        target_dir = _resolve_target(target, settings)
        loaded = _load_packages(
            packages, target_dir, settings, must_exist=not delete
        )

        if interactive:
            chosen = prompt_selection([p.name for p in loaded])
            loaded = [loaded[i] for i in chosen]

        print_stow_plan([p.name for p in loaded], target_dir, delete=delete)
        stow_packages(loaded, StowOptions(delete=delete))
        print_stow_result(len(loaded), delete=delete)


@app.command()
def install(packages: PackagesArgument, target: TargetOption = None) -> None:
    """Install packages without running hooks, reinstalling installed ones."""
    with _report_errors("installed"):
        settings = Settings.load()
        target_dir = _resolve_target(target, settings)
        for package in _load_packages(packages, target_dir, settings):
            reinstall(package)
            print_installed(package.name)


@app.command()
def uninstall(packages: PackagesArgument, target: TargetOption = None) -> None:
    """Uninstall packages without running hooks."""
    with _report_errors("uninstalled"):
        settings = Settings.load()
        target_dir = _resolve_target(target, settings)
        for package in _load_packages(
            packages, target_dir, settings, must_exist=False
        ):
            print_uninstalled(package.name, was_installed=remove(package))


@app.command("packages")
def list_packages(
    target: TargetOption = None,
    prefix: Annotated[
        Path | None,
        typer.Option("--prefix", "-p", help="Only list sources under this path"),
    ] = None,
) -> None:
    """List the sources of installed packages."""
    with _report_errors():
        settings = Settings.load()
        target_dir = _resolve_target(target, settings)
        print_sources(installed_sources(target_dir, prefix, settings.state_dir))


def main() -> None:
    """Main entry point for the stowaway CLI."""
    app()


if __name__ == "__main__":
    main()
