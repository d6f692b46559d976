"""Output formatting for stowaway operations."""

from collections.abc import Sequence
from pathlib import Path

import typer


def print_stow_plan(names: Sequence[str], target: Path, delete: bool = False) -> None:
    """Print which packages a stow run is about to process.

    Args:
        names: Package names, in processing order
        target: Target directory
        delete: If True, packages are being uninstalled
    """
    action = "Uninstalling" if delete else "Installing"
    typer.secho(
        f"{action} into {_display_path(target)}:", fg=typer.colors.BRIGHT_BLACK
    )
    for name in names:
        typer.secho(f"  {name}", fg=typer.colors.BRIGHT_BLACK)


def print_stow_result(count: int, delete: bool = False) -> None:
    """Print the summary line of a finished stow run."""
    action = "Uninstalled" if delete else "Installed"
    typer.secho(
        f"✓ {action} {count} package{'s' if count != 1 else ''}",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_installed(name: str) -> None:
    typer.secho(f"✓ Installed {name}", fg=typer.colors.GREEN, bold=True)


def print_uninstalled(name: str, was_installed: bool = True) -> None:
    if was_installed:
        typer.secho(f"✓ Uninstalled {name}", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho(f"  {name} is not installed", fg=typer.colors.BRIGHT_BLACK)


def print_sources(sources: Sequence[Path]) -> None:
    """Print installed package sources, one per line, for scripting."""
    for source in sources:
        typer.echo(str(source))


def print_error(message: str, partial: str | None = None) -> None:
    """Print an error to stderr.

    Args:
        message: Error text
        partial: If given, the operation that may have been left half done
    """
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)
    if partial is not None:
        typer.secho(
            f"   Warning: Package may be partially {partial}. Check "
            "the target and state directories manually.",
            err=True,
        )


def prompt_selection(names: Sequence[str]) -> list[int]:
    """Ask the user to pick one or more entries of names.

    Returns:
        Indexes of the chosen names, in the order they were listed
    """
    typer.echo("Choose packages:")
    for number, name in enumerate(names, start=1):
        typer.echo(f"  {number}) {name}")

    def parse(value: str) -> list[int]:
        chosen = set()
        for token in value.replace(",", " ").split():
            if not token.isdigit() or not 1 <= int(token) <= len(names):
                raise typer.BadParameter(f"{token!r} is not a listed number")
            chosen.add(int(token) - 1)
        if not chosen:
            raise typer.BadParameter("choose at least one package")
        return sorted(chosen)

    return typer.prompt("Numbers (space or comma separated)", value_proc=parse)


def _display_path(path: Path) -> str:
    """Format path for display, using ~ for home directory.

    Args:
        path: Path to format

    Returns:
        String representation with ~ substitution if applicable
    """
    try:
        rel_path = path.relative_to(Path.home())
    except ValueError:
        return str(path)
    if rel_path == Path():
        return "~"
    return f"~/{rel_path}"
