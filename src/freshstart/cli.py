"""Typer entry point for the ``freshstart`` command."""

from pathlib import Path
from types import SimpleNamespace
from typing import Annotated, Optional

import typer

from . import __version__
from . import log as freshstart_log
from .commands.profiles import list_profiles as profiles_cmd
from .commands.run import run_cleanup as run_cmd

app = typer.Typer(
    name="freshstart",
    help="Strip a generated template project down to a fresh start.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in freshstart_log.LEVEL_NAMES:
        raise typer.BadParameter(
            f"expected one of: {', '.join(freshstart_log.LEVEL_NAMES)}"
        )
    return normalized


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"freshstart {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="Log verbosity (debug, info, success, warning, error).",
            callback=_validate_log_level,
        ),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colorized output.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Global options shared by every command."""
    del version
    if log_level is not None:
        freshstart_log.set_level(log_level)
    if no_color:
        freshstart_log.set_no_color(True)


@app.command("run")
def run(
    profile: Annotated[
        Optional[str],
        typer.Option("--profile", "-p", help="Built-in cleanup profile to use."),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="JSON file with profile overrides."),
    ] = None,
    directory: Annotated[
        Optional[Path],
        typer.Option(
            "--directory",
            "-C",
            help="Project root to clean (defaults to the current directory).",
        ),
    ] = None,
) -> None:
    """Clean the template project interactively."""
    run_cmd(SimpleNamespace(profile=profile, config=config, directory=directory))


@app.command("profiles")
def profiles() -> None:
    """List the built-in cleanup profiles."""
    profiles_cmd(SimpleNamespace())


if __name__ == "__main__":
    app()
