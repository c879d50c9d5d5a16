"""Implementation for the ``freshstart profiles`` command."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from .. import config


def list_profiles(args: object) -> None:
    """Print the built-in cleanup profiles."""
    del args
    table = Table(title="Cleanup profiles")
    table.add_column("Name", style="bold")
    table.add_column("Answers")
    table.add_column("Install failure")
    table.add_column("Script prompt")
    table.add_column("Description")
    for name in config.profile_names():
        profile = config.builtin_profile(name)
        table.add_row(
            profile.name,
            "/".join(profile.affirmative),
            profile.install_failure,
            profile.self_script or "-",
            profile.description,
        )
    Console(soft_wrap=True, highlight=False).print(table)
