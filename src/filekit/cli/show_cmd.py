"""Show command: print every location the resolver settles on."""

from __future__ import annotations

import typer
from rich.table import Table

from filekit.cli import console
from filekit.core.resolver import get_resolver


def show_command(
    as_json: bool = typer.Option(False, "--json", help="Print the locations as JSON."),
) -> None:
    """Show the executable, project and working directories of this process."""
    locations = get_resolver().snapshot()

    if as_json:
        typer.echo(locations.model_dump_json(indent=2))
        return

    table = Table(title="Resolved locations", show_header=False)
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Value")
    table.add_row("Executable", str(locations.executable_path))
    table.add_row("Executable folder", str(locations.executable_folder))
    table.add_row("Project folder", str(locations.project_folder))
    table.add_row("Working directory", str(locations.working_directory))
    table.add_row("Dev GUI", "yes" if locations.environment.inside_dev_gui else "no")
    table.add_row("Test harness", "yes" if locations.environment.inside_test_harness else "no")
    console.print(table)
