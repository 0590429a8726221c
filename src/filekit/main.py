import logging
import platform
import sys
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from filekit.cli.root_cmd import root_command
from filekit.cli.show_cmd import show_command

app = typer.Typer(
    name="filekit",
    help="Inspect where a program's executable, project and working directories resolve to.",
    no_args_is_help=True,
    invoke_without_command=True,
)

app.command("show")(show_command)
app.command("root")(root_command)


def version_callback(value: bool):
    if value:
        typer.echo(f"filekit {pkg_version('filekit')} (python {platform.python_version()}, {sys.platform})")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show the filekit version and host platform, then exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Log every marker check, redirect and fallback while resolving.",
    ),
):
    """Inspect where a program's executable, project and working directories resolve to.

    Warnings about fallbacks are always shown; --debug adds the resolution trace.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger("filekit").setLevel(level)


if __name__ == "__main__":
    app()
