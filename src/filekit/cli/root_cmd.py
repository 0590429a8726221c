"""Root command: run the project marker search from an arbitrary folder."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from filekit.cli import cli_error, console
from filekit.core.paths import find_project_root
from filekit.core.resolver import get_resolver


def root_command(
    start: Optional[Path] = typer.Argument(None, help="Folder to start from (default: current directory)."),
    marker: Optional[str] = typer.Option(None, "--marker", "-m", help="Marker file name to look for."),
    no_workspace: bool = typer.Option(False, "--no-workspace", help="Ignore workspace metadata redirects."),
) -> None:
    """Find the nearest folder at or above START that holds the project marker."""
    settings = get_resolver().settings
    marker_file = marker or settings.project_marker
    workspace_file = None if no_workspace else settings.workspace_file
    start_dir = start if start is not None else Path.cwd()

    if not start_dir.is_dir():
        cli_error(f"Not a directory: {start_dir}")

    root = find_project_root(start_dir, marker_file, workspace_file)
    if root is None:
        cli_error(f"No {marker_file} found at or above {start_dir}")
    console.print(str(root), highlight=False, soft_wrap=True)
