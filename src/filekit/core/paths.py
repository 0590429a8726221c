"""Project root discovery: walk upward until a marker file turns up."""

from __future__ import annotations

import logging
import os
import plistlib
from pathlib import Path

logger = logging.getLogger(__name__)

WORKSPACE_PATH_KEY = "WorkspacePath"


def standardize(path: Path) -> Path:
    """Absolute form of *path* with ``.`` and ``..`` segments collapsed.

    Symlinks are left alone; only the spelling of the path changes.
    """
    return Path(os.path.normpath(path.absolute()))


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def read_workspace_redirect(metadata_file: Path) -> Path | None:
    """Return the directory a workspace metadata file points at, if any.

    Anything unreadable or malformed counts as no redirect.
    """
    try:
        with open(metadata_file, "rb") as f:
            data = plistlib.load(f)
    except Exception:
        return None
    if not isinstance(data, dict):
        return None
    workspace = data.get(WORKSPACE_PATH_KEY)
    if not isinstance(workspace, str) or not workspace:
        return None
    # Relative redirects are taken from the folder holding the metadata file.
    return standardize(metadata_file.parent / workspace)


def find_project_root(
    start: Path,
    marker_file: str = "pyproject.toml",
    workspace_file: str | None = None,
) -> Path | None:
    """Search *start* and its ancestors for *marker_file*.

    Returns the first directory holding the marker, or the target of a
    *workspace_file* redirect met on the way up.  Returns ``None`` once the
    filesystem root has been checked without a match.
    """
    directory = standardize(start) / "dummy"
    while True:
        directory = standardize(directory / "..")

        if _exists(directory / marker_file):
            logger.debug("Found %s in %s", marker_file, directory)
            return directory

        if workspace_file is not None:
            metadata = directory / workspace_file
            if _exists(metadata):
                redirect = read_workspace_redirect(metadata)
                if redirect is not None:
                    logger.debug("Following %s in %s to %s", workspace_file, directory, redirect)
                    return redirect

        if directory.parent == directory:
            return None
