"""Resolver settings: marker names and environment heuristics.

Values come from ``FILEKIT_*`` environment variables, optionally seeded from
a ``.env`` file.  Variables already set in the environment win over the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

from filekit.core.build_layout import SOURCE_FILE

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_MARKER = "pyproject.toml"
DEFAULT_WORKSPACE_FILE = "info.plist"
DEFAULT_TEST_RUNNERS = ("xctest", "pytest", "py.test")
DEFAULT_DEV_GUI_MARKERS = ("/DerivedData/",)
DEFAULT_ENV_FILE = ".env"


@dataclass(frozen=True)
class ResolverSettings:
    project_marker: str = DEFAULT_PROJECT_MARKER
    workspace_file: str | None = DEFAULT_WORKSPACE_FILE
    test_runners: tuple[str, ...] = DEFAULT_TEST_RUNNERS
    dev_gui_markers: tuple[str, ...] = DEFAULT_DEV_GUI_MARKERS
    source_file: Path = field(default=SOURCE_FILE)


def _split_list(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def default_env_file() -> Path:
    """The file named by ``FILEKIT_ENV_FILE``, else ``.env`` in the current directory."""
    configured = os.environ.get("FILEKIT_ENV_FILE", "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path.cwd() / DEFAULT_ENV_FILE


def load_settings(env_file: Path | None = None) -> ResolverSettings:
    """Build settings from the environment, with *env_file* as a fallback source."""
    values: dict[str, str | None] = {}
    if env_file is not None and env_file.exists():
        values.update(dotenv_values(env_file))
        logger.debug("Loaded resolver settings from %s", env_file)
    values.update(os.environ)

    kwargs: dict[str, object] = {}

    marker = values.get("FILEKIT_PROJECT_MARKER")
    if marker:
        kwargs["project_marker"] = marker.strip()

    workspace = values.get("FILEKIT_WORKSPACE_FILE")
    if workspace is not None:
        # An empty value switches the workspace redirect off.
        kwargs["workspace_file"] = workspace.strip() or None

    runners = values.get("FILEKIT_TEST_RUNNERS")
    if runners:
        kwargs["test_runners"] = _split_list(runners)

    gui_markers = values.get("FILEKIT_DEV_GUI_MARKERS")
    if gui_markers:
        kwargs["dev_gui_markers"] = _split_list(gui_markers)

    source = values.get("FILEKIT_SOURCE_FILE")
    if source:
        kwargs["source_file"] = Path(source).expanduser().absolute()

    settings = ResolverSettings(**kwargs)
    logger.debug("Resolver settings: %s", settings)
    return settings
