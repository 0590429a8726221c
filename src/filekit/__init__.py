"""Resolve the executable, project and working directories of a running program.

The functions here read from the process-wide :class:`PathResolver`.  Code
that needs its own cache (tests, embedded hosts) can build one directly.
"""

from __future__ import annotations

from pathlib import Path

from filekit.core.paths import find_project_root
from filekit.core.resolver import PathResolver, get_resolver, reset_resolver

__all__ = [
    "PathResolver",
    "executable_folder",
    "executable_folder_str",
    "executable_path",
    "executable_path_str",
    "find_project_root",
    "get_resolver",
    "project_folder",
    "project_folder_str",
    "reset_resolver",
    "working_directory",
    "working_directory_str",
]


def executable_path() -> Path:
    return get_resolver().executable_path


def executable_path_str() -> str:
    return get_resolver().executable_path_str


def executable_folder() -> Path:
    """Folder holding the executable, or the debug build folder under a dev GUI/test runner."""
    return get_resolver().executable_folder


def executable_folder_str() -> str:
    return get_resolver().executable_folder_str


def project_folder() -> Path:
    """Nearest ancestor of the executable folder holding the project marker."""
    return get_resolver().project_folder


def project_folder_str() -> str:
    return get_resolver().project_folder_str


def working_directory() -> Path:
    """Directory relative paths should resolve against."""
    return get_resolver().working_directory


def working_directory_str() -> str:
    return get_resolver().working_directory_str
