"""The filekit locations under their FileResolver names.

Shares the process-wide cache with :mod:`filekit`; pick whichever naming
reads better in the calling code.
"""

from __future__ import annotations

from pathlib import Path

from filekit.core.resolver import get_resolver


def executable_path() -> Path:
    return get_resolver().executable_path


def executable_path_str() -> str:
    return get_resolver().executable_path_str


def executable_folder() -> Path:
    return get_resolver().executable_folder


def executable_folder_str() -> str:
    return get_resolver().executable_folder_str


def project_folder() -> Path:
    return get_resolver().project_folder


def project_folder_str() -> str:
    return get_resolver().project_folder_str


def present_working_directory() -> Path:
    return get_resolver().working_directory


def present_working_directory_str() -> str:
    return get_resolver().working_directory_str


def is_ran_inside_dev_gui() -> bool:
    return get_resolver().is_ran_inside_dev_gui


def is_ran_from_test_harness() -> bool:
    return get_resolver().is_ran_from_test_harness
