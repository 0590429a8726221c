"""Environment detection: is the process hosted by a dev GUI or a test runner?

Both checks are plain string heuristics on the resolved executable path.  A
runner launched through an unusual wrapper will not be recognised.  Runners
started with ``python -m`` are named after their package.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from filekit.core.models import EnvironmentFlags


def _script_name(launch_script: str) -> str:
    script = Path(launch_script)
    # `python -m pytest` reports the package's __main__.py
    if script.name == "__main__.py":
        return script.parent.name
    return script.name


def is_test_harness(executable: Path, runner_names: Iterable[str], launch_script: str | None = None) -> bool:
    """True when the executable, or the script it was launched with, is a test runner."""
    names = set(runner_names)
    if executable.name in names:
        return True
    if launch_script:
        return _script_name(launch_script) in names
    return False


def is_dev_gui(executable: Path, markers: Iterable[str]) -> bool:
    path = executable.as_posix()
    return any(marker in path for marker in markers)


def detect_environment(
    executable: Path,
    runner_names: Sequence[str],
    dev_gui_markers: Sequence[str],
    launch_script: str | None = None,
) -> EnvironmentFlags:
    return EnvironmentFlags(
        inside_dev_gui=is_dev_gui(executable, dev_gui_markers),
        inside_test_harness=is_test_harness(executable, runner_names, launch_script),
    )
