"""Executable locators: one strategy per way a host can name the running binary.

:func:`default_locator` picks the strategy once for the current platform.
Every strategy returns an absolute path with symlinks resolved and never
raises; when nothing better is known the first command-line argument is
used as-is.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Protocol, Sequence

PROC_SELF_EXE = Path("/proc/self/exe")


class ExecutableLocator(Protocol):
    def locate(self) -> Path: ...


def _resolve(path: Path) -> Path:
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()


class ArgvLocator:
    """Use ``argv[0]`` taken relative to the invocation directory."""

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        cwd: Callable[[], Path] = Path.cwd,
    ) -> None:
        self._argv = argv
        self._cwd = cwd

    def locate(self) -> Path:
        argv = sys.argv if self._argv is None else self._argv
        first = argv[0] if argv and argv[0] else ""
        return _resolve(self._cwd() / first)


class ProcSelfLocator:
    """Follow the kernel's self-reference link (``/proc/self/exe``)."""

    def __init__(self, link: Path = PROC_SELF_EXE, fallback: ExecutableLocator | None = None) -> None:
        self._link = link
        self._fallback = fallback or ArgvLocator()

    def locate(self) -> Path:
        try:
            return self._link.resolve(strict=True)
        except (OSError, RuntimeError):
            return self._fallback.locate()


class RunningExecutableLocator:
    """Ask the interpreter which binary is running.

    For a frozen (bundled) application this is the application itself, for a
    plain script it is the Python interpreter.
    """

    def __init__(self, executable: str | None = None, fallback: ExecutableLocator | None = None) -> None:
        self._executable = executable
        self._fallback = fallback or ArgvLocator()

    def locate(self) -> Path:
        executable = self._executable if self._executable is not None else sys.executable
        if not executable:
            return self._fallback.locate()
        return _resolve(Path(executable))


def default_locator(platform: str | None = None) -> ExecutableLocator:
    """Return the locator for *platform* (defaults to ``sys.platform``)."""
    platform = platform or sys.platform
    if platform.startswith("linux") and PROC_SELF_EXE.exists():
        return ProcSelfLocator()
    return RunningExecutableLocator()
