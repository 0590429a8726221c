"""PathResolver: the write-once cache behind every location filekit reports.

Each value is computed on first access and then reused for the lifetime of
the resolver.  A single re-entrant lock serialises first computation, so
concurrent callers never run the upward search twice and all of them see the
same cached object.  Tests build a fresh resolver per case instead of
sharing the process-wide one.
"""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path
from typing import Callable, Sequence

from filekit.core.build_layout import BUILD_LAYOUTS, BuildLayout, resolve_executable_folder
from filekit.core.config import ResolverSettings, default_env_file, load_settings
from filekit.core.environment import detect_environment
from filekit.core.locators import ExecutableLocator, default_locator
from filekit.core.models import EnvironmentFlags, ResolvedLocations
from filekit.core.paths import find_project_root, standardize

logger = logging.getLogger(__name__)

_UNSET = object()


class PathResolver:
    def __init__(
        self,
        settings: ResolverSettings | None = None,
        locator: ExecutableLocator | None = None,
        cwd: Callable[[], Path] = Path.cwd,
        argv: Sequence[str] | None = None,
        layouts: Sequence[BuildLayout] = BUILD_LAYOUTS,
    ) -> None:
        self.settings = settings or ResolverSettings()
        self._locator = locator or default_locator()
        self._cwd = cwd
        self._argv = argv
        self._layouts = tuple(layouts)
        self._lock = threading.RLock()
        self._cache: dict[str, object] = {}

    def _once(self, key: str, compute: Callable[[], object]):
        value = self._cache.get(key, _UNSET)
        if value is not _UNSET:
            return value
        with self._lock:
            value = self._cache.get(key, _UNSET)
            if value is _UNSET:
                value = compute()
                self._cache[key] = value
            return value

    # -- executable ---------------------------------------------------------

    @property
    def executable_path(self) -> Path:
        return self._once("executable_path", self._locator.locate)

    @property
    def executable_path_str(self) -> str:
        return str(self.executable_path)

    # -- environment --------------------------------------------------------

    @property
    def environment(self) -> EnvironmentFlags:
        return self._once("environment", self._detect_environment)

    def _detect_environment(self) -> EnvironmentFlags:
        argv = sys.argv if self._argv is None else self._argv
        flags = detect_environment(
            self.executable_path,
            self.settings.test_runners,
            self.settings.dev_gui_markers,
            launch_script=argv[0] if argv else None,
        )
        logger.debug("Environment: %s", flags)
        return flags

    @property
    def is_ran_inside_dev_gui(self) -> bool:
        return self.environment.inside_dev_gui

    @property
    def is_ran_from_test_harness(self) -> bool:
        return self.environment.inside_test_harness

    # -- executable folder --------------------------------------------------

    @property
    def executable_folder(self) -> Path:
        return self._once(
            "executable_folder",
            lambda: resolve_executable_folder(
                self.executable_path,
                self.environment.is_special,
                self.settings.source_file,
                self._layouts,
            ),
        )

    @property
    def executable_folder_str(self) -> str:
        return str(self.executable_folder)

    # -- project folder -----------------------------------------------------

    @property
    def project_root(self) -> Path | None:
        """Marker search from the executable folder; ``None`` when nothing matched."""
        return self._once(
            "project_root",
            lambda: find_project_root(
                self.executable_folder,
                self.settings.project_marker,
                self.settings.workspace_file,
            ),
        )

    @property
    def project_folder(self) -> Path:
        return self._once("project_folder", self._project_folder)

    def _project_folder(self) -> Path:
        root = self.project_root
        if root is None:
            logger.warning(
                "No %s found. Using executable folder as project folder.",
                self.settings.project_marker,
            )
            return self.executable_folder
        return standardize(root)

    @property
    def project_folder_str(self) -> str:
        return str(self.project_folder)

    # -- working directory --------------------------------------------------

    @property
    def working_directory(self) -> Path:
        return self._once("working_directory", self._working_directory)

    def _working_directory(self) -> Path:
        if self.environment.is_special and self.project_root is not None:
            logger.debug("Running from a dev GUI or test harness. Using project folder as working directory.")
            return standardize(self.project_root)
        return standardize(self._cwd())

    @property
    def working_directory_str(self) -> str:
        return str(self.working_directory)

    def snapshot(self) -> ResolvedLocations:
        return ResolvedLocations(
            executable_path=self.executable_path,
            executable_folder=self.executable_folder,
            project_folder=self.project_folder,
            working_directory=self.working_directory,
            environment=self.environment,
        )


_default: PathResolver | None = None
_default_lock = threading.Lock()


def get_resolver() -> PathResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = PathResolver(settings=load_settings(default_env_file()))
    return _default


def reset_resolver(resolver: PathResolver | None = None) -> None:
    """Replace (or drop) the process-wide resolver."""
    global _default
    with _default_lock:
        _default = resolver
