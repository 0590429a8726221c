"""Shared test fixtures: fake locators and throwaway project trees."""

from __future__ import annotations

from pathlib import Path

import pytest

from filekit.core.config import ResolverSettings
from filekit.core.resolver import PathResolver, reset_resolver

# Unlikely to exist anywhere above pytest's tmp_path; test modules repeat these names.
MARKER = "Project.filekit-test.marker"
WORKSPACE = "filekit-test-info.plist"


class StaticLocator:
    """Locator that reports a fixed path and counts how often it was asked."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.calls = 0

    def locate(self) -> Path:
        self.calls += 1
        return self.path


@pytest.fixture
def static_locator():
    return StaticLocator


@pytest.fixture(autouse=True)
def _fresh_default_resolver():
    reset_resolver()
    yield
    reset_resolver()


@pytest.fixture
def settings() -> ResolverSettings:
    return ResolverSettings(project_marker=MARKER, workspace_file=WORKSPACE)


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """``<tmp>/proj`` with a marker file and an executable in ``.build/debug``."""
    project = tmp_path / "proj"
    build = project / ".build" / "debug"
    build.mkdir(parents=True)
    (project / MARKER).write_text("")
    (build / "app").write_text("")
    return project


@pytest.fixture
def make_resolver(settings: ResolverSettings, tmp_path: Path):
    """Factory for a fresh resolver around a fake executable path."""

    def _make(executable: Path, argv=("app",), cwd: Path | None = None, **overrides) -> PathResolver:
        resolver_settings = overrides.pop("settings", settings)
        return PathResolver(
            settings=resolver_settings,
            locator=StaticLocator(executable),
            cwd=lambda: cwd if cwd is not None else tmp_path,
            argv=list(argv),
            **overrides,
        )

    return _make
