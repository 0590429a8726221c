"""Tests for the upward project marker search."""

from __future__ import annotations

import plistlib
from pathlib import Path

from filekit.core.paths import find_project_root, read_workspace_redirect, standardize

MARKER = "Project.marker"
MISSING = "no-such-project-marker.filekit"


class TestStandardize:
    def test_collapses_dot_segments(self):
        assert standardize(Path("/a/b/../c/./d")) == Path("/a/c/d")

    def test_relative_becomes_absolute(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert standardize(Path("x/..")) == tmp_path

    def test_parent_of_root_is_root(self):
        assert standardize(Path("/..")) == Path("/")


class TestFindProjectRoot:
    def test_marker_in_start_directory(self, tmp_path: Path):
        (tmp_path / MARKER).write_text("")
        assert find_project_root(tmp_path, MARKER) == tmp_path

    def test_marker_in_ancestor(self, tmp_path: Path):
        start = tmp_path / "a" / "b" / "c"
        start.mkdir(parents=True)
        (tmp_path / "a" / "b" / MARKER).write_text("")
        assert find_project_root(start, MARKER) == tmp_path / "a" / "b"

    def test_nearest_marker_wins(self, tmp_path: Path):
        inner = tmp_path / "outer" / "inner"
        inner.mkdir(parents=True)
        (tmp_path / "outer" / MARKER).write_text("")
        (inner / MARKER).write_text("")
        assert find_project_root(inner / "deeper", MARKER) == inner

    def test_not_found_returns_none(self, tmp_path: Path):
        start = tmp_path / "a" / "b" / "c"
        start.mkdir(parents=True)
        assert find_project_root(start, MISSING) is None

    def test_start_at_filesystem_root(self):
        assert find_project_root(Path("/"), MISSING) is None

    def test_start_need_not_exist(self, tmp_path: Path):
        (tmp_path / MARKER).write_text("")
        assert find_project_root(tmp_path / "ghost" / "dir", MARKER) == tmp_path

    def test_start_with_dot_segments(self, tmp_path: Path):
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / MARKER).write_text("")
        assert find_project_root(tmp_path / "a" / "b" / ".." / "c", MARKER) == tmp_path / "a"


class TestWorkspaceRedirect:
    def test_redirect_is_followed(self, tmp_path: Path):
        target = tmp_path / "real-workspace"
        target.mkdir()
        start = tmp_path / "derived"
        start.mkdir()
        with open(start / "info.plist", "wb") as f:
            plistlib.dump({"WorkspacePath": str(target)}, f)

        assert find_project_root(start, MARKER, "info.plist") == target

    def test_marker_beats_redirect_in_same_directory(self, tmp_path: Path):
        (tmp_path / MARKER).write_text("")
        with open(tmp_path / "info.plist", "wb") as f:
            plistlib.dump({"WorkspacePath": "/elsewhere"}, f)

        assert find_project_root(tmp_path, MARKER, "info.plist") == tmp_path

    def test_redirect_ignored_when_disabled(self, tmp_path: Path):
        start = tmp_path / "derived"
        start.mkdir()
        with open(start / "info.plist", "wb") as f:
            plistlib.dump({"WorkspacePath": "/elsewhere"}, f)
        (tmp_path / MARKER).write_text("")

        assert find_project_root(start, MARKER, None) == tmp_path

    def test_malformed_metadata_continues_ascent(self, tmp_path: Path):
        start = tmp_path / "derived"
        start.mkdir()
        (start / "info.plist").write_text("this is not a plist <<<")
        (tmp_path / MARKER).write_text("")

        assert find_project_root(start, MARKER, "info.plist") == tmp_path

    def test_metadata_with_bad_date_continues_ascent(self, tmp_path: Path):
        start = tmp_path / "derived"
        start.mkdir()
        (start / "info.plist").write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<plist version="1.0"><dict><key>WorkspacePath</key><date>not-a-date</date></dict></plist>\n'
        )
        (tmp_path / MARKER).write_text("")

        assert read_workspace_redirect(start / "info.plist") is None
        assert find_project_root(start, MARKER, "info.plist") == tmp_path

    def test_metadata_without_workspace_key(self, tmp_path: Path):
        start = tmp_path / "derived"
        start.mkdir()
        with open(start / "info.plist", "wb") as f:
            plistlib.dump({"Other": "value"}, f)
        (tmp_path / MARKER).write_text("")

        assert find_project_root(start, MARKER, "info.plist") == tmp_path

    def test_non_dict_metadata_is_ignored(self, tmp_path: Path):
        with open(tmp_path / "info.plist", "wb") as f:
            plistlib.dump(["WorkspacePath", "/elsewhere"], f)
        assert read_workspace_redirect(tmp_path / "info.plist") is None

    def test_relative_redirect_taken_from_metadata_folder(self, tmp_path: Path):
        with open(tmp_path / "info.plist", "wb") as f:
            plistlib.dump({"WorkspacePath": "../sibling"}, f)
        assert read_workspace_redirect(tmp_path / "info.plist") == tmp_path.parent / "sibling"

    def test_missing_metadata_file(self, tmp_path: Path):
        assert read_workspace_redirect(tmp_path / "info.plist") is None
