from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, computed_field


class EnvironmentFlags(BaseModel):
    """How the current process is hosted, as far as the heuristics can tell."""

    model_config = ConfigDict(frozen=True)

    inside_dev_gui: bool = False
    inside_test_harness: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_special(self) -> bool:
        return self.inside_dev_gui or self.inside_test_harness


class ResolvedLocations(BaseModel):
    model_config = ConfigDict(frozen=True)

    executable_path: Path
    executable_folder: Path
    project_folder: Path
    working_directory: Path
    environment: EnvironmentFlags
