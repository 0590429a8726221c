"""Build-output folder inference for code run from a dev GUI or test runner.

Those hosts place the running binary far from the checked-out sources, so the
folder is reverse-engineered from where a package manager staged *our* source
tree.  Layouts are tried in order; the first marker found in the source path
wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from filekit.core.paths import standardize

logger = logging.getLogger(__name__)

# Where this module was installed or checked out.  The layouts below are
# matched against it to find the build folder.
SOURCE_FILE = Path(__file__).resolve()


@dataclass(frozen=True)
class BuildLayout:
    marker: str
    suffix: str

    def apply(self, source: str) -> Path | None:
        index = source.find(self.marker)
        if index < 0:
            return None
        return standardize(Path(source[:index] + self.suffix))


BUILD_LAYOUTS: tuple[BuildLayout, ...] = (
    # Package opened in a dev GUI: sources land in <derived-data>/SourcePackages/checkouts
    BuildLayout("/SourcePackages/checkouts/", "/Build/Products/Debug"),
    # Package manager checkout under <build-path>/checkouts
    BuildLayout("/checkouts/", "/debug"),
    # Editable package; the build path is unknown, assume .build
    BuildLayout("/Packages/", "/.build/debug"),
)


def infer_build_folder(source_file: Path, layouts: Sequence[BuildLayout] = BUILD_LAYOUTS) -> Path | None:
    """Return the debug build folder implied by *source_file*'s location, or ``None``."""
    source = source_file.as_posix()
    for layout in layouts:
        folder = layout.apply(source)
        if folder is not None:
            logger.debug("Source %s matches %r, build folder %s", source, layout.marker, folder)
            return folder
    return None


def resolve_executable_folder(
    executable: Path,
    special_environment: bool,
    source_file: Path,
    layouts: Sequence[BuildLayout] = BUILD_LAYOUTS,
) -> Path:
    """Folder the build put the executable in.

    Outside a dev GUI or test runner this is simply the executable's parent.
    """
    if special_environment:
        folder = infer_build_folder(source_file, layouts)
        if folder is not None:
            return folder
        logger.warning(
            "Cannot infer build-output folder location from source code structure. "
            "Using executable folder."
        )
    return standardize(executable / "..")
