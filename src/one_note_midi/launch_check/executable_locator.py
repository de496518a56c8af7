"""Locate the built player executable relative to a test-run directory."""

from __future__ import annotations

import sys
from pathlib import Path

DEBUG_FLAVOR = "Debug"
RELEASE_FLAVOR = "Release"
FLAVORS = (DEBUG_FLAVOR, RELEASE_FLAVOR)

# Fixed at import time: `python -O` selects the release build.
FLAVOR = DEBUG_FLAVOR if __debug__ else RELEASE_FLAVOR

EXECUTABLE_NAME = "one-note-midi.exe" if sys.platform.startswith("win") else "one-note-midi"


def resolve_executable_path(
    test_run_directory: Path | str,
    *,
    flavor: str | None = None,
    executable_name: str = EXECUTABLE_NAME,
) -> Path:
    """Return `<test run dir>/../../<flavor>/<executable name>`.

    Test runs are deployed two levels below the project directory
    (for example `<project>/TestResults/Deploy_<user> <timestamp>`). The path is
    not checked for existence; a missing executable only fails at launch.
    """
    selected_flavor = flavor or FLAVOR
    if selected_flavor not in FLAVORS:
        raise ValueError(f"Unknown build flavor '{selected_flavor}', expected one of {FLAVORS}.")
    project_directory = Path(test_run_directory).parent.parent
    return project_directory / selected_flavor / executable_name
