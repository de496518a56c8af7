"""Executable path resolution tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from one_note_midi.launch_check import (
    DEBUG_FLAVOR,
    EXECUTABLE_NAME,
    FLAVOR,
    RELEASE_FLAVOR,
    resolve_executable_path,
)


def test_resolves_two_levels_above_test_run_directory() -> None:
    test_run_dir = Path(
        "/repos/one-note-midi/OneNoteMidi/TestResults/Deploy_user 2021-03-28 18_00_44"
    )

    resolved = resolve_executable_path(test_run_dir, flavor=RELEASE_FLAVOR)

    assert resolved == Path("/repos/one-note-midi/OneNoteMidi/Release") / EXECUTABLE_NAME


def test_uses_import_time_flavor_by_default(tmp_path: Path) -> None:
    resolved = resolve_executable_path(tmp_path / "TestResults" / "run")

    assert resolved == tmp_path / FLAVOR / EXECUTABLE_NAME


def test_flavor_follows_interpreter_debug_mode() -> None:
    assert FLAVOR == (DEBUG_FLAVOR if __debug__ else RELEASE_FLAVOR)


def test_accepts_custom_executable_name_and_string_paths() -> None:
    resolved = resolve_executable_path(
        "/build/OneNoteMidi/TestResults/run",
        flavor=DEBUG_FLAVOR,
        executable_name="OneNoteMidi.exe",
    )

    assert resolved == Path("/build/OneNoteMidi/Debug/OneNoteMidi.exe")


def test_does_not_require_executable_to_exist(tmp_path: Path) -> None:
    resolved = resolve_executable_path(tmp_path / "a" / "b")

    assert not resolved.exists()


def test_rejects_unknown_flavor(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unknown build flavor 'Profile'"):
        resolve_executable_path(tmp_path / "a" / "b", flavor="Profile")
