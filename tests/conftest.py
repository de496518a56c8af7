"""Shared fixtures: a fake build tree holding a runnable player executable."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest
from one_note_midi.configuration import CONFIG_ENV_VAR
from one_note_midi.launch_check import EXECUTABLE_NAME, FLAVOR

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"

_WRAPPER_TEMPLATE = """#!{python}
import sys

from one_note_midi.cli import main

sys.exit(main())
"""


@dataclass(frozen=True)
class PlayerBuildTree:
    """Layout of `<project>/<flavor>/<executable>` and `<project>/TestResults/<run>`."""

    project_dir: Path
    executable: Path
    test_run_dir: Path
    midi_file: Path
    env: dict[str, str]


@pytest.fixture
def player_build_tree(tmp_path: Path) -> PlayerBuildTree:
    if sys.platform.startswith("win"):
        pytest.skip("wrapper executable relies on a POSIX shebang")

    project_dir = tmp_path / "OneNoteMidi"
    executable = project_dir / FLAVOR / EXECUTABLE_NAME
    executable.parent.mkdir(parents=True)
    executable.write_text(_WRAPPER_TEMPLATE.format(python=sys.executable), encoding="utf-8")
    executable.chmod(executable.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    test_run_dir = project_dir / "TestResults" / "Deploy_tester 2021-03-28 18_00_44"
    test_run_dir.mkdir(parents=True)

    midi_file = tmp_path / "played.mid"
    config_path = tmp_path / "one-note-midi.yaml"
    config_path.write_text(
        f"output:\n  backend: file\n  file: {midi_file.name}\n", encoding="utf-8"
    )

    env = dict(os.environ)
    existing_path = env.get("PYTHONPATH")
    env["PYTHONPATH"] = (
        f"{SRC_ROOT}{os.pathsep}{existing_path}" if existing_path else str(SRC_ROOT)
    )
    env[CONFIG_ENV_VAR] = str(config_path)

    return PlayerBuildTree(
        project_dir=project_dir,
        executable=executable,
        test_run_dir=test_run_dir,
        midi_file=midi_file,
        env=env,
    )
