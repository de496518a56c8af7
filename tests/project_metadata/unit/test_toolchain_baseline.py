"""Tests for repository toolchain baseline configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path

from one_note_midi import cli as cli_module


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _pyproject() -> dict:
    pyproject_path = _project_root() / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_project_uses_python_311_baseline_in_pyproject() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["requires-python"] == ">=3.11"
    assert pyproject["tool"]["ruff"]["target-version"] == "py311"
    assert pyproject["tool"]["mypy"]["python_version"] == "3.11"


def test_console_scripts_point_at_cli_entry_points() -> None:
    scripts = _pyproject()["project"]["scripts"]

    for target in scripts.values():
        module_name, attribute = target.split(":")
        assert module_name == cli_module.__name__
        assert callable(getattr(cli_module, attribute))


def test_runtime_dependencies_cover_imported_libraries() -> None:
    dependencies = " ".join(_pyproject()["project"]["dependencies"]).lower()

    for distribution in ("click", "pyyaml", "mido", "python-rtmidi"):
        assert distribution in dependencies


def test_readme_documents_every_flag_and_exit_code() -> None:
    readme = (_project_root() / "README.md").read_text(encoding="utf-8")

    for flag in ("-c", "-i", "-p", "-v", "-l", "-?", "--config", "--list-ports"):
        assert f"`{flag}" in readme, f"README should document {flag}"
    assert "Exit codes" in readme
    assert "go to stderr" in readme
