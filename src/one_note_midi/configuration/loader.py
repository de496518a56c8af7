"""Configuration loader service."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from one_note_midi.note_request import LimitError, NoteRequest, verify_note_request

from .runtime_settings import (
    FILE_BACKEND,
    OUTPUT_BACKENDS,
    PORT_BACKEND,
    Configuration,
    LoggingSettings,
    OutputSettings,
)

CONFIG_ENV_VAR = "ONE_NOTE_MIDI_CONFIG"

_DEFAULT_FIELDS = ("channel", "instrument", "pitch", "velocity", "length_ms")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def resolve_configuration_path(config_path: Path | str | None) -> Path | None:
    """Return the explicit path, else the one named by the environment, else None."""
    if config_path:
        return Path(config_path)
    from_env = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(from_env) if from_env else None


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file.

    Without a path (and without `ONE_NOTE_MIDI_CONFIG`) the built-in defaults
    are returned.
    """
    path = resolve_configuration_path(config_path)
    if path is None:
        return Configuration()
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    output = _parse_output_section(parsed.get("output"), path.parent)
    defaults = _parse_defaults_section(parsed.get("defaults"))
    logging_settings = _parse_logging_section(parsed.get("logging"))

    return Configuration(
        path=path,
        output=output,
        defaults=defaults,
        logging_settings=logging_settings,
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    backend = _require_non_empty_string(
        section.get("backend", PORT_BACKEND), "output.backend"
    ).lower()
    if backend not in OUTPUT_BACKENDS:
        raise ConfigurationError(
            f"output.backend must be one of {', '.join(OUTPUT_BACKENDS)}, got '{backend}'."
        )
    port_name = _optional_string(section.get("port"), "output.port")
    file_value = _optional_string(section.get("file"), "output.file")
    if backend == FILE_BACKEND and file_value is None:
        raise ConfigurationError("output.file is required when output.backend is 'file'.")
    file_path = _resolve_path(base_path, file_value) if file_value else None
    return OutputSettings(backend=backend, port_name=port_name, file_path=file_path)


def _parse_defaults_section(value: Any) -> NoteRequest:
    section = _optional_mapping(value, "defaults")
    unknown = sorted(set(section) - set(_DEFAULT_FIELDS))
    if unknown:
        raise ConfigurationError(f"Unknown defaults field(s): {', '.join(unknown)}.")
    fallback = NoteRequest()
    values = {
        name: _require_non_negative_int(
            section.get(name, getattr(fallback, name)), f"defaults.{name}"
        )
        for name in _DEFAULT_FIELDS
    }
    try:
        return verify_note_request(NoteRequest(**values))
    except LimitError as exc:
        raise ConfigurationError(f"defaults out of limit: {exc}") from exc


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level_name = _require_non_empty_string(section.get("level", "WARNING"), "logging.level")
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"logging.level '{level_name}' is not a valid log level.")
    return LoggingSettings(level=level)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
