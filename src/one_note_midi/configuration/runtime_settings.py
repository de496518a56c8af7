"""Configuration domain entities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from one_note_midi.note_request import NoteRequest

PORT_BACKEND = "port"
FILE_BACKEND = "file"
OUTPUT_BACKENDS = (PORT_BACKEND, FILE_BACKEND)


@dataclass(frozen=True)
class OutputSettings:
    """Where MIDI messages are sent."""

    backend: str = PORT_BACKEND
    port_name: str | None = None
    file_path: Path | None = None


@dataclass(frozen=True)
class LoggingSettings:
    """Console logging configuration."""

    level: int = logging.WARNING


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    output: OutputSettings = field(default_factory=OutputSettings)
    defaults: NoteRequest = field(default_factory=NoteRequest)
    logging_settings: LoggingSettings = field(default_factory=LoggingSettings)
