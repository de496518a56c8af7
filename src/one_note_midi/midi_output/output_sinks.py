"""MIDI output sinks: a mido output port or a Standard MIDI File recorder."""

from __future__ import annotations

import abc
import logging
import time
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Protocol

import mido

from one_note_midi.configuration.runtime_settings import FILE_BACKEND, OutputSettings
from one_note_midi.midi_messages import to_short_message

LOGGER = logging.getLogger(__name__)

TICKS_PER_BEAT = 480
DEFAULT_TEMPO = mido.bpm2tempo(120)


class MidiOutputError(Exception):
    """Raised when MIDI messages cannot be delivered to the output."""


class MidiOutput(Protocol):
    """Protocol for sinks used by the note player."""

    def send(self, message: mido.Message) -> None: ...

    def hold(self, length_ms: int) -> None: ...

    def close(self) -> None: ...


class _ClosingSink(abc.ABC):
    """Context-manager support shared by the sinks."""

    @abc.abstractmethod
    def close(self) -> None: ...

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class PortOutput(_ClosingSink):
    """Sends messages to an open mido output port, holding notes in real time."""

    def __init__(self, port, *, sleep: Callable[[float], None] = time.sleep) -> None:
        self._port = port
        self._sleep = sleep

    @property
    def name(self) -> str:
        return str(getattr(self._port, "name", "<unnamed>"))

    def send(self, message: mido.Message) -> None:
        LOGGER.debug("Sending short message 0x%08X to %s", to_short_message(message), self.name)
        try:
            self._port.send(message)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise MidiOutputError(f"Failed to send {message.type} to {self.name}: {exc}") from exc

    def hold(self, length_ms: int) -> None:
        self._sleep(length_ms / 1000)

    def close(self) -> None:
        if not self._port.closed:
            self._port.close()


class FileOutput(_ClosingSink):
    """Records messages into a single-track MIDI file that is saved on close.

    Holding a note advances the track clock instead of sleeping.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        ticks_per_beat: int = TICKS_PER_BEAT,
        tempo: int = DEFAULT_TEMPO,
    ) -> None:
        self.path = Path(path)
        self._tempo = tempo
        self._midi_file = mido.MidiFile(type=0, ticks_per_beat=ticks_per_beat)
        self._track = mido.MidiTrack()
        self._track.append(mido.MetaMessage("set_tempo", tempo=tempo, time=0))
        self._midi_file.tracks.append(self._track)
        self._pending_ticks = 0
        self._closed = False

    def send(self, message: mido.Message) -> None:
        if self._closed:
            raise MidiOutputError(f"MIDI file output already closed: {self.path}")
        LOGGER.debug("Recording short message 0x%08X", to_short_message(message))
        self._track.append(message.copy(time=self._pending_ticks))
        self._pending_ticks = 0

    def hold(self, length_ms: int) -> None:
        ticks = mido.second2tick(length_ms / 1000, self._midi_file.ticks_per_beat, self._tempo)
        self._pending_ticks += int(round(ticks))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._track.append(mido.MetaMessage("end_of_track", time=self._pending_ticks))
        self._pending_ticks = 0
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._midi_file.save(self.path)
        except OSError as exc:
            raise MidiOutputError(f"Failed to write MIDI file {self.path}: {exc}") from exc
        LOGGER.info("Wrote MIDI file %s", self.path)


def list_output_names() -> list[str]:
    """Return the names of the available MIDI output ports."""
    try:
        return list(mido.get_output_names())
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise MidiOutputError(f"Failed to list MIDI output ports: {exc}") from exc


def open_port_output(port_name: str | None = None) -> PortOutput:
    """Open the named output port, or the first available one (device index 0)."""
    if port_name is None:
        names = list_output_names()
        if not names:
            raise MidiOutputError("No MIDI output ports available.")
        port_name = names[0]
    try:
        port = mido.open_output(port_name)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise MidiOutputError(f"Failed to open MIDI output '{port_name}': {exc}") from exc
    LOGGER.info("Opened MIDI output %s", port_name)
    return PortOutput(port)


def open_midi_output(settings: OutputSettings) -> MidiOutput:
    """Build the sink selected by the output settings."""
    if settings.backend == FILE_BACKEND:
        if settings.file_path is None:
            raise MidiOutputError("File output requires a file path.")
        return FileOutput(settings.file_path)
    return open_port_output(settings.port_name)
