"""MIDI output exports."""

from .note_player import play_note
from .output_sinks import (
    FileOutput,
    MidiOutput,
    MidiOutputError,
    PortOutput,
    list_output_names,
    open_midi_output,
    open_port_output,
)

__all__ = [
    "FileOutput",
    "MidiOutput",
    "MidiOutputError",
    "PortOutput",
    "list_output_names",
    "open_midi_output",
    "open_port_output",
    "play_note",
]
