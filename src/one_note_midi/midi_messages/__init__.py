"""MIDI message exports."""

from .message_builders import (
    NOTE_ON_SIGNATURE,
    PROGRAM_CHANGE_SIGNATURE,
    note_on,
    note_stop,
    program_change,
    to_short_message,
)

__all__ = [
    "NOTE_ON_SIGNATURE",
    "PROGRAM_CHANGE_SIGNATURE",
    "note_on",
    "note_stop",
    "program_change",
    "to_short_message",
]
