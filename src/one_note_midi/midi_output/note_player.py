"""Play one note on a MIDI output."""

from __future__ import annotations

import logging

from one_note_midi.midi_messages import note_on, note_stop, program_change
from one_note_midi.note_request import NoteRequest

from .output_sinks import MidiOutput

LOGGER = logging.getLogger(__name__)


def play_note(request: NoteRequest, output: MidiOutput) -> None:
    """Select the instrument, start the note, hold it, stop it, then close the output.

    The output is closed even when sending fails.
    """
    LOGGER.debug("Playing %s", request.describe())
    try:
        output.send(program_change(request.channel, request.instrument))
        output.send(note_on(request.channel, request.pitch, request.velocity))
        output.hold(request.length_ms)
        output.send(note_stop(request.channel, request.pitch))
    finally:
        output.close()
