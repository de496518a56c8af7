"""MIDI channel message construction and short-message packing."""

from __future__ import annotations

import mido

from one_note_midi.note_request import MAX_CHANNEL, MAX_DATA_BYTE, verify_limit

PROGRAM_CHANGE_SIGNATURE = 0b1100
NOTE_ON_SIGNATURE = 0b1001


def program_change(channel: int, instrument: int) -> mido.Message:
    """Select `instrument` on `channel` (status byte 0b1100CCCC)."""
    verify_limit(channel, MAX_CHANNEL, "Channel")
    verify_limit(instrument, MAX_DATA_BYTE, "Instrument")
    return mido.Message("program_change", channel=channel, program=instrument)


def note_on(channel: int, pitch: int, velocity: int) -> mido.Message:
    """Start a note (status byte 0b1001CCCC); velocity 0 stops it."""
    verify_limit(channel, MAX_CHANNEL, "Channel")
    verify_limit(pitch, MAX_DATA_BYTE, "Pitch")
    verify_limit(velocity, MAX_DATA_BYTE, "Velocity")
    return mido.Message("note_on", channel=channel, note=pitch, velocity=velocity)


def note_stop(channel: int, pitch: int) -> mido.Message:
    return note_on(channel, pitch, 0)


def to_short_message(message: mido.Message) -> int:
    """Pack a channel message into the 32-bit word used by short-message MIDI APIs.

    Byte 0 (least significant) is the status byte, bytes 1 and 2 are the data
    bytes. Bytes a message does not use stay zero.
    """
    raw = message.bytes()
    if len(raw) > 3:
        raise ValueError(f"Not a short message: {message.type}")
    packed = 0
    for index, value in enumerate(raw):
        packed |= value << (8 * index)
    return packed
