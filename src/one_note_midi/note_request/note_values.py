"""Note request entities."""

from __future__ import annotations

from dataclasses import dataclass

MAX_CHANNEL = 15
MAX_DATA_BYTE = 127
MAX_LENGTH_MS = 2**32 - 1

DEFAULT_CHANNEL = 0
DEFAULT_INSTRUMENT = 0  # Grand Piano
DEFAULT_PITCH = 60  # Middle C
DEFAULT_VELOCITY = 90
DEFAULT_LENGTH_MS = 3000


@dataclass(frozen=True)
class NoteRequest:
    """One note to play: where, with which instrument, how loud and for how long."""

    channel: int = DEFAULT_CHANNEL
    instrument: int = DEFAULT_INSTRUMENT
    pitch: int = DEFAULT_PITCH
    velocity: int = DEFAULT_VELOCITY
    length_ms: int = DEFAULT_LENGTH_MS

    def describe(self) -> str:
        return (
            f"Channel: {self.channel}, "
            f"Instrument: {self.instrument}, "
            f"Pitch: {self.pitch}, "
            f"Velocity: {self.velocity}, "
            f"Length: {self.length_ms}"
        )
