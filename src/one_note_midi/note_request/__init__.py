"""Note request exports."""

from .limit_checks import LimitError, verify_limit, verify_note_request
from .note_values import (
    DEFAULT_CHANNEL,
    DEFAULT_INSTRUMENT,
    DEFAULT_LENGTH_MS,
    DEFAULT_PITCH,
    DEFAULT_VELOCITY,
    MAX_CHANNEL,
    MAX_DATA_BYTE,
    MAX_LENGTH_MS,
    NoteRequest,
)

__all__ = [
    "NoteRequest",
    "LimitError",
    "verify_limit",
    "verify_note_request",
    "MAX_CHANNEL",
    "MAX_DATA_BYTE",
    "MAX_LENGTH_MS",
    "DEFAULT_CHANNEL",
    "DEFAULT_INSTRUMENT",
    "DEFAULT_PITCH",
    "DEFAULT_VELOCITY",
    "DEFAULT_LENGTH_MS",
]
