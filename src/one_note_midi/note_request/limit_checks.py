"""Range checks for note request values."""

from __future__ import annotations

from .note_values import MAX_CHANNEL, MAX_DATA_BYTE, MAX_LENGTH_MS, NoteRequest


class LimitError(ValueError):
    """Raised when a value is above its allowed maximum."""

    def __init__(self, value_name: str, current: int, maximum: int) -> None:
        super().__init__(f"{value_name}, Current: {current}, Max: {maximum}")
        self.value_name = value_name
        self.current = current
        self.maximum = maximum


def verify_limit(current: int, maximum: int, value_name: str) -> int:
    """Return `current` unchanged when it lies within `0..maximum` (inclusive).

    Raises:
      LimitError: If `current` is greater than `maximum`.
      ValueError: If `current` is negative.
    """
    if current < 0:
        raise ValueError(f"{value_name} must not be negative, Current: {current}")
    if current > maximum:
        raise LimitError(value_name, current, maximum)
    return current


def verify_note_request(request: NoteRequest) -> NoteRequest:
    """Check every field of the request, naming values by their command-line flag."""
    verify_limit(request.channel, MAX_CHANNEL, "-c")
    verify_limit(request.instrument, MAX_DATA_BYTE, "-i")
    verify_limit(request.pitch, MAX_DATA_BYTE, "-p")
    verify_limit(request.velocity, MAX_DATA_BYTE, "-v")
    verify_limit(request.length_ms, MAX_LENGTH_MS, "-l")
    return request
