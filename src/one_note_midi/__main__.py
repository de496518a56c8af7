"""Module entry point for `python -m one_note_midi`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
