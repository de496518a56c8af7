"""Play one MIDI note from the command line."""

__version__ = "1.0.0"
