"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "one-note-midi.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for one-note-midi.
# Every section is optional. Remove <OPTIONAL> placeholders you do not need.

output:
  # Choose one output backend (port or file).
  backend: port
  # Output port name; the first available port is used when unset.
  # port: "<OPTIONAL>"
  # Standard MIDI File to write when backend is file, relative to this file.
  # file: "<OPTIONAL>"

defaults:
  # Values used when a flag is not given on the command line.
  channel: 0        # 0-15
  instrument: 0     # 0-127, 0 is Grand Piano
  pitch: 60         # 0-127, 60 is Middle C
  velocity: 90      # 0-127
  length_ms: 3000   # note length in milliseconds

logging:
  # DEBUG, INFO, WARNING, ERROR or CRITICAL.
  level: WARNING
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
