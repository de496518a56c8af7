"""CLI help tests."""

from click.testing import CliRunner
from one_note_midi import __version__
from one_note_midi.cli import cli, main


def test_cli_displays_help_for_question_mark_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-?"])

    assert result.exit_code == 0
    assert "Plays one note through MIDI" in result.output
    assert "-c [0-15]" in result.output
    assert "-l [milliseconds]" in result.output
    assert "Default: 60 (Middle C Note)" in result.output
    assert "one-note-midi -c 1 -i 24 -p 81 -v 120 -l 2000" in result.output


def test_main_returns_zero_for_help(capsys) -> None:
    exit_code = main(["-?"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Usage: one-note-midi" in captured.out
    assert "Examples:" in captured.out


def test_main_prints_package_version(capsys) -> None:
    exit_code = main(["--version"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert __version__ in captured.out
