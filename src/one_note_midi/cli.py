"""Command line interface entry points."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

import click

from one_note_midi import __version__
from one_note_midi.configuration import (
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from one_note_midi.launch_check import (
    EXECUTABLE_NAME,
    FLAVORS,
    LaunchError,
    resolve_executable_path,
    run_scenarios,
)
from one_note_midi.midi_output import (
    MidiOutputError,
    list_output_names,
    open_midi_output,
    play_note,
)
from one_note_midi.note_request import (
    DEFAULT_CHANNEL,
    DEFAULT_INSTRUMENT,
    DEFAULT_LENGTH_MS,
    DEFAULT_PITCH,
    DEFAULT_VELOCITY,
    MAX_DATA_BYTE,
    LimitError,
    verify_note_request,
)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

EPILOG = "\b\n" + "\n".join(
    [
        "Examples:",
        "",
        "  one-note-midi -i 24 -p 80",
        "  Play Guitar Note",
        "",
        "  one-note-midi -c 1 -i 24 -p 81 -v 120 -l 2000",
        "  Sets Channel 1 to Guitar, Plays A Note, at Volume 120, for 2 seconds",
    ]
)


class CliError(Exception):
    """Custom CLI error."""


class FlagLimitError(CliError):
    """A flag value is above its maximum."""


def _configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("one_note_midi").setLevel(level)


@click.command(
    name="one-note-midi",
    context_settings={"help_option_names": ["-?", "-h", "--help"]},
    epilog=EPILOG,
)
@click.option(
    "-c",
    "channel",
    type=click.IntRange(min=0),
    metavar="[0-15]",
    help=f"Channel. Default: {DEFAULT_CHANNEL}",
)
@click.option(
    "-i",
    "instrument",
    type=click.IntRange(min=0),
    metavar="[0-127]",
    help=f"Instrument. Default: {DEFAULT_INSTRUMENT} (Grand Piano)",
)
@click.option(
    "-p",
    "pitch",
    type=click.IntRange(min=0),
    metavar="[0-127]",
    help=f"Pitch (Note). Default: {DEFAULT_PITCH} (Middle C Note)",
)
@click.option(
    "-v",
    "velocity",
    type=click.IntRange(min=0),
    metavar="[0-127]",
    help=(
        f"Velocity (Volume). Default: {DEFAULT_VELOCITY} "
        f"({DEFAULT_VELOCITY / MAX_DATA_BYTE:.0%} Loud)"
    ),
)
@click.option(
    "-l",
    "length_ms",
    type=click.IntRange(min=0),
    metavar="[milliseconds]",
    help=f"Length (Note Length), in Milliseconds. Default: {DEFAULT_LENGTH_MS} milliseconds",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML configuration file. Default: $ONE_NOTE_MIDI_CONFIG",
)
@click.option(
    "--write-config",
    "write_config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write a commented YAML configuration template to this path and exit.",
)
@click.option(
    "--list-ports",
    is_flag=True,
    default=False,
    help="Print the available MIDI output ports and exit.",
)
@click.version_option(version=__version__, package_name="one-note-midi")
def cli(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    channel: int | None,
    instrument: int | None,
    pitch: int | None,
    velocity: int | None,
    length_ms: int | None,
    config_path: str | None,
    write_config_path: str | None,
    list_ports: bool,
) -> None:
    """Plays one note through MIDI."""
    if write_config_path:
        try:
            resolved_output = write_placeholder_configuration(write_config_path)
        except OSError as exc:
            raise CliError(str(exc)) from exc
        click.echo(str(resolved_output))
        return

    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(f"Configuration Error: {exc}") from exc
    _configure_logging(configuration.logging_settings.level)

    if list_ports:
        try:
            names = list_output_names()
        except MidiOutputError as exc:
            raise CliError(f"Midi Error: {exc}") from exc
        for name in names:
            click.echo(name)
        return

    overrides = {
        "channel": channel,
        "instrument": instrument,
        "pitch": pitch,
        "velocity": velocity,
        "length_ms": length_ms,
    }
    request = replace(
        configuration.defaults,
        **{key: value for key, value in overrides.items() if value is not None},
    )
    try:
        verify_note_request(request)
    except LimitError as exc:
        raise FlagLimitError(f"Flag Limit Error: {exc}") from exc

    click.echo(f"Playing {request.describe()}")
    try:
        play_note(request, open_midi_output(configuration.output))
    except MidiOutputError as exc:
        raise CliError(f"Midi Error: {exc}") from exc


@click.command(
    name="one-note-midi-launch-check",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--test-run-dir",
    "test_run_dir",
    required=True,
    type=click.Path(path_type=str),
    help="Test-run directory; the executable is looked up two levels above it",
)
@click.option(
    "--flavor",
    required=False,
    type=click.Choice(FLAVORS),
    help="Build flavor directory to search. Default: Release under python -O, else Debug",
)
@click.option(
    "--executable-name",
    "executable_name",
    default=EXECUTABLE_NAME,
    show_default=True,
    help="File name of the player executable",
)
@click.option(
    "--timeout",
    "timeout_seconds",
    required=False,
    type=click.FloatRange(min=0, min_open=True),
    help="Optional per-launch timeout in seconds; waits indefinitely when unset",
)
def launch_check(
    test_run_dir: str,
    flavor: str | None,
    executable_name: str,
    timeout_seconds: float | None,
) -> None:
    """Launch the player with the documented scenarios and check each exit code."""
    executable = resolve_executable_path(
        test_run_dir, flavor=flavor, executable_name=executable_name
    )
    click.echo(f"Executable: {executable}")
    try:
        outcomes = run_scenarios(executable, timeout_seconds=timeout_seconds)
    except LaunchError as exc:
        raise CliError(str(exc)) from exc

    for outcome in outcomes:
        status = "PASS" if outcome.passed else "FAIL"
        click.echo(
            f"{status} {outcome.scenario.name}: "
            f"expected {outcome.scenario.expected_exit_code}, got {outcome.exit_code}"
        )
    failed = [outcome for outcome in outcomes if not outcome.passed]
    if failed:
        raise CliError(f"{len(failed)} of {len(outcomes)} launch scenarios failed.")


def _help_text() -> str:
    with click.Context(cli, info_name=cli.name) as ctx:
        return cli.get_help(ctx)


def main(argv: list[str] | None = None) -> int:
    """Player entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name=cli.name, standalone_mode=False)
    except FlagLimitError as exc:
        click.echo(str(exc), err=True)
        click.echo(_help_text())
        return 1
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.UsageError as exc:
        click.echo(f"Flag Error: {exc.format_message()}", err=True)
        click.echo(_help_text())
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


def launch_check_main(argv: list[str] | None = None) -> int:
    """Launch-check entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        launch_check.main(args=list(argv), prog_name=launch_check.name, standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
