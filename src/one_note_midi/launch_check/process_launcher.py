"""Launch an executable, wait for it, and check its exit code."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Mapping
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when the executable cannot be started or does not finish in time."""


class ExitCodeMismatchError(AssertionError):
    """Raised when the observed exit code differs from the expected one."""

    def __init__(self, command: str, expected: int, actual: int) -> None:
        super().__init__(f"Expected exit code {expected}, got {actual}: {command}")
        self.command = command
        self.expected = expected
        self.actual = actual


def build_command(executable: Path | str, arguments: str = "") -> tuple[str, ...]:
    """Split the argument string with shell rules and prefix the executable."""
    return (str(executable), *shlex.split(arguments))


def launch_and_wait(
    executable: Path | str,
    arguments: str = "",
    *,
    timeout_seconds: float | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Start the executable, block until it exits, and return its exit code.

    Without `timeout_seconds` the call waits indefinitely.
    """
    command = build_command(executable, arguments)
    command_text = shlex.join(command)
    LOGGER.info("Launching %s", command_text)
    try:
        completed = subprocess.run(
            list(command),
            check=False,
            timeout=timeout_seconds,
            env=dict(env) if env is not None else None,
        )
    except OSError as exc:
        raise LaunchError(f"Failed to start {command_text}: {exc}") from exc
    except subprocess.TimeoutExpired as exc:
        raise LaunchError(
            f"Timed out after {timeout_seconds} seconds waiting for {command_text}"
        ) from exc
    LOGGER.info("Exit code %d from %s", completed.returncode, command_text)
    return completed.returncode


def assert_exit_code(
    executable: Path | str,
    arguments: str,
    expected: int,
    *,
    timeout_seconds: float | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Launch the executable and fail unless it exits with `expected`."""
    actual = launch_and_wait(executable, arguments, timeout_seconds=timeout_seconds, env=env)
    if actual != expected:
        command_text = shlex.join(build_command(executable, arguments))
        raise ExitCodeMismatchError(command_text, expected, actual)
    return actual
