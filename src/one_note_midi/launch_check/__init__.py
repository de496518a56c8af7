"""Launch check exports."""

from .executable_locator import (
    DEBUG_FLAVOR,
    EXECUTABLE_NAME,
    FLAVOR,
    FLAVORS,
    RELEASE_FLAVOR,
    resolve_executable_path,
)
from .launch_scenarios import (
    DEFAULT_SCENARIOS,
    EXIT_SUCCESS,
    EXIT_USER_ERROR,
    LaunchOutcome,
    LaunchScenario,
    run_scenarios,
)
from .process_launcher import (
    ExitCodeMismatchError,
    LaunchError,
    assert_exit_code,
    build_command,
    launch_and_wait,
)

__all__ = [
    "DEBUG_FLAVOR",
    "RELEASE_FLAVOR",
    "FLAVOR",
    "FLAVORS",
    "EXECUTABLE_NAME",
    "resolve_executable_path",
    "LaunchScenario",
    "LaunchOutcome",
    "DEFAULT_SCENARIOS",
    "EXIT_SUCCESS",
    "EXIT_USER_ERROR",
    "run_scenarios",
    "LaunchError",
    "ExitCodeMismatchError",
    "build_command",
    "launch_and_wait",
    "assert_exit_code",
]
