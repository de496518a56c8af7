"""Documented launch scenarios for the player and their expected exit codes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from .process_launcher import launch_and_wait

EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1


@dataclass(frozen=True)
class LaunchScenario:
    """One invocation of the player and the exit code it must produce."""

    name: str
    arguments: str
    expected_exit_code: int


@dataclass(frozen=True)
class LaunchOutcome:
    """Observed result of running one scenario."""

    scenario: LaunchScenario
    exit_code: int

    @property
    def passed(self) -> bool:
        return self.exit_code == self.scenario.expected_exit_code


DEFAULT_SCENARIOS: tuple[LaunchScenario, ...] = (
    LaunchScenario("default_launch", "", EXIT_SUCCESS),
    LaunchScenario("guitar_launch", "-i 24 -p 80", EXIT_SUCCESS),
    LaunchScenario("guitar_with_options_launch", "-c 1 -i 24 -p 81 -v 120 -l 2000", EXIT_SUCCESS),
    LaunchScenario("help_flag_launch", "-?", EXIT_SUCCESS),
    LaunchScenario("out_of_limit_flag", "-c 50", EXIT_USER_ERROR),
    LaunchScenario("missing_number_flag", "-c", EXIT_USER_ERROR),
)


def run_scenarios(
    executable: Path | str,
    scenarios: Iterable[LaunchScenario] = DEFAULT_SCENARIOS,
    *,
    timeout_seconds: float | None = None,
    env: Mapping[str, str] | None = None,
) -> list[LaunchOutcome]:
    """Run the scenarios one after another and collect their outcomes."""
    return [
        LaunchOutcome(
            scenario=scenario,
            exit_code=launch_and_wait(
                executable, scenario.arguments, timeout_seconds=timeout_seconds, env=env
            ),
        )
        for scenario in scenarios
    ]
