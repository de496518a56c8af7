"""Launch scenario runner tests."""

from __future__ import annotations

from one_note_midi.launch_check import (
    DEFAULT_SCENARIOS,
    LaunchOutcome,
    LaunchScenario,
    launch_scenarios,
    run_scenarios,
)


def test_outcome_passes_only_on_expected_exit_code() -> None:
    scenario = LaunchScenario("out_of_limit_flag", "-c 50", 1)

    assert LaunchOutcome(scenario=scenario, exit_code=1).passed is True
    assert LaunchOutcome(scenario=scenario, exit_code=0).passed is False


def test_run_scenarios_launches_each_scenario_in_order(monkeypatch) -> None:
    launched: list[tuple[str, str, float | None]] = []
    observed_codes = {"": 0, "-i 24 -p 80": 0, "-c 50": 0}

    def _fake_launch(executable, arguments, *, timeout_seconds=None, env=None):
        launched.append((str(executable), arguments, timeout_seconds))
        return observed_codes.get(arguments, 1)

    monkeypatch.setattr(launch_scenarios, "launch_and_wait", _fake_launch)

    outcomes = run_scenarios("/build/Debug/one-note-midi", timeout_seconds=5)

    assert [arguments for _, arguments, _ in launched] == [
        scenario.arguments for scenario in DEFAULT_SCENARIOS
    ]
    assert {timeout for _, _, timeout in launched} == {5}
    failed = [outcome.scenario.name for outcome in outcomes if not outcome.passed]
    assert failed == ["guitar_with_options_launch", "help_flag_launch", "out_of_limit_flag"]
