from __future__ import annotations

import pytest

from outcome_simulator.catalog import DEFAULT_SCENARIOS
from outcome_simulator.errors import InvalidInputError
from outcome_simulator.models import Policy, Scenario
from outcome_simulator.simulator import availability, compare, run


def _scenarios(pattern: str) -> list[Scenario]:
    """Build scenarios from a string such as 'SSFSF' (S=success, F=failure)."""
    return [
        Scenario.success(f"s{index}") if flag == "S" else Scenario.failure(f"s{index}", "boom")
        for index, flag in enumerate(pattern, start=1)
    ]


PATTERNS = ["S", "F", "SSS", "FSS", "SSF", "SSFSFFS", "SFSFSF", "FFFF"]


@pytest.mark.parametrize("pattern", PATTERNS)
def test_strict_attempts_prefix_ending_at_first_failure(pattern: str) -> None:
    scenarios = _scenarios(pattern)
    result = run(scenarios, Policy.STRICT)

    expected_length = pattern.index("F") + 1 if "F" in pattern else len(pattern)
    assert list(result.scenarios_attempted) == scenarios[:expected_length]
    assert result.halted_early == ("F" in pattern)
    assert result.succeeded + result.failed == len(result.scenarios_attempted)
    assert result.failed <= 1


@pytest.mark.parametrize("pattern", PATTERNS)
def test_resilient_attempts_everything(pattern: str) -> None:
    scenarios = _scenarios(pattern)
    result = run(scenarios, Policy.RESILIENT)

    assert list(result.scenarios_attempted) == scenarios
    assert result.halted_early is False
    assert result.failed == pattern.count("F")
    assert result.succeeded == pattern.count("S")
    assert result.skipped == 0


def test_run_is_deterministic() -> None:
    scenarios = _scenarios("SSFSFFS")
    for policy in Policy:
        assert run(scenarios, policy) == run(scenarios, policy)


def test_single_failure_boundary() -> None:
    scenarios = _scenarios("F")

    strict = run(scenarios, Policy.STRICT)
    resilient = run(scenarios, Policy.RESILIENT)

    assert (len(strict.scenarios_attempted), strict.succeeded, strict.failed) == (1, 0, 1)
    assert strict.halted_early is True
    assert (len(resilient.scenarios_attempted), resilient.succeeded, resilient.failed) == (1, 0, 1)
    assert resilient.halted_early is False


def test_worked_example_penalizes_strict_halt() -> None:
    scenarios = _scenarios("SSFSFFS")

    strict = run(scenarios, Policy.STRICT)
    assert [s.name for s in strict.scenarios_attempted] == ["s1", "s2", "s3"]
    assert (strict.succeeded, strict.failed, strict.halted_early) == (2, 1, True)
    assert strict.skipped == 4
    assert round(availability(strict) * 100, 1) == 28.6

    resilient = run(scenarios, Policy.RESILIENT)
    assert (resilient.succeeded, resilient.failed, resilient.halted_early) == (4, 3, False)
    assert round(availability(resilient) * 100, 1) == 57.1


def test_default_scenarios_reproduce_documented_availability() -> None:
    comparison = compare(DEFAULT_SCENARIOS)

    assert round(comparison.strict.availability * 100, 1) == 28.6
    assert round(comparison.resilient.availability * 100, 1) == 71.4
    assert comparison.strict.halted_early is True
    assert comparison.resilient.failed == 2
    assert comparison.availability_gain == pytest.approx(3 / 7)


@pytest.mark.parametrize("policy", list(Policy))
def test_empty_input_is_rejected(policy: Policy) -> None:
    with pytest.raises(InvalidInputError):
        run([], policy)


def test_policy_accepts_plain_string() -> None:
    result = run(_scenarios("SF"), "resilient")

    assert result.policy is Policy.RESILIENT
    assert result.failed == 1
