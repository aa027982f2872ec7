"""Outcome simulator: walks a scenario list under a failure policy."""

from __future__ import annotations

from typing import Sequence

import structlog

from .errors import InvalidInputError
from .models import Comparison, Policy, RunResult, Scenario

LOGGER = structlog.get_logger("outcome_simulator")


def run(scenarios: Sequence[Scenario], policy: Policy) -> RunResult:
    """Run ``scenarios`` in order under ``policy``.

    Strict runs stop at the first failure; the remaining scenarios are not
    attempted. Resilient runs record every failure and continue to the end.
    """

    if not scenarios:
        raise InvalidInputError("scenario list must not be empty")

    policy = Policy(policy)
    logger = LOGGER.bind(policy=policy.value, total=len(scenarios))
    attempted: list[Scenario] = []
    succeeded = 0
    failed = 0
    halted_early = False

    for index, scenario in enumerate(scenarios, start=1):
        attempted.append(scenario)
        if scenario.succeeded:
            succeeded += 1
            continue
        failed += 1
        logger.debug("scenario_failed", index=index, scenario=scenario.name, reason=scenario.reason)
        if policy is Policy.STRICT:
            # A failure on the last scenario still counts as a halt.
            halted_early = True
            logger.debug("run_halted", index=index, dropped=len(scenarios) - index)
            break

    result = RunResult(
        policy=policy,
        total_scenarios=len(scenarios),
        scenarios_attempted=tuple(attempted),
        succeeded=succeeded,
        failed=failed,
        halted_early=halted_early,
    )
    logger.debug("run_finished", succeeded=succeeded, failed=failed, halted_early=halted_early)
    return result


def availability(result: RunResult) -> float:
    """Succeeded scenarios over the full input length, attempted or not."""

    return result.availability


def compare(scenarios: Sequence[Scenario]) -> Comparison:
    """Run both policies over the same scenario list."""

    return Comparison(
        strict=run(scenarios, Policy.STRICT),
        resilient=run(scenarios, Policy.RESILIENT),
    )
