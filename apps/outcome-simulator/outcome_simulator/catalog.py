"""Built-in scenario set used when no scenario file is given."""

from __future__ import annotations

from .models import Scenario

MISSING_INPUT = "No input provided"

# Seven requests, two of which arrive without input (positions 3 and 6).
# Strict: 2/7 succeed before the halt. Resilient: 5/7 succeed.
DEFAULT_SCENARIOS: tuple[Scenario, ...] = (
    Scenario.success("request-1"),
    Scenario.success("request-2"),
    Scenario.failure("request-3", MISSING_INPUT),
    Scenario.success("request-4"),
    Scenario.success("request-5"),
    Scenario.failure("request-6", MISSING_INPUT),
    Scenario.success("request-7"),
)
