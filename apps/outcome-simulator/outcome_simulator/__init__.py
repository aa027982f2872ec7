"""Deterministic failure-outcome simulator comparing strict and resilient policies."""

from .errors import InvalidInputError
from .models import Comparison, Failure, Policy, RunResult, Scenario, Success
from .simulator import availability, compare, run

__all__ = [
    "Comparison",
    "Failure",
    "InvalidInputError",
    "Policy",
    "RunResult",
    "Scenario",
    "Success",
    "availability",
    "compare",
    "run",
]
