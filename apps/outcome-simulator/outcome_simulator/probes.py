"""Scripted failure probes.

Each probe operation fails the ordinary Python way (by raising). ``probe``
runs one and captures the exception as a ``Failure`` scenario so that a
failing probe never takes the caller down with it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Sequence

import structlog

from .models import Scenario

LOGGER = structlog.get_logger("outcome_simulator")

MISSING_CONFIG = Path("nonexistent.txt")


def divide(a: int, b: int) -> int:
    return a // b


def parse_and_double(text: str) -> int:
    number = int(text)
    return divide(number, 2) * 2


def read_config_file(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def nested_value(data: Any, *keys: str) -> Any:
    value = data
    for key in keys:
        value = value[key]
    return value


def element_at(items: Sequence[Any], index: int) -> Any:
    return items[index]


def probe(name: str, func: Callable[..., Any], *args: Any) -> Scenario:
    """Run ``func(*args)`` and record the result as a scenario."""

    try:
        func(*args)
    except Exception as exc:
        reason = f"{type(exc).__name__}: {exc}"
        LOGGER.info("probe_failed", probe=name, reason=reason)
        return Scenario.failure(name, reason)
    return Scenario.success(name)


def default_probes(missing_config: Path = MISSING_CONFIG) -> list[Scenario]:
    """Run the scripted probe set with fixed inputs."""

    nested = {"outer": {"inner": {"value": 42}}}
    numbers = [1, 2, 3, 4, 5]
    return [
        probe("divide-ok", divide, 10, 2),
        probe("divide-by-zero", divide, 10, 0),
        probe("parse-number", parse_and_double, "10"),
        probe("parse-invalid", parse_and_double, "not a number"),
        probe("missing-config", read_config_file, missing_config),
        probe("nested-present", nested_value, nested, "outer", "inner", "value"),
        probe("nested-missing", nested_value, nested, "outer", "inner", "missing"),
        probe("index-in-range", element_at, numbers, 2),
        probe("index-out-of-range", element_at, numbers, 10),
    ]
