"""Scenario loading utilities."""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field

from .models import Scenario

LOGGER = structlog.get_logger("outcome_simulator")


class ScenarioFile(BaseModel):
    """Document layout of a scenario YAML file."""

    scenarios: list[Scenario] = Field(default_factory=list)


def load_scenarios(path: Path) -> list[Scenario]:
    """Load and validate a scenario YAML file."""

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Scenario file {path} must contain a mapping")
    document = ScenarioFile.model_validate(data)
    LOGGER.info("scenarios_loaded", path=str(path), count=len(document.scenarios))
    return document.scenarios
