from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from outcome_simulator.loader import load_scenarios


def test_load_scenarios(tmp_path: Path) -> None:
    payload = {
        "scenarios": [
            {"name": "checkout", "outcome": "success"},
            {"name": "refund", "outcome": {"kind": "failure", "reason": "Parse error"}},
        ]
    }
    path = tmp_path / "scenarios.yaml"
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")

    scenarios = load_scenarios(path)

    assert [s.name for s in scenarios] == ["checkout", "refund"]
    assert scenarios[0].succeeded
    assert scenarios[1].reason == "Parse error"


def test_load_scenarios_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "scenarios.yaml"
    path.write_text(yaml.safe_dump(["checkout"]), encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_scenarios(path)


def test_load_scenarios_rejects_unknown_outcome(tmp_path: Path) -> None:
    path = tmp_path / "scenarios.yaml"
    path.write_text(
        yaml.safe_dump({"scenarios": [{"name": "x", "outcome": {"kind": "maybe"}}]}),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        load_scenarios(path)


def test_load_scenarios_allows_empty_list(tmp_path: Path) -> None:
    path = tmp_path / "scenarios.yaml"
    path.write_text(yaml.safe_dump({"scenarios": []}), encoding="utf-8")

    assert load_scenarios(path) == []
