"""Scenario and run result models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Success(BaseModel):
    """Scenario completed normally."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"


class Failure(BaseModel):
    """Scenario failed; the failure is recorded as data."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: str


Outcome = Annotated[Union[Success, Failure], Field(discriminator="kind")]


class Policy(str, Enum):
    """How a run reacts to a failed scenario."""

    STRICT = "strict"
    RESILIENT = "resilient"


class Scenario(BaseModel):
    """Named, predetermined success-or-failure event."""

    model_config = ConfigDict(frozen=True)

    name: str
    outcome: Outcome

    @field_validator("outcome", mode="before")
    @classmethod
    def _expand_shorthand(cls, value: Any) -> Any:
        if isinstance(value, str) and value.lower() == "success":
            return {"kind": "success"}
        return value

    @classmethod
    def success(cls, name: str) -> "Scenario":
        return cls(name=name, outcome=Success())

    @classmethod
    def failure(cls, name: str, reason: str) -> "Scenario":
        return cls(name=name, outcome=Failure(reason=reason))

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def reason(self) -> str | None:
        if isinstance(self.outcome, Failure):
            return self.outcome.reason
        return None


class RunResult(BaseModel):
    """Aggregated outcome of one policy over a scenario list."""

    model_config = ConfigDict(frozen=True)

    policy: Policy
    total_scenarios: int = Field(gt=0)
    scenarios_attempted: tuple[Scenario, ...]
    succeeded: int = Field(ge=0)
    failed: int = Field(ge=0)
    halted_early: bool

    @model_validator(mode="after")
    def _check_counts(self) -> "RunResult":
        attempted = len(self.scenarios_attempted)
        if self.succeeded + self.failed != attempted:
            raise ValueError(
                f"succeeded ({self.succeeded}) + failed ({self.failed}) must equal attempted ({attempted})"
            )
        if attempted > self.total_scenarios:
            raise ValueError(
                f"attempted ({attempted}) exceeds total scenarios ({self.total_scenarios})"
            )
        return self

    @property
    def availability(self) -> float:
        """Share of the full scenario list that succeeded."""

        return self.succeeded / self.total_scenarios

    @property
    def skipped(self) -> int:
        return self.total_scenarios - len(self.scenarios_attempted)


class Comparison(BaseModel):
    """Strict and resilient runs over the same scenario list."""

    model_config = ConfigDict(frozen=True)

    strict: RunResult
    resilient: RunResult

    @property
    def availability_gain(self) -> float:
        return self.resilient.availability - self.strict.availability

    def as_serializable(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary including derived metrics."""

        payload = self.model_dump(mode="json")
        for key, result in (("strict", self.strict), ("resilient", self.resilient)):
            payload[key]["availability"] = round(result.availability, 4)
            payload[key]["skipped"] = result.skipped
        payload["availability_gain"] = round(self.availability_gain, 4)
        return payload
