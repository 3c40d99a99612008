"""Domain models for stribot."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..errors import ExtractionError


@dataclass(frozen=True)
class TempReading:
    timestamp: datetime
    temperature: float

    def format(self) -> str:
        return f"{self.temperature} at {self.timestamp:%Y-%m-%d %H:%M}"


@dataclass(frozen=True)
class MinMax:
    min: TempReading
    max: TempReading

    def __post_init__(self) -> None:
        if self.min.temperature > self.max.temperature:
            raise ValueError(
                f"min temperature {self.min.temperature} is above max {self.max.temperature}"
            )


@dataclass(frozen=True)
class SourceOutcome:
    """Result of one source lookup inside a combined report."""

    source: str
    value: float | None = None
    error: ExtractionError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value or error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None
