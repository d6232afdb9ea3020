"""Algorithm contract data types (pure data, no business logic)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

from .operation import Operation


@dataclass(frozen=True)
class TimeComplexity:
    best: str
    average: str
    worst: str


@dataclass(frozen=True)
class AlgorithmMetadata:
    """Static description of an algorithm, consumed only for display."""

    name: str
    description: str
    time_complexity: TimeComplexity
    space_complexity: str
    stable: bool
    in_place: bool

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "time_complexity": {
                "best": self.time_complexity.best,
                "average": self.time_complexity.average,
                "worst": self.time_complexity.worst,
            },
            "space_complexity": self.space_complexity,
            "stable": self.stable,
            "in_place": self.in_place,
        }


@dataclass(frozen=True)
class AlgorithmInput:
    """Input to an algorithm engine.

    ``size`` and ``settings`` are accepted for forward compatibility; the
    bundled engines ignore them.
    """

    array: Sequence[Any]
    size: int | None = None
    settings: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class Algorithm(ABC):
    """A sorting algorithm that records its work as a stream of Operations."""

    metadata: AlgorithmMetadata

    @abstractmethod
    def validate(self, algorithm_input: AlgorithmInput) -> list[ValidationError]:
        """Return one error per violated precondition; never raises."""
        ...

    @abstractmethod
    def trace(self, algorithm_input: AlgorithmInput) -> Iterator[Operation]:
        """Lazily yield every operation needed to sort the input.

        Must not mutate ``algorithm_input.array``.  Only meaningful when
        ``validate`` returned no errors.
        """
        ...
