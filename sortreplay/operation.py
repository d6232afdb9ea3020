"""Operation model — the vocabulary of recordable sorting events."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    field_serializer,
    field_validator,
    model_validator,
)

Number = Union[int, float]


class OperationType(str, Enum):
    # Observational
    COMPARE = "compare"
    MARK = "mark"
    SPLIT = "split"
    # Array writes
    SWAP = "swap"
    MERGE = "merge"


class MarkState(str, Enum):
    ACTIVE = "active"
    SORTED = "sorted"
    PIVOT = "pivot"
    MERGED = "merged"


MUTATING_TYPES: frozenset[OperationType] = frozenset(
    {OperationType.SWAP, OperationType.MERGE}
)


class Operation(BaseModel):
    """One recorded step of a sorting algorithm.

    Only SWAP and MERGE carry array writes: ``values[k]`` is the value written
    to ``indices[k]``.  Everything else is an annotation for the renderer.
    ``metadata`` is stored as a read-only mapping.
    """

    model_config = ConfigDict(frozen=True)

    type: OperationType
    indices: tuple[int, ...]
    values: Optional[tuple[Number, ...]] = None
    state: Optional[MarkState] = None  # only meaningful for MARK
    metadata: Optional[Mapping[str, Any]] = None

    @field_validator("indices")
    @classmethod
    def _indices_valid(cls, indices: tuple[int, ...]) -> tuple[int, ...]:
        if not indices:
            raise ValueError("indices must not be empty")
        negative = [i for i in indices if i < 0]
        if negative:
            raise ValueError(f"indices must be non-negative, got {negative}")
        return indices

    @field_validator("metadata")
    @classmethod
    def _freeze_metadata(
        cls, metadata: Optional[Mapping[str, Any]]
    ) -> Optional[Mapping[str, Any]]:
        if metadata is None:
            return None
        return MappingProxyType(dict(metadata))

    @field_serializer("metadata")
    def _serialize_metadata(
        self, metadata: Optional[Mapping[str, Any]]
    ) -> Optional[dict[str, Any]]:
        return None if metadata is None else dict(metadata)

    @model_validator(mode="after")
    def _state_only_on_mark(self) -> Operation:
        if self.state is not None and self.type != OperationType.MARK:
            raise ValueError(f"state is only valid on mark operations, not {self.type.value}")
        return self

    @property
    def is_mutation(self) -> bool:
        return self.type in MUTATING_TYPES

    def writes(self) -> list[tuple[int, Number]]:
        """Return the (index, value) pairs this operation writes, in order."""
        if not self.is_mutation or self.values is None:
            return []
        return list(zip(self.indices, self.values))

    def check_bounds(self, length: int) -> None:
        """Raise IndexError if any index falls outside ``[0, length)``."""
        bad = [i for i in self.indices if not 0 <= i < length]
        if bad:
            raise IndexError(
                f"{self.type.value} operation references {bad}, "
                f"outside array of length {length}"
            )

    def __str__(self) -> str:
        parts: list[str] = [self.type.value, str(list(self.indices))]
        if self.is_mutation and self.values is not None:
            parts.append(f"<- {list(self.values)}")
        elif self.values is not None:
            parts.append(str(list(self.values)))
        if self.state is not None:
            parts.append(self.state.value)
        if self.metadata:
            parts.append(
                " ".join(f"{k}={v}" for k, v in sorted(self.metadata.items()))
            )
        return " ".join(parts)


def compare(i: int, j: int, values: Optional[tuple[Number, Number]] = None) -> Operation:
    return Operation(type=OperationType.COMPARE, indices=(i, j), values=values)


def write(index: int, value: Number) -> Operation:
    return Operation(type=OperationType.SWAP, indices=(index,), values=(value,))


def mark(indices: range | list[int] | tuple[int, ...], state: MarkState) -> Operation:
    return Operation(type=OperationType.MARK, indices=tuple(indices), state=state)


def split(mid: int, left: int, right: int) -> Operation:
    return Operation(
        type=OperationType.SPLIT,
        indices=(mid,),
        metadata={"left": left, "right": right, "mid": mid},
    )
