"""Trace data types for step-by-step playback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .algorithm_types import AlgorithmMetadata
from .operation import Number, Operation


@dataclass(frozen=True)
class AlgorithmTrace:
    """Complete, materialized record of one algorithm run.

    Contains the input snapshot, every Operation in the order performed and
    the array produced by the run.  Produced once, read many times.
    """

    metadata: AlgorithmMetadata
    original_array: tuple[Number, ...] = ()
    operations: tuple[Operation, ...] = ()
    final_array: tuple[Number, ...] = ()

    def __len__(self) -> int:
        return len(self.operations)

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "original_array": list(self.original_array),
            "final_array": list(self.final_array),
            "operations": [
                op.model_dump(mode="json", exclude_none=True) for op in self.operations
            ],
        }
