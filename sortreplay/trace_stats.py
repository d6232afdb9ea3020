"""Pure functions for computing statistics over operation sequences."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from .operation import Operation, OperationType


def count_operations(operations: Sequence[Operation]) -> dict[str, int]:
    """Return a frequency map of operation type names.

    Args:
        operations: A sequence of Operations.

    Returns:
        A dict mapping type name strings to their occurrence counts.
        Empty dict for an empty input.
    """
    return dict(Counter(op.type.value for op in operations))


def count_type(operations: Sequence[Operation], op_type: OperationType, upto: int | None = None) -> int:
    """Count operations of *op_type* among the first *upto* (default: all)."""
    window = operations if upto is None else operations[: max(0, upto)]
    return sum(1 for op in window if op.type == op_type)
