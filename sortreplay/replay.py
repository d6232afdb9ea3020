"""Replay — reconstruct array state from an operation sequence (pure functions)."""

from __future__ import annotations

from typing import Iterable, Sequence

from .operation import Number, Operation


def apply_operation(array: list[Number], operation: Operation) -> None:
    """Mechanically apply one Operation to *array* in place.

    Only SWAP and MERGE write; every other type leaves *array* untouched.
    """
    for index, value in operation.writes():
        array[index] = value


def apply_operations(array: list[Number], operations: Iterable[Operation]) -> None:
    for operation in operations:
        apply_operation(array, operation)


def replay(
    original: Sequence[Number],
    operations: Sequence[Operation],
    step: int | None = None,
) -> list[Number]:
    """Return the array as it stands after the first *step* operations.

    *step* defaults to the whole sequence and is clamped to
    ``[0, len(operations)]``.  *original* is never modified.
    """
    if step is None:
        step = len(operations)
    step = max(0, min(step, len(operations)))
    array = list(original)
    apply_operations(array, operations[:step])
    return array
