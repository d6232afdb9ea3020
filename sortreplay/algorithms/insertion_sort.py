"""Insertion sort engine."""

from __future__ import annotations

from typing import Iterator

from ..algorithm_types import (
    Algorithm,
    AlgorithmInput,
    AlgorithmMetadata,
    TimeComplexity,
    ValidationError,
)
from ..operation import MarkState, Operation, compare, mark, write
from ..validation import validate_numeric_array


class InsertionSort(Algorithm):
    metadata = AlgorithmMetadata(
        name="Insertion Sort",
        description=(
            "Builds the sorted array one element at a time by shifting larger "
            "elements right and inserting each new element into its place."
        ),
        time_complexity=TimeComplexity(best="O(n)", average="O(n²)", worst="O(n²)"),
        space_complexity="O(1)",
        stable=True,
        in_place=True,
    )

    def validate(self, algorithm_input: AlgorithmInput) -> list[ValidationError]:
        return validate_numeric_array(algorithm_input.array)

    def trace(self, algorithm_input: AlgorithmInput) -> Iterator[Operation]:
        array = list(algorithm_input.array)
        n = len(array)
        if n == 0:
            return

        yield mark([0], MarkState.SORTED)

        for i in range(1, n):
            current = array[i]
            yield mark([i], MarkState.ACTIVE)

            j = i - 1
            while j >= 0:
                yield compare(i, j, (current, array[j]))
                if array[j] <= current:
                    break
                array[j + 1] = array[j]
                yield write(j + 1, array[j])
                j -= 1

            array[j + 1] = current
            yield write(j + 1, current)
            yield mark(range(i + 1), MarkState.SORTED)
