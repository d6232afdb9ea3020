"""Merge sort engine — top-down, stable, records every compare and write."""

from __future__ import annotations

from typing import Iterator

from ..algorithm_types import (
    Algorithm,
    AlgorithmInput,
    AlgorithmMetadata,
    TimeComplexity,
    ValidationError,
)
from ..operation import MarkState, Operation, compare, mark, split, write
from ..validation import validate_numeric_array


class MergeSort(Algorithm):
    metadata = AlgorithmMetadata(
        name="Merge Sort",
        description=(
            "A divide-and-conquer algorithm that recursively splits the array, "
            "sorts the subarrays, and merges them back together."
        ),
        time_complexity=TimeComplexity(
            best="O(n log n)", average="O(n log n)", worst="O(n log n)"
        ),
        space_complexity="O(n)",
        stable=True,
        in_place=False,
    )

    def validate(self, algorithm_input: AlgorithmInput) -> list[ValidationError]:
        return validate_numeric_array(algorithm_input.array)

    def trace(self, algorithm_input: AlgorithmInput) -> Iterator[Operation]:
        array = list(algorithm_input.array)
        n = len(array)
        if n == 0:
            return
        if n == 1:
            yield mark([0], MarkState.SORTED)
            return
        yield from self._sort(array, 0, n - 1)

    def _sort(self, array: list, left: int, right: int) -> Iterator[Operation]:
        if left == right:
            yield mark([left], MarkState.SORTED)
            return
        mid = (left + right) // 2
        yield split(mid, left, right)
        yield from self._sort(array, left, mid)
        yield from self._sort(array, mid + 1, right)
        yield from self._merge(array, left, mid, right)

    def _merge(self, array: list, left: int, mid: int, right: int) -> Iterator[Operation]:
        left_run = array[left : mid + 1]
        right_run = array[mid + 1 : right + 1]
        span = range(left, right + 1)
        i = j = 0
        k = left

        yield mark(span, MarkState.ACTIVE)

        while i < len(left_run) and j < len(right_run):
            yield compare(left + i, mid + 1 + j, (left_run[i], right_run[j]))
            # <= keeps equal keys in left-run order
            if left_run[i] <= right_run[j]:
                array[k] = left_run[i]
                i += 1
            else:
                array[k] = right_run[j]
                j += 1
            yield write(k, array[k])
            k += 1

        for value in left_run[i:] + right_run[j:]:
            array[k] = value
            yield write(k, value)
            k += 1

        yield mark(span, MarkState.SORTED)
