"""Sorting engines that record their work as Operation streams."""

from __future__ import annotations

from ..algorithm_types import Algorithm
from .. import constants
from .insertion_sort import InsertionSort
from .merge_sort import MergeSort

_ALGORITHM_CLASSES: dict[str, type[Algorithm]] = {
    constants.MERGE_SORT: MergeSort,
    constants.INSERTION_SORT: InsertionSort,
}


def get_algorithm(name: str) -> Algorithm:
    """Instantiate the engine registered under *name*.

    Raises ``ValueError`` if *name* has no registered engine.
    """
    cls = _ALGORITHM_CLASSES.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown algorithm: {name}. Available: {list(_ALGORITHM_CLASSES)}"
        )
    return cls()


def available_algorithms() -> tuple[str, ...]:
    return tuple(_ALGORITHM_CLASSES.keys())


__all__ = [
    "InsertionSort",
    "MergeSort",
    "available_algorithms",
    "get_algorithm",
]
