"""Sample input arrays in the shapes that stress sorting algorithms differently."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from . import constants


class ArrayPattern(str, Enum):
    RANDOM = "random"
    SORTED = "sorted"
    REVERSED = "reversed"
    NEARLY_SORTED = "nearly_sorted"
    DUPLICATES = "duplicates"


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_array(
    size: int,
    min_value: int = constants.DEFAULT_MIN_VALUE,
    max_value: int = constants.DEFAULT_MAX_VALUE,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Return *size* integers drawn uniformly from ``[min_value, max_value]``."""
    r = _rng(rng)
    return [r.randint(min_value, max_value) for _ in range(size)]


def sorted_array(
    size: int,
    min_value: int = constants.DEFAULT_MIN_VALUE,
    max_value: int = constants.DEFAULT_MAX_VALUE,
    rng: Optional[random.Random] = None,
) -> list[int]:
    return sorted(random_array(size, min_value, max_value, rng))


def reversed_array(
    size: int,
    min_value: int = constants.DEFAULT_MIN_VALUE,
    max_value: int = constants.DEFAULT_MAX_VALUE,
    rng: Optional[random.Random] = None,
) -> list[int]:
    return sorted_array(size, min_value, max_value, rng)[::-1]


def nearly_sorted_array(
    size: int,
    min_value: int = constants.DEFAULT_MIN_VALUE,
    max_value: int = constants.DEFAULT_MAX_VALUE,
    swaps: int = constants.DEFAULT_NEARLY_SORTED_SWAPS,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Sorted array with *swaps* random pairs exchanged."""
    r = _rng(rng)
    array = sorted_array(size, min_value, max_value, r)
    if size == 0:
        return array
    for _ in range(swaps):
        a, b = r.randrange(size), r.randrange(size)
        array[a], array[b] = array[b], array[a]
    return array


def duplicates_array(
    size: int,
    min_value: int = constants.DEFAULT_MIN_VALUE,
    max_value: int = constants.DEFAULT_DUPLICATES_MAX_VALUE,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Shuffled array built by cycling through at most ``size // 2`` base values."""
    r = _rng(rng)
    distinct = max(1, min(max_value - min_value + 1, size // 2))
    base = random_array(distinct, min_value, max_value, r)
    array = [base[i % distinct] for i in range(size)]
    r.shuffle(array)
    return array


def generate_array(
    pattern: ArrayPattern | str,
    size: int,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Dispatch to the generator for *pattern* using its default value range.

    Raises ``ValueError`` for an unknown pattern name.
    """
    pattern = ArrayPattern(pattern)
    if pattern == ArrayPattern.SORTED:
        return sorted_array(size, rng=rng)
    if pattern == ArrayPattern.REVERSED:
        return reversed_array(size, rng=rng)
    if pattern == ArrayPattern.NEARLY_SORTED:
        return nearly_sorted_array(size, rng=rng)
    if pattern == ArrayPattern.DUPLICATES:
        return duplicates_array(size, rng=rng)
    return random_array(size, rng=rng)
