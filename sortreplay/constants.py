"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

MIN_SPEED = 0.25
MAX_SPEED = 4.0
DEFAULT_SPEED = 1.0

# Milliseconds between playback ticks at speed 1.0
BASE_TICK_MS = 1000.0

ARRAY_FIELD = "array"
EMPTY_ARRAY_MESSAGE = "Array must not be empty"
NON_FINITE_MESSAGE = "Array must contain only finite numbers"

MERGE_SORT = "merge_sort"
INSERTION_SORT = "insertion_sort"
DEFAULT_ALGORITHM = MERGE_SORT

DEFAULT_MIN_VALUE = 1
DEFAULT_MAX_VALUE = 100
DEFAULT_DUPLICATES_MAX_VALUE = 50
DEFAULT_NEARLY_SORTED_SWAPS = 3
