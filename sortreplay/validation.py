"""Input preconditions shared by the sorting engines."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from .algorithm_types import ValidationError
from . import constants

logger = logging.getLogger(__name__)


def is_finite_number(value: Any) -> bool:
    # Operation values hold int or float; other numeric types would be coerced
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_numeric_array(array: Any) -> list[ValidationError]:
    """Check that *array* is a non-empty sequence of finite int/float values.

    Returns at most one ValidationError, or an empty list when the array is
    acceptable.  Never raises and never mutates; anything that is not a
    sequence is reported as non-numeric.
    """
    errors: list[ValidationError] = []
    if array is None or (isinstance(array, Sequence) and len(array) == 0):
        errors.append(
            ValidationError(field=constants.ARRAY_FIELD, message=constants.EMPTY_ARRAY_MESSAGE)
        )
    elif not isinstance(array, Sequence) or not all(is_finite_number(v) for v in array):
        errors.append(
            ValidationError(field=constants.ARRAY_FIELD, message=constants.NON_FINITE_MESSAGE)
        )
    if errors:
        logger.debug("Input rejected: %s", "; ".join(str(e) for e in errors))
    return errors
