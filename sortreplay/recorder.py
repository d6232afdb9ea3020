"""Recorder — run an engine to completion and materialize its trace."""

from __future__ import annotations

import logging
import time

from .algorithm_types import Algorithm, AlgorithmInput
from .operation import Operation
from .replay import replay
from .trace_types import AlgorithmTrace

logger = logging.getLogger(__name__)


def record_trace(
    algorithm: Algorithm,
    algorithm_input: AlgorithmInput,
    check_bounds: bool = False,
) -> AlgorithmTrace:
    """Drain ``algorithm.trace`` into an immutable AlgorithmTrace.

    The caller is responsible for validating *algorithm_input* first.  With
    *check_bounds* every operation is checked against the input length and
    an ``IndexError`` is raised on the first out-of-range index.

    Args:
        algorithm: The engine to run.
        algorithm_input: Input array (not modified).
        check_bounds: Verify index validity while recording.

    Returns:
        An AlgorithmTrace whose ``final_array`` is the replay of all
        operations against the input.
    """
    original = tuple(algorithm_input.array)
    n = len(original)
    t0 = time.perf_counter()

    operations: list[Operation] = []
    for operation in algorithm.trace(algorithm_input):
        if check_bounds:
            operation.check_bounds(n)
        operations.append(operation)

    final_array = tuple(replay(original, operations))
    logger.info(
        "%s recorded %d operations for %d elements in %.1fms",
        algorithm.metadata.name,
        len(operations),
        n,
        (time.perf_counter() - t0) * 1000,
    )
    return AlgorithmTrace(
        metadata=algorithm.metadata,
        original_array=original,
        operations=tuple(operations),
        final_array=final_array,
    )
