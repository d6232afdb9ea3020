"""Composable API functions for recording and replaying sorting traces.

Each function corresponds to a CLI workflow (--trace-only, --stats, --step,
--json) but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .algorithm_types import AlgorithmInput, ValidationError
from .algorithms import get_algorithm
from .operation import Number
from .player import AlgorithmPlayer
from .player_types import PlayerConfig
from .recorder import record_trace
from .replay import replay
from .scheduler import Scheduler
from .trace_stats import count_operations
from .trace_types import AlgorithmTrace
from . import constants

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a trace is requested for input that fails validation."""

    def __init__(self, errors: list[ValidationError]):
        self.errors = errors
        super().__init__("; ".join(str(e) for e in errors))


def validate_array(
    array: Sequence[Any],
    algorithm: str = constants.DEFAULT_ALGORITHM,
) -> list[ValidationError]:
    """Run *algorithm*'s preconditions over *array*.

    Args:
        array: Candidate input.
        algorithm: Registered algorithm name.

    Returns:
        A list of ValidationErrors; empty when the array is acceptable.
    """
    return get_algorithm(algorithm).validate(AlgorithmInput(array=array))


def generate_trace(
    array: Sequence[Number],
    algorithm: str = constants.DEFAULT_ALGORITHM,
    check_bounds: bool = False,
) -> AlgorithmTrace:
    """Validate *array*, then record *algorithm*'s full trace over it.

    Args:
        array: Input numbers (not modified).
        algorithm: Registered algorithm name.
        check_bounds: Verify every operation's indices while recording.

    Returns:
        An immutable AlgorithmTrace.

    Raises:
        InvalidInputError: If the array fails the algorithm's preconditions.
        ValueError: If *algorithm* is not registered.
    """
    engine = get_algorithm(algorithm)
    algorithm_input = AlgorithmInput(array=array)
    errors = engine.validate(algorithm_input)
    if errors:
        logger.info("Refusing to trace invalid input: %d error(s)", len(errors))
        raise InvalidInputError(errors)
    return record_trace(engine, algorithm_input, check_bounds=check_bounds)


def dump_trace(trace: AlgorithmTrace) -> str:
    """Return a human-readable dump with one numbered operation per line."""
    width = len(str(len(trace.operations)))
    return "\n".join(
        f"  {i:>{width}}  {op}" for i, op in enumerate(trace.operations)
    )


def trace_stats(trace: AlgorithmTrace) -> dict[str, int]:
    """Return operation type frequency counts for *trace*."""
    return count_operations(trace.operations)


def replay_trace(trace: AlgorithmTrace, step: Optional[int] = None) -> list[Number]:
    """Return the array after the first *step* operations (default: all)."""
    return replay(trace.original_array, trace.operations, step)


def trace_to_dict(trace: AlgorithmTrace) -> dict[str, Any]:
    return trace.to_dict()


def create_player(
    trace: AlgorithmTrace,
    scheduler: Optional[Scheduler] = None,
    config: PlayerConfig = PlayerConfig(),
) -> AlgorithmPlayer:
    """Build a player loaded with *trace*'s input and operations."""
    player = AlgorithmPlayer(scheduler=scheduler, config=config)
    player.set_array(trace.original_array)
    player.set_operations(trace.operations)
    return player
