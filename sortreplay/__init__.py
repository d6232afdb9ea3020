"""Sorting algorithm trace recording and playback."""

from .api import (  # noqa: F401
    InvalidInputError,
    create_player,
    dump_trace,
    generate_trace,
    replay_trace,
    trace_stats,
    trace_to_dict,
    validate_array,
)
from .algorithms import available_algorithms, get_algorithm  # noqa: F401
from .operation import MarkState, Operation, OperationType  # noqa: F401
from .player import AlgorithmPlayer  # noqa: F401
from .trace_types import AlgorithmTrace  # noqa: F401
