"""Tests for operation statistics."""

from sortreplay.operation import MarkState, OperationType, compare, mark, write
from sortreplay.trace_stats import count_operations, count_type

OPS = [
    mark([0, 1], MarkState.ACTIVE),
    compare(0, 1),
    write(0, 1),
    compare(0, 1),
    write(1, 2),
    mark([0, 1], MarkState.SORTED),
]


class TestCountOperations:
    def test_empty(self):
        assert count_operations([]) == {}

    def test_counts_by_type_name(self):
        assert count_operations(OPS) == {"mark": 2, "compare": 2, "swap": 2}

    def test_keys_are_strings(self):
        assert all(isinstance(k, str) for k in count_operations(OPS))


class TestCountType:
    def test_all(self):
        assert count_type(OPS, OperationType.COMPARE) == 2

    def test_prefix(self):
        assert count_type(OPS, OperationType.SWAP, 3) == 1

    def test_zero_prefix(self):
        assert count_type(OPS, OperationType.MARK, 0) == 0

    def test_negative_prefix_counts_nothing(self):
        assert count_type(OPS, OperationType.MARK, -2) == 0
