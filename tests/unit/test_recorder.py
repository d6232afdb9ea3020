"""Tests for record_trace — materializing an engine's operations."""

import logging

import pytest

from sortreplay.algorithm_types import AlgorithmInput
from sortreplay.algorithms import InsertionSort, MergeSort
from sortreplay.operation import compare
from sortreplay.recorder import record_trace
from sortreplay.trace_types import AlgorithmTrace


class _OutOfBoundsEngine(MergeSort):
    def trace(self, algorithm_input):
        yield compare(0, len(algorithm_input.array))


class TestRecordTrace:
    def test_returns_algorithm_trace(self):
        trace = record_trace(MergeSort(), AlgorithmInput(array=[3, 1, 2]))
        assert isinstance(trace, AlgorithmTrace)
        assert isinstance(trace.operations, tuple)

    def test_final_array_is_sorted(self):
        trace = record_trace(MergeSort(), AlgorithmInput(array=[3, 1, 4, 1, 5]))
        assert trace.final_array == (1, 1, 3, 4, 5)
        assert trace.original_array == (3, 1, 4, 1, 5)

    def test_metadata_comes_from_engine(self):
        trace = record_trace(InsertionSort(), AlgorithmInput(array=[2, 1]))
        assert trace.metadata.name == "Insertion Sort"

    def test_len_is_operation_count(self):
        trace = record_trace(MergeSort(), AlgorithmInput(array=[2, 1]))
        assert len(trace) == len(trace.operations) == 8

    def test_check_bounds_raises_on_bad_engine(self):
        with pytest.raises(IndexError):
            record_trace(_OutOfBoundsEngine(), AlgorithmInput(array=[1, 2]), check_bounds=True)

    def test_unchecked_recording_keeps_bad_operation(self):
        trace = record_trace(_OutOfBoundsEngine(), AlgorithmInput(array=[1, 2]))
        assert len(trace) == 1

    def test_logs_operation_count(self, caplog):
        with caplog.at_level(logging.INFO, logger="sortreplay.recorder"):
            record_trace(MergeSort(), AlgorithmInput(array=[2, 1]))
        assert "recorded 8 operations" in caplog.text

    def test_to_dict_is_json_ready(self):
        trace = record_trace(MergeSort(), AlgorithmInput(array=[2, 1]))
        data = trace.to_dict()
        assert data["final_array"] == [1, 2]
        assert data["metadata"]["name"] == "Merge Sort"
        assert data["operations"][0] == {
            "type": "split",
            "indices": [0],
            "metadata": {"left": 0, "right": 1, "mid": 0},
        }
        assert data["operations"][1] == {"type": "mark", "indices": [0], "state": "sorted"}
