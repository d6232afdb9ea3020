"""Tests for sample array generators."""

import random

import pytest

from sortreplay.array_generators import (
    ArrayPattern,
    duplicates_array,
    generate_array,
    nearly_sorted_array,
    random_array,
    reversed_array,
    sorted_array,
)


class TestGenerators:
    def test_random_array_size_and_range(self):
        array = random_array(50, 1, 10, rng=random.Random(1))
        assert len(array) == 50
        assert all(1 <= v <= 10 for v in array)

    def test_seeded_generation_is_reproducible(self):
        assert random_array(20, rng=random.Random(7)) == random_array(20, rng=random.Random(7))

    def test_sorted_array(self):
        array = sorted_array(30, rng=random.Random(2))
        assert array == sorted(array)

    def test_reversed_array(self):
        array = reversed_array(30, rng=random.Random(3))
        assert array == sorted(array, reverse=True)

    def test_nearly_sorted_keeps_multiset(self):
        rng_a, rng_b = random.Random(4), random.Random(4)
        base = sorted_array(25, rng=rng_a)
        nearly = nearly_sorted_array(25, rng=rng_b)
        assert sorted(nearly) == base

    def test_nearly_sorted_empty(self):
        assert nearly_sorted_array(0) == []

    def test_duplicates_has_repeats(self):
        array = duplicates_array(20, rng=random.Random(5))
        assert len(array) == 20
        assert len(set(array)) <= 10
        assert all(1 <= v <= 50 for v in array)

    def test_duplicates_single_element(self):
        assert len(duplicates_array(1, rng=random.Random(0))) == 1


class TestGenerateArray:
    @pytest.mark.parametrize("pattern", list(ArrayPattern))
    def test_every_pattern_produces_requested_size(self, pattern):
        assert len(generate_array(pattern, 12, rng=random.Random(9))) == 12

    def test_accepts_pattern_name(self):
        array = generate_array("sorted", 10, rng=random.Random(9))
        assert array == sorted(array)

    def test_unknown_pattern(self):
        with pytest.raises(ValueError):
            generate_array("zigzag", 10)
