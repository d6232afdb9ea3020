"""Tests for numeric array preconditions."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from sortreplay.validation import is_finite_number, validate_numeric_array


class TestIsFiniteNumber:
    @pytest.mark.parametrize("value", [0, -3, 2.5, 1e300])
    def test_finite_reals_accepted(self, value):
        assert is_finite_number(value)

    @pytest.mark.parametrize(
        "value", [math.nan, math.inf, -math.inf, "3", None, True, [1]]
    )
    def test_everything_else_rejected(self, value):
        assert not is_finite_number(value)

    @pytest.mark.parametrize("value", [Fraction(1, 3), Decimal("2.5"), 1 + 0j])
    def test_other_numeric_types_rejected(self, value):
        assert not is_finite_number(value)


class TestValidateNumericArray:
    def test_valid_array_has_no_errors(self):
        assert validate_numeric_array([3, 1, 4, 1, 5]) == []

    def test_empty_array_has_exactly_one_error_on_array_field(self):
        errors = validate_numeric_array([])
        assert len(errors) == 1
        assert errors[0].field == "array"
        assert "empty" in errors[0].message

    def test_none_treated_as_empty(self):
        errors = validate_numeric_array(None)
        assert [e.field for e in errors] == ["array"]

    def test_non_numeric_value(self):
        errors = validate_numeric_array([1, 2, "3", 4])
        assert len(errors) == 1
        assert errors[0].field == "array"
        assert "finite" in errors[0].message

    def test_infinite_value(self):
        errors = validate_numeric_array([1, 2, math.inf, 4])
        assert len(errors) == 1

    def test_nan_value(self):
        assert len(validate_numeric_array([math.nan])) == 1

    def test_fraction_values_rejected(self):
        errors = validate_numeric_array([Fraction(1, 2), Fraction(1, 3)])
        assert [e.message for e in errors] == ["Array must contain only finite numbers"]

    def test_tuple_accepted(self):
        assert validate_numeric_array((2, 1.5)) == []

    @pytest.mark.parametrize("value", [5, 2.5, object()])
    def test_non_sequence_reported_not_raised(self, value):
        errors = validate_numeric_array(value)
        assert len(errors) == 1
        assert errors[0].field == "array"
        assert "finite" in errors[0].message

    def test_does_not_mutate_input(self):
        array = [3, "x", 1]
        validate_numeric_array(array)
        assert array == [3, "x", 1]
