"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, copy semantics, object/complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_count: positive integer counts
    - check_row_width: grid row widths
"""

import numpy as np
import pytest

from pylinsys.core.exceptions import DimensionError, ValidationError
from pylinsys.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_count,
    check_finite,
    check_ndim,
    check_row_width,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a fresh float64 ndarray."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "A")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "A")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="A"):
            check_array(["a", "b"], "A")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "A")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "A")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "b")

    def test_nan_fails(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "b")

    def test_inf_fails(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "b")


class TestCheckNdim:

    def test_correct_ndim(self):
        check_ndim(np.zeros((2, 2)), 2, "A")
        check_2d(np.zeros((2, 2)), "A")
        check_1d(np.zeros(3), "b")

    def test_wrong_ndim(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")


class TestCheckConsistentLength:

    def test_consistent(self):
        check_consistent_length(np.zeros((3, 2)), np.zeros(3), names=("A", "b"))

    def test_inconsistent(self):
        with pytest.raises(DimensionError, match="A=3, b=2"):
            check_consistent_length(np.zeros((3, 2)), np.zeros(2), names=("A", "b"))

    def test_name_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("A",))


class TestCheckCount:

    def test_positive_int(self):
        assert check_count(3, "n_variables") == 3

    def test_numpy_int(self):
        assert check_count(np.int64(2), "n_variables") == 2

    @pytest.mark.parametrize("bad", [0, -1])
    def test_below_one(self, bad):
        with pytest.raises(ValidationError, match="at least 1"):
            check_count(bad, "n_equations")

    @pytest.mark.parametrize("bad", [1.5, "2", True, None])
    def test_not_integer(self, bad):
        with pytest.raises(ValidationError, match="positive integer"):
            check_count(bad, "n_equations")


class TestCheckRowWidth:

    def test_matching(self):
        check_row_width(["1", "2", "3"], 3, 0, "rows")

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="row 1 has 2 cells, expected 3"):
            check_row_width(["1", "2"], 3, 1, "rows")
