"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype preservation, unsupported dtype rejection
    - check_1d: dimensionality
    - check_min_samples: minimum sample count
    - check_sequence: combined checks
    - check_choice: keyword option values
"""

import numpy as np
import pytest

from pybasicstats.core.exceptions import DimensionError, ValidationError
from pybasicstats.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_min_samples,
    check_sequence,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and keeps the element dtype."""

    def test_list_of_ints_stays_integer(self):
        result = check_array([1, 2, 3], "data")
        assert isinstance(result, np.ndarray)
        assert result.dtype.kind == 'i'

    def test_list_of_floats(self):
        result = check_array([1.5, 2.0], "data")
        assert result.dtype == np.float64

    @pytest.mark.parametrize("dtype", [
        np.uint8, np.uint16, np.uint32, np.int8, np.int16, np.int32,
        np.float32, np.float64,
    ])
    def test_supported_dtype_preserved(self, dtype):
        arr = np.array([1, 2, 3], dtype=dtype)
        result = check_array(arr, "data")
        assert result.dtype == dtype

    def test_empty_list_accepted(self):
        result = check_array([], "data")
        assert result.shape == (0,)

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="unsupported dtype"):
            check_array(["a", "b"], "data")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="unsupported dtype bool"):
            check_array([True, False], "data")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="unsupported dtype"):
            check_array([1 + 2j], "data")

    def test_float16_rejected(self):
        with pytest.raises(ValidationError, match="float16"):
            check_array(np.array([1.0], dtype=np.float16), "data")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "data")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="^xs:"):
            check_array(["a"], "xs")


# ═══════════════════════════════════════════════════════════════════════
# check_1d / check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.array([1, 2]), "data")

    def test_2d_fails(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_1d(np.array([[1, 2], [3, 4]]), "data")

    def test_scalar_fails(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_1d(np.array(3), "data")


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(np.array([1.0]), 1, "data")

    def test_too_few(self):
        with pytest.raises(ValidationError, match="at least 1 samples, got 0"):
            check_min_samples(np.array([]), 1, "data")


# ═══════════════════════════════════════════════════════════════════════
# check_sequence / check_choice
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSequence:

    def test_empty_allowed_by_default(self):
        assert check_sequence([], "data").shape == (0,)

    def test_empty_rejected_with_min_samples(self):
        with pytest.raises(ValidationError):
            check_sequence([], "data", min_samples=1)

    def test_nested_rejected(self):
        with pytest.raises(DimensionError):
            check_sequence([[1, 2], [3, 4]], "data")


class TestCheckChoice:

    def test_valid(self):
        check_choice('sorted', ('positional', 'sorted'), 'median_method')

    def test_invalid(self):
        with pytest.raises(ValidationError, match="Unknown median_method: 'middle'"):
            check_choice('middle', ('positional', 'sorted'), 'median_method')
