"""
Tests for median() (positional) and sorted_median().
"""

import numpy as np
import pytest

from pybasicstats.core.exceptions import ValidationError
from pybasicstats.descriptive import median, sorted_median


class TestMedian:
    """The positional median reads the middle of the sequence as given."""

    def test_empty_list(self):
        assert median([]) is None

    def test_empty_integer_array(self):
        assert median(np.array([], dtype=np.int32)) is None

    def test_odd_length_positive_integers(self):
        assert median([7, 8, 3, 9, 22]) == 3.0

    def test_even_length_positive_integers(self):
        assert median([7, 8, 3, 6, 22, 42]) == 4.5

    def test_odd_length_negative_integers(self):
        assert median([-7, -8, -3, -9, -22]) == -3.0

    def test_even_length_negative_integers(self):
        assert median([-7, -8, -3, -6, -22, -42]) == -4.5

    def test_even_length_mixed_integers(self):
        assert median([7, -8, -3, 6, -22, -42]) == 1.5

    def test_single_value(self):
        assert median([5]) == 5.0

    def test_returns_python_float(self):
        assert type(median(np.array([1, 2, 3], dtype=np.uint8))) is float

    def test_float32_widened(self):
        data = np.array([0.1, 0.2, 0.3], dtype=np.float32)
        assert median(data) == float(np.float32(0.2))

    def test_input_not_sorted_in_place(self):
        data = np.array([7, 8, 3, 9, 22])
        median(data)
        np.testing.assert_array_equal(data, [7, 8, 3, 9, 22])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            median(["x"])


class TestSortedMedian:

    def test_empty(self):
        assert sorted_median([]) is None

    def test_odd_length(self):
        assert sorted_median([7, 8, 3, 9, 22]) == 8.0

    def test_even_length(self):
        assert sorted_median([7, 8, 3, 6, 22, 42]) == 7.5

    def test_matches_numpy(self, normal_floats):
        np.testing.assert_allclose(
            sorted_median(normal_floats), np.median(normal_floats), rtol=1e-15
        )

    def test_agrees_with_median_on_sorted_input(self):
        data = [1, 3, 4, 10]
        assert sorted_median(data) == median(data)
