"""
Mean, population variance and population standard deviation.

All three use naive left-to-right double arithmetic. The order of
operations is fixed so results are reproducible bit for bit:

    mean      sum in the element type, widen, divide by float(n)
    variance  mean of |x - mean|**2 computed as d * d over widened x
    sd        sqrt of the variance of the sequence widened to float64
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybasicstats.core.numeric import accumulate, widen
from pybasicstats.core.validation import check_sequence


def _mean(values: NDArray[Any]) -> float:
    """Mean of an already validated, non-empty array."""
    return widen(accumulate(values)) / float(len(values))


def _variance(values: NDArray[Any]) -> float:
    """Population variance of an already validated, non-empty array."""
    center = _mean(values)
    deviations = (abs(widen(x) - center) for x in values)
    squared = np.fromiter(
        (d * d for d in deviations), dtype=np.float64, count=len(values)
    )
    return _mean(squared)


def _standard_deviation(values: NDArray[Any]) -> float:
    return float(np.sqrt(_variance(values.astype(np.float64))))


def mean(data: ArrayLike) -> float:
    """
    Arithmetic mean.

    Parameters
    ----------
    data : array-like
        Non-empty 1D sequence of integers or floats.

    Returns
    -------
    float

    Raises
    ------
    ValidationError
        If data is empty or not numeric.
    """
    return _mean(check_sequence(data, 'data', min_samples=1))


def variance(data: ArrayLike) -> float:
    """
    Population variance (denominator n, not n - 1).

    Parameters
    ----------
    data : array-like
        Non-empty 1D sequence of integers or floats.

    Returns
    -------
    float
    """
    return _variance(check_sequence(data, 'data', min_samples=1))


def standard_deviation(data: ArrayLike) -> float:
    """
    Population standard deviation.

    The sequence is widened to float64 before the variance is taken, so
    float32 input is averaged in double precision here, unlike variance().
    """
    return _standard_deviation(check_sequence(data, 'data', min_samples=1))
