"""
Positional and sorted medians.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybasicstats.core.numeric import widen
from pybasicstats.core.validation import check_sequence
from pybasicstats.descriptive._moments import _mean


def _median(values: NDArray[Any]) -> float | None:
    n = len(values)
    if n == 0:
        return None
    if n % 2:
        return widen(values[n // 2])
    middle = np.array([widen(values[n // 2 - 1]), widen(values[n // 2])])
    return _mean(middle)


def median(data: ArrayLike) -> float | None:
    """
    Middle element of the sequence as given.

    The sequence is NOT sorted: for odd n the result is ``data[n // 2]``,
    for even n the mean of ``data[n // 2 - 1]`` and ``data[n // 2]``. Use
    sorted_median() for the order-statistic median.

    Parameters
    ----------
    data : array-like
        1D sequence of integers or floats. May be empty.

    Returns
    -------
    float, or None for empty input.
    """
    return _median(check_sequence(data, 'data'))


def sorted_median(data: ArrayLike) -> float | None:
    """
    Median of the sequence sorted ascending.

    Returns None for empty input.
    """
    return _median(np.sort(check_sequence(data, 'data'), kind='stable'))
