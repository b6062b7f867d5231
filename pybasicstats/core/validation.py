"""
Input validation utilities for PyBasicStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Element dtypes are preserved: integer data stays integer
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pybasicstats.core.exceptions import ValidationError, DimensionError
from pybasicstats.core.numeric import SUPPORTED_DTYPES


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array of a supported element type.

    Unlike a floating-point pipeline, the element dtype is kept as given:
    the mean sums integers exactly and the mode reports values in the
    caller's type.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a dtype from SUPPORTED_DTYPES

    Raises:
        ValidationError: If input cannot be converted or has an
            unsupported dtype
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # An empty list has no element type of its own; numpy picks float64.
    if result.dtype not in SUPPORTED_DTYPES:
        supported = ", ".join(dt.name for dt in SUPPORTED_DTYPES)
        raise ValidationError(
            f"{name}: unsupported dtype {result.dtype}, expected one of: {supported}"
        )

    return result


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_min_samples(array: NDArray[Any], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_sequence(data: ArrayLike, name: str, *, min_samples: int = 0) -> NDArray[Any]:
    """
    Run the standard checks for a statistic's input sequence.

    Converts with check_array, then requires 1D and at least
    ``min_samples`` elements.
    """
    values = check_array(data, name)
    check_1d(values, name)
    if min_samples:
        check_min_samples(values, min_samples, name)
    return values


def check_choice(value: str, choices: tuple[str, ...], name: str) -> None:
    """
    Verify a keyword option is one of the accepted values.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        options = ", ".join(repr(c) for c in choices)
        raise ValidationError(f"Unknown {name}: {value!r}. Must be one of {options}.")
