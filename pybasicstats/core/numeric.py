"""
Numeric element capability.

Every statistic accepts a flat sequence of one numeric element type N. The
element type is carried by the numpy dtype; this module provides the small
set of operations the statistics need from it:

    zero        additive identity of N
    accumulate  left-to-right sum of a sequence of N
    widen       lossless conversion of one N to a 64-bit float
    to_key      canonical decimal rendering of one N (mode tally key)
    from_key    parse of a canonical key back into N

All downstream arithmetic happens in 64-bit float after widening.
"""

from __future__ import annotations

import functools
import operator
from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from pybasicstats.core.exceptions import CanonicalKeyError


SUPPORTED_DTYPES: tuple[np.dtype, ...] = tuple(
    np.dtype(name) for name in (
        'uint8', 'uint16', 'uint32', 'uint64',
        'int8', 'int16', 'int32', 'int64',
        'float32', 'float64',
    )
)


@runtime_checkable
class Number(Protocol):
    """
    Structural type of a sequence element.

    Elements add to their own type and widen to float. Python ``int`` and
    ``float`` as well as numpy integer and floating scalars satisfy it.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __float__(self) -> float:
        ...


def zero(dtype: np.dtype) -> Any:
    """Additive identity for ``dtype``."""
    return dtype.type(0)


def accumulate(values: NDArray[Any]) -> Any:
    """
    Sum ``values`` left to right, starting from zero.

    Floating dtypes add in their own width, so a float32 sequence is summed
    in float32 exactly as a scalar loop would. Integer dtypes are summed as
    Python ints and never wrap. No pairwise or compensated summation: the
    order of operations is part of the result.
    """
    if values.dtype.kind == 'f':
        return functools.reduce(operator.add, values, zero(values.dtype))
    return functools.reduce(operator.add, values.tolist(), 0)


def widen(value: Number) -> float:
    """Convert one element to a 64-bit float."""
    return float(value)


def to_key(value: Any) -> str:
    """
    Canonical key of one element: numpy's shortest round-trip rendering.

    ``1.5`` and ``1.5`` share a key; ``-0.0`` and ``0.0`` do not.
    """
    return str(value)


def from_key(key: str, dtype: np.dtype) -> Any:
    """
    Parse a canonical key back into an element of ``dtype``.

    Raises:
        CanonicalKeyError: If the key does not parse, or parses to a value
            whose own key differs
    """
    try:
        if dtype.kind == 'f':
            value = dtype.type(key)
        else:
            value = dtype.type(int(key))
    except (ValueError, OverflowError) as e:
        raise CanonicalKeyError(
            f"Key {key!r} does not parse as {dtype.name}: {e}",
            key=key,
            dtype=dtype.name,
        ) from e

    rendered = to_key(value)
    if rendered != key:
        raise CanonicalKeyError(
            f"Key {key!r} parsed as {dtype.name} renders as {rendered!r}",
            key=key,
            dtype=dtype.name,
            parsed=rendered,
        )
    return value
