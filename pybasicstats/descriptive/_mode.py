"""
Mode classifier.

A value is a mode when it appears more than once. The outcome is reported
by how many frequency classes above one exist:

    k = 0   NoMode()
    k = 1   Unimodal(value)
    k = 2   Bimodal(first, second)
    k = 3   Trimodal(first, second, third)
    k >= 4  Multimodal(values)

Note the threshold is "repeats", not "repeats the most": counts (5, 3) with
every other value unique is still Bimodal.

Values are bucketed by their canonical decimal key (see core.numeric), so
floats group by printed equality. Reported values are numpy scalars of the
input dtype, sorted ascending by numeric value.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import takewhile
from typing import Any, Generic, TypeVar
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybasicstats.core.numeric import from_key, to_key
from pybasicstats.core.validation import check_sequence

N = TypeVar('N')


class Mode(Generic[N]):
    """
    Base of the five mode outcomes.

    Every outcome exposes ``values``, the reported modes in ascending order,
    and ``len()``. NoMode is falsy.
    """
    values: tuple[N, ...]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class NoMode(Mode[N]):
    """No value repeats, or the input was empty."""

    @property
    def values(self) -> tuple[N, ...]:
        return ()


@dataclass(frozen=True)
class Unimodal(Mode[N]):
    value: N

    @property
    def values(self) -> tuple[N, ...]:
        return (self.value,)


@dataclass(frozen=True)
class Bimodal(Mode[N]):
    first: N
    second: N

    @property
    def values(self) -> tuple[N, ...]:
        return (self.first, self.second)


@dataclass(frozen=True)
class Trimodal(Mode[N]):
    first: N
    second: N
    third: N

    @property
    def values(self) -> tuple[N, ...]:
        return (self.first, self.second, self.third)


@dataclass(frozen=True)
class Multimodal(Mode[N]):
    """Four or more repeated values, ascending."""
    values: tuple[N, ...]

    def __post_init__(self):
        object.__setattr__(self, 'values', tuple(self.values))


def _tally(values: NDArray[Any]) -> Counter[str]:
    """Count occurrences of each canonical key, in first-seen order."""
    return Counter(to_key(v) for v in values)


def _rank(tally: Counter[str]) -> list[int]:
    """Counts above one, highest first."""
    return list(takewhile(lambda count: count > 1, reversed(sorted(tally.values()))))


def _recover(tally: Counter[str], ranked: list[int]) -> list[str]:
    """
    Pick one distinct key per ranked count.

    With ties any matching key may be taken first; the caller sorts the
    parsed values, so the choice does not show in the outcome.
    """
    if len(ranked) >= 4:
        wanted = set(ranked)
        return [key for key, count in tally.items() if count in wanted]

    picked: list[str] = []
    for target in ranked:
        key = next(
            key for key, count in tally.items()
            if count == target and key not in picked
        )
        picked.append(key)
    return picked


def _classify(values: NDArray[Any]) -> Mode[Any]:
    tally = _tally(values)
    ranked = _rank(tally)
    if not ranked:
        return NoMode()

    modes = sorted(from_key(key, values.dtype) for key in _recover(tally, ranked))

    if len(modes) == 1:
        return Unimodal(modes[0])
    if len(modes) == 2:
        return Bimodal(modes[0], modes[1])
    if len(modes) == 3:
        return Trimodal(modes[0], modes[1], modes[2])
    return Multimodal(tuple(modes))


def mode(data: ArrayLike) -> Mode[Any]:
    """
    Classify the repeated values of a sequence.

    Parameters
    ----------
    data : array-like
        1D sequence of integers or floats. May be empty.

    Returns
    -------
    Mode
        NoMode, Unimodal, Bimodal, Trimodal or Multimodal.

    Raises
    ------
    ValidationError
        If data is not a 1D numeric sequence.
    CanonicalKeyError
        If a value's decimal key does not parse back to the same value.

    Examples
    --------
    >>> mode([0, 1, 3, 3, 1])
    Bimodal(first=np.int64(1), second=np.int64(3))
    """
    return _classify(check_sequence(data, 'data'))


def has_signed_zeros(values: NDArray[Any]) -> bool:
    """Whether a float sequence holds both -0.0 and 0.0 (separate buckets)."""
    if values.dtype.kind != 'f':
        return False
    zeros = values[values == 0]
    signs = np.signbit(zeros)
    return bool(signs.any() and not signs.all())
