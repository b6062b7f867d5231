"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a validated 1D sequence and provides metadata for describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybasicstats.core.validation import check_sequence


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a non-empty 1D sequence in its original element dtype.
    Immutable after construction.

    Construction:
        DescriptiveDesign.from_array(data)
    """
    _data: NDArray[Any]
    _name: str | None

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str | None = None) -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sequence. A pandas Series is accepted; its name is kept.
        name : str, optional
            Label used by summary(). Overrides a Series name.
        """
        if name is None and hasattr(data, 'name') and data.name is not None:
            name = str(data.name)
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            data = data.values

        values = check_sequence(data, 'data', min_samples=1)
        return cls(_data=values, _name=name)

    @property
    def data(self) -> NDArray[Any]:
        """The sequence, in its original dtype."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self._data)

    @property
    def dtype(self) -> np.dtype:
        """Element dtype."""
        return self._data.dtype

    @property
    def name(self) -> str | None:
        """Label, or None if not available."""
        return self._name

    @property
    def is_sorted(self) -> bool:
        """Whether the sequence is in ascending order."""
        return bool(np.all(self._data[:-1] <= self._data[1:]))

    def __repr__(self) -> str:
        return f"DescriptiveDesign(n={self.n}, dtype={self.dtype.name})"
