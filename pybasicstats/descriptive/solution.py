"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np

from pybasicstats.core.result import Result
from pybasicstats.descriptive._mode import Mode

if TYPE_CHECKING:
    from pybasicstats.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """Parameter payload for describe()."""
    mean: float
    median: float | None
    variance: float
    sd: float
    mode: Mode[Any]


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        """Positional or sorted median, per info['median_method']."""
        return self._result.params.median

    @property
    def variance(self) -> float:
        """Population variance (denominator n)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Population standard deviation."""
        return self._result.params.sd

    @property
    def mode(self) -> Mode[Any]:
        return self._result.params.mode

    # --- Metadata ---

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def dtype(self) -> np.dtype:
        """Element dtype of the described sequence."""
        return self._design.dtype

    @property
    def name(self) -> str | None:
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary table."""
        modes = ", ".join(str(v) for v in self.mode.values) or "none"
        median = "NA" if self.median is None else f"{self.median:.6f}"
        rows = [
            ("n", str(self.n)),
            ("Mean", f"{self.mean:.6f}"),
            ("Median", median),
            ("Variance", f"{self.variance:.6f}"),
            ("Std. Dev.", f"{self.sd:.6f}"),
            (f"Mode ({type(self.mode).__name__})", modes),
        ]
        label_width = max(len(label) for label, _ in rows)

        lines = [f"Descriptive Statistics: {self.name or 'V1'}"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value}")
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean!r}, "
            f"mode={type(self.mode).__name__})"
        )
