"""
Core infrastructure for PyBasicStats.

Shared abstractions used by the descriptive statistics module.

Key components:
    numeric: Element capability (accumulate, widen, canonical keys)
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from pybasicstats.core.numeric import Number, SUPPORTED_DTYPES
from pybasicstats.core.result import Result
from pybasicstats.core.exceptions import (
    PyBasicStatsError,
    ValidationError,
    DimensionError,
    NumericalError,
    CanonicalKeyError,
)

__all__ = [
    # Numeric capability
    "Number",
    "SUPPORTED_DTYPES",
    # Result
    "Result",
    # Exceptions
    "PyBasicStatsError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "CanonicalKeyError",
]
