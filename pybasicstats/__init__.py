"""
PyBasicStats: small descriptive statistics over numeric sequences.

Five pure functions (mean, median, variance, standard_deviation, mode)
over 1D sequences of integers or floats, plus describe() for all of
them at once.

Submodules:
    descriptive: The statistics
    core: Exceptions, validation, numeric capability, result envelope
"""

__version__ = "0.1.0"

from pybasicstats.descriptive import (
    mean,
    median,
    sorted_median,
    variance,
    standard_deviation,
    mode,
    describe,
    Mode,
    NoMode,
    Unimodal,
    Bimodal,
    Trimodal,
    Multimodal,
)

__all__ = [
    "__version__",
    "mean",
    "median",
    "sorted_median",
    "variance",
    "standard_deviation",
    "mode",
    "describe",
    "Mode",
    "NoMode",
    "Unimodal",
    "Bimodal",
    "Trimodal",
    "Multimodal",
]
