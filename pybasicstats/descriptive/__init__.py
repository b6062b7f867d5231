"""
Descriptive statistics module.

Public API:
    mean(x)                - Arithmetic mean
    median(x)              - Positional median (no sorting)
    sorted_median(x)       - Order-statistic median
    variance(x)            - Population variance
    standard_deviation(x)  - Population standard deviation
    mode(x)                - Repeated values: NoMode, Unimodal, Bimodal,
                             Trimodal or Multimodal
    describe(x)            - All of the above at once
"""

from pybasicstats.descriptive._moments import mean, variance, standard_deviation
from pybasicstats.descriptive._median import median, sorted_median
from pybasicstats.descriptive._mode import (
    mode,
    Mode,
    NoMode,
    Unimodal,
    Bimodal,
    Trimodal,
    Multimodal,
)
from pybasicstats.descriptive.design import DescriptiveDesign
from pybasicstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pybasicstats.descriptive.solvers import describe

__all__ = [
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
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
