"""
describe(): every statistic for one sequence, in one validated pass.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike

from pybasicstats.core.compute.timing import Timer
from pybasicstats.core.result import Result
from pybasicstats.core.validation import check_choice
from pybasicstats.descriptive._median import _median
from pybasicstats.descriptive._mode import _classify, has_signed_zeros
from pybasicstats.descriptive._moments import _mean, _standard_deviation, _variance
from pybasicstats.descriptive.design import DescriptiveDesign
from pybasicstats.descriptive.solution import DescriptiveParams, DescriptiveSolution


MedianMethod = Literal['positional', 'sorted']


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    median_method: MedianMethod = 'positional',
) -> DescriptiveSolution:
    """
    Compute mean, median, variance, standard deviation and mode.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        Non-empty 1D sequence of integers or floats.
    median_method : str
        'positional' (middle of the sequence as given, same as median())
        or 'sorted' (same as sorted_median()).

    Returns
    -------
    DescriptiveSolution with all statistics populated.

    Raises
    ------
    ValidationError
        If data is empty, not 1D, not numeric, or median_method is unknown.
    """
    check_choice(median_method, ('positional', 'sorted'), 'median_method')
    design = _ensure_design(data)
    values = design.data

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('mean'):
        mean = _mean(values)

    with timer.section('median'):
        if median_method == 'sorted':
            median = _median(np.sort(values, kind='stable'))
        else:
            median = _median(values)
            if not design.is_sorted:
                warnings_list.append(
                    "median is positional and data is not sorted ascending; "
                    "use median_method='sorted' for the order-statistic median"
                )

    with timer.section('variance'):
        variance = _variance(values)

    with timer.section('sd'):
        sd = _standard_deviation(values)

    with timer.section('mode'):
        mode = _classify(values)
        if has_signed_zeros(values):
            warnings_list.append(
                "data contains both -0.0 and 0.0; mode counts them separately"
            )

    timer.stop()

    params = DescriptiveParams(
        mean=mean,
        median=median,
        variance=variance,
        sd=sd,
        mode=mode,
    )
    result = Result(
        params=params,
        info={
            'n': design.n,
            'dtype': design.dtype.name,
            'median_method': median_method,
        },
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result, _design=design)
