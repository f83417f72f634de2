"""
Numeric helpers for parameter charts.

Boxplot axis limits are taken from the Tukey whiskers of the pooled values
rather than from the raw data range, so a handful of extreme contributions
do not flatten every box in the chart.
"""

from typing import Iterable, Tuple

import numpy as np
from matplotlib import cbook

from wfparams.core.exceptions import ReportingError


def finite_values(values: Iterable[float]) -> np.ndarray:
    """Return the finite entries of ``values`` as a float array."""
    array = np.asarray(list(values), dtype=float)
    return array[np.isfinite(array)]


def whisker_limits(values: Iterable[float], whis: float = 1.5) -> Tuple[float, float]:
    """
    Lower and upper Tukey whisker of a sample.

    Whiskers reach to the most extreme observations within ``whis`` times
    the interquartile range. Quartiles are linearly interpolated percentiles,
    the ones matplotlib draws the boxes with, not Tukey's hinges.

    Raises:
        ReportingError: If the sample has no finite values.

    Example:
        >>> whisker_limits([1.0, 2.0, 3.0, 4.0, 100.0])
        (1.0, 4.0)
    """
    sample = finite_values(values)
    if sample.size == 0:
        raise ReportingError("Cannot compute whiskers of an empty sample")

    stats = cbook.boxplot_stats(sample, whis=whis)[0]
    return float(stats['whislo']), float(stats['whishi'])


def expanded_limits(low: float, high: float, expansion: float = 0.05) -> Tuple[float, float]:
    """
    Axis limits ``expansion`` wider than ``[low, high]``, split evenly.

    A zero-width range is padded by ``expansion`` times the magnitude of the
    value, or by 0.5 either side when the value is zero.

    Example:
        >>> expanded_limits(0.0, 10.0)
        (-0.25, 10.25)
    """
    if high < low:
        low, high = high, low

    span = high - low
    if span > 0:
        pad = span * expansion / 2.0
    elif low != 0:
        pad = abs(low) * expansion
    else:
        pad = 0.5
    return low - pad, high + pad
