"""
Core reporting utilities.

This module provides shared utilities for the reporting subsystem.
"""

from wfparams.reporting.core.base_plotter import BasePlotter
from wfparams.reporting.core.decorators import skip_if_not_visualizing
from wfparams.reporting.core.plot_utils import (
    expanded_limits,
    finite_values,
    whisker_limits,
)

__all__ = [
    'BasePlotter',
    'expanded_limits',
    'finite_values',
    'skip_if_not_visualizing',
    'whisker_limits',
]
