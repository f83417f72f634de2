"""
Plot styling constants for parameter charts.

Centralizes the figure size, colours and font sizes so that every chart in a
run looks the same. Values can be derived from the user's ``plotting``
configuration section with :meth:`PlotConfig.from_plotting_config`.
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from wfparams.core.config.models import PlottingConfig


@dataclass(frozen=True)
class PlotConfig:
    """Styling and layout settings shared by all plotters."""

    # Resolution
    DPI_DEFAULT: int = 150

    # Figure size (width, height) in inches; every chart uses the same one
    FIGURE_SIZE_DEFAULT: Tuple[float, float] = (8.0, 5.0)

    # Box appearance
    BOX_FACE_COLOR: str = '#9ecae1'
    BOX_EDGE_COLOR: str = '#08519c'
    MEDIAN_COLOR: str = '#d62728'
    FLIER_MARKER: str = 'o'
    FLIER_SIZE: float = 3.0
    BOX_ALPHA: float = 0.8

    # Text
    FONT_SIZE_TITLE: int = 12
    FONT_SIZE_LABEL: int = 10
    FONT_SIZE_TICK: int = 8
    TICK_ROTATION: int = 45

    GRID_ALPHA: float = 0.3

    # Box statistics
    WHISKER_IQR: float = 1.5
    YLIM_EXPANSION: float = 0.05
    MIN_OBSERVATIONS: int = 2

    @classmethod
    def from_plotting_config(cls, plotting: 'PlottingConfig') -> 'PlotConfig':
        """Build a PlotConfig from the ``plotting`` configuration section."""
        return replace(
            DEFAULT_PLOT_CONFIG,
            DPI_DEFAULT=plotting.dpi,
            FIGURE_SIZE_DEFAULT=(plotting.figure_width, plotting.figure_height),
            WHISKER_IQR=plotting.whisker_iqr,
            YLIM_EXPANSION=plotting.ylim_expansion,
            MIN_OBSERVATIONS=plotting.min_observations,
        )


DEFAULT_PLOT_CONFIG = PlotConfig()
