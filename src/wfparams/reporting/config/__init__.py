"""Plot styling configuration."""

from .plot_config import DEFAULT_PLOT_CONFIG, PlotConfig

__all__ = ['PlotConfig', 'DEFAULT_PLOT_CONFIG']
