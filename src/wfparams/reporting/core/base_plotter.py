"""
Base class for wfparams plotters.

Provides the matplotlib setup, styling and save helpers that concrete
plotters share.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from wfparams.core.mixins import ConfigMixin, LoggingMixin, ensure_dir
from wfparams.reporting.config.plot_config import PlotConfig


class BasePlotter(ConfigMixin, LoggingMixin):
    """
    Common plumbing for plotters.

    Subclasses call :meth:`_setup_matplotlib` at the start of each plot
    method and finish with :meth:`_save_and_close`.
    """

    def __init__(
        self,
        config: Any,
        logger: Optional[logging.Logger] = None,
        plot_config: Optional[PlotConfig] = None,
    ):
        self._config = config
        self.logger = logger
        if plot_config is None:
            plot_config = PlotConfig.from_plotting_config(config.plotting)
        self.plot_config = plot_config

    def _setup_matplotlib(self) -> Tuple[Any, Any]:
        """Select the non-interactive backend and return ``(pyplot, matplotlib)``."""
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
        return plt, matplotlib

    def _save_and_close(self, fig: Any, output_file: Union[str, Path]) -> str:
        """Save ``fig`` to ``output_file``, close it and return the path."""
        plt, _ = self._setup_matplotlib()
        output_file = Path(output_file)
        ensure_dir(output_file.parent)
        try:
            fig.savefig(output_file, dpi=self.plot_config.DPI_DEFAULT, bbox_inches='tight')
        finally:
            plt.close(fig)
        self.logger.debug(f"Saved plot {output_file}")
        return str(output_file)

    def _apply_standard_styling(
        self,
        ax: Any,
        xlabel: str = '',
        ylabel: str = '',
        title: str = '',
        legend: bool = False,
        legend_loc: str = 'best',
    ) -> None:
        """Apply axis labels, title, grid and tick sizes."""
        if xlabel:
            ax.set_xlabel(xlabel, fontsize=self.plot_config.FONT_SIZE_LABEL)
        if ylabel:
            ax.set_ylabel(ylabel, fontsize=self.plot_config.FONT_SIZE_LABEL)
        if title:
            ax.set_title(title, fontsize=self.plot_config.FONT_SIZE_TITLE)
        ax.grid(True, axis='y', alpha=self.plot_config.GRID_ALPHA)
        ax.tick_params(labelsize=self.plot_config.FONT_SIZE_TICK)
        if legend:
            ax.legend(loc=legend_loc)
