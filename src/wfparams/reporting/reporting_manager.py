# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""Reporting facade for parameter charts.

Hides plotter construction from the workflow: plotters are created lazily
on first use, and every ``visualize_*`` method is a no-op when plotting is
disabled, in which case matplotlib is never imported.
"""

import logging
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional, Union

import pandas as pd

from wfparams.core.constants import ParameterFamily
from wfparams.core.mixins import ConfigMixin, LoggingMixin
from wfparams.reporting.config.plot_config import PlotConfig
from wfparams.reporting.core.decorators import skip_if_not_visualizing

if TYPE_CHECKING:
    from wfparams.core.config.models import WFParamsConfig
    from wfparams.reporting.plotters.parameter_boxplot_plotter import (
        FamilyPlotResult,
        ParameterBoxplotPlotter,
    )


class ReportingManager(ConfigMixin, LoggingMixin):
    """Central facade for chart generation.

    Example:
        >>> rm = ReportingManager(config, logger)
        >>> results = rm.visualize_parameters(corpus)
        >>> results['landclass'].written[:1]
        ['.../charts/Param_Land_ak.png']
    """

    def __init__(
        self,
        config: 'WFParamsConfig',
        logger: Optional[logging.Logger] = None,
        visualize: Optional[bool] = None,
    ):
        """Initialize the ReportingManager.

        Args:
            config: WFParamsConfig instance.
            logger: Logger instance.
            visualize: Overrides ``plotting.enabled`` when given.
        """
        from wfparams.core.config.models import WFParamsConfig
        if not isinstance(config, WFParamsConfig):
            raise TypeError(
                f"config must be WFParamsConfig, got {type(config).__name__}. "
                "Use WFParamsConfig.from_file() to load configuration."
            )

        self._config = config
        self.logger = logger
        self.visualize = config.plotting.enabled if visualize is None else visualize

    @cached_property
    def plot_config(self) -> PlotConfig:
        """Plot styling derived from the ``plotting`` section."""
        return PlotConfig.from_plotting_config(self.config.plotting)

    @cached_property
    def boxplot_plotter(self) -> 'ParameterBoxplotPlotter':
        """Lazy initialization of the parameter boxplot plotter."""
        from wfparams.reporting.plotters.parameter_boxplot_plotter import ParameterBoxplotPlotter
        return ParameterBoxplotPlotter(self.config, self.logger, self.plot_config)

    @skip_if_not_visualizing()
    def visualize_parameter_family(
        self,
        corpus: pd.DataFrame,
        family: str,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Optional['FamilyPlotResult']:
        """Chart every parameter of one family into ``output_dir`` (default: charts dir)."""
        output_dir = Path(output_dir) if output_dir is not None else self.charts_dir
        self.logger.info(f"Creating {family} parameter charts in {output_dir}")
        return self.boxplot_plotter.plot_family(corpus, family, output_dir)

    @skip_if_not_visualizing(default={})
    def visualize_parameters(
        self,
        corpus: pd.DataFrame,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Dict[str, 'FamilyPlotResult']:
        """Chart the land-class and river-class families."""
        return {
            family: self.visualize_parameter_family(corpus, family, output_dir)
            for family in ParameterFamily.PLOTTED
        }
