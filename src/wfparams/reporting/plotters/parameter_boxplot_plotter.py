"""
Parameter boxplot plotter.

Renders one chart per parameter showing the spread of contributed values:

- Land-class parameters: one box per land class (``Param_Land_{p}.png``)
- River-class parameters: one box per basin (``Param_River_{p}.png``)

Global parameters are not charted.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pandas as pd  # type: ignore

from wfparams.core.constants import PARAMETER_DESCRIPTIONS, CorpusColumns, ParameterFamily
from wfparams.core.exceptions import ReportingError
from wfparams.reporting.core.base_plotter import BasePlotter
from wfparams.reporting.core.plot_utils import expanded_limits, finite_values, whisker_limits

GROUP_AXIS_LABELS = {
    CorpusColumns.CLASS_LABEL: 'Land class',
    CorpusColumns.BASIN: 'Basin',
}


@dataclass
class FamilyPlotResult:
    """Outcome of charting every parameter of one family."""
    family: str
    written: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return not self.failures


class ParameterBoxplotPlotter(BasePlotter):
    """
    Plotter for per-parameter boxplots.

    Boxes appear in the order their group first occurs in the corpus. The
    y-axis is limited to the Tukey whisker range of all the parameter's
    values, widened by ``YLIM_EXPANSION``.
    """

    def _plotted_family(self, family: str) -> Tuple[str, str]:
        if family not in ParameterFamily.PLOTTED:
            raise ReportingError(
                f"Family '{family}' is not charted; expected one of {sorted(ParameterFamily.PLOTTED)}"
            )
        return ParameterFamily.PLOTTED[family]

    def chart_path(self, parameter: str, family: str, output_dir: Union[str, Path]) -> Path:
        """Path of the chart for ``parameter`` in ``output_dir``."""
        _, tag = self._plotted_family(family)
        return Path(output_dir) / f"Param_{tag}_{parameter}.png"

    def _select(self, corpus: pd.DataFrame, parameter: str, family: str) -> pd.DataFrame:
        mask = corpus[CorpusColumns.PARAMETER] == parameter
        if CorpusColumns.FAMILY in corpus.columns:
            mask &= corpus[CorpusColumns.FAMILY] == family
        return corpus[mask]

    def plot_parameter(
        self,
        corpus: pd.DataFrame,
        parameter: str,
        family: str,
        output_dir: Union[str, Path],
    ) -> str:
        """
        Render the boxplot of one parameter.

        Args:
            corpus: Normalized corpus (or its partition for ``family``)
            parameter: Normalized parameter name
            family: ``landclass`` or ``riverclass``
            output_dir: Directory receiving the PNG

        Returns:
            Path of the written chart

        Raises:
            ReportingError: If the family is not charted or the parameter
                has fewer than ``MIN_OBSERVATIONS`` values.
        """
        group_column, tag = self._plotted_family(family)
        subset = self._select(corpus, parameter, family)

        values = finite_values(subset[CorpusColumns.VALUE])
        if values.size < self.plot_config.MIN_OBSERVATIONS:
            raise ReportingError(
                f"Parameter '{parameter}' has {values.size} observations, "
                f"at least {self.plot_config.MIN_OBSERVATIONS} are needed for a boxplot"
            )

        groups = list(pd.unique(subset[group_column]))
        data = [
            finite_values(subset.loc[subset[group_column] == group, CorpusColumns.VALUE])
            for group in groups
        ]
        low, high = whisker_limits(values, whis=self.plot_config.WHISKER_IQR)
        ylim = expanded_limits(low, high, self.plot_config.YLIM_EXPANSION)

        plt, _ = self._setup_matplotlib()
        fig, ax = plt.subplots(figsize=self.plot_config.FIGURE_SIZE_DEFAULT)
        try:
            self._draw_boxes(ax, data, groups)
            ax.set_ylim(*ylim)

            description = PARAMETER_DESCRIPTIONS.get(parameter)
            ylabel = f"{description} ({parameter})" if description else parameter
            self._apply_standard_styling(
                ax,
                xlabel=GROUP_AXIS_LABELS.get(group_column, group_column),
                ylabel=ylabel,
                title=f"{tag} parameter {parameter} (n={values.size})",
            )
            fig.tight_layout()
        except Exception:
            plt.close(fig)
            raise

        return self._save_and_close(fig, self.chart_path(parameter, family, output_dir))

    def _draw_boxes(self, ax, data: List, groups: List[str]) -> None:
        pc = self.plot_config
        positions = list(range(1, len(groups) + 1))
        bp = ax.boxplot(
            data,
            positions=positions,
            whis=pc.WHISKER_IQR,
            patch_artist=True,
            flierprops={'marker': pc.FLIER_MARKER, 'markersize': pc.FLIER_SIZE},
            medianprops={'color': pc.MEDIAN_COLOR},
        )
        for patch in bp['boxes']:
            patch.set_facecolor(pc.BOX_FACE_COLOR)
            patch.set_edgecolor(pc.BOX_EDGE_COLOR)
            patch.set_alpha(pc.BOX_ALPHA)

        ax.set_xticks(positions)
        ax.set_xticklabels(groups, rotation=pc.TICK_ROTATION, ha='right')

    def plot_family(
        self,
        corpus: pd.DataFrame,
        family: str,
        output_dir: Union[str, Path],
    ) -> FamilyPlotResult:
        """
        Chart every parameter of ``family``.

        A parameter that cannot be charted is logged and recorded in the
        result; the remaining parameters are still rendered.
        """
        self._plotted_family(family)
        if CorpusColumns.FAMILY in corpus.columns:
            corpus = corpus[corpus[CorpusColumns.FAMILY] == family]

        result = FamilyPlotResult(family=family)
        for parameter in sorted(corpus[CorpusColumns.PARAMETER].unique()):
            try:
                result.written.append(self.plot_parameter(corpus, parameter, family, output_dir))
            except Exception as e:
                self.logger.error(f"Error creating {family} chart for '{parameter}': {str(e)}")
                result.failures[parameter] = str(e)

        self.logger.info(
            f"Rendered {len(result.written)} {family} charts"
            + (f", {len(result.failures)} failed" if result.failures else "")
        )
        return result
