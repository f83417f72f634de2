# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Per-parameter summary statistics across all contributed parameter sets.

For every normalized parameter the aggregator reports the range and the
5th, 50th and 95th percentiles of the contributed values, pooled over all
classes, sources and basins. Percentiles use linear interpolation between
order statistics (the numpy/pandas default).
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import pandas as pd

from wfparams.core.constants import FIXED_VALUE_PARAMETERS, SUMMARY_COLUMNS, CorpusColumns
from wfparams.core.exceptions import AggregationError
from wfparams.core.mixins import LoggingMixin, ensure_dir

PERCENTILES: Dict[str, float] = {
    'fifth': 0.05,
    'median': 0.50,
    'ninetyfifth': 0.95,
}
STAT_COLUMNS = list(SUMMARY_COLUMNS[1:])


def describe_values(values: Iterable[float], decimals: int = 4) -> Optional[Dict[str, float]]:
    """
    Summary statistics of one sample, or None when it has no numeric values.

    Example:
        >>> describe_values([1.0, 2.0, 3.0])
        {'min': 1.0, 'max': 3.0, 'fifth': 1.1, 'ninetyfifth': 2.9, 'median': 2.0}
    """
    sample = pd.to_numeric(pd.Series(values, dtype=object), errors='coerce').dropna()
    if sample.empty:
        return None

    quantiles = sample.quantile(list(PERCENTILES.values()), interpolation='linear')
    stats = {
        'min': sample.min(),
        'max': sample.max(),
        'fifth': quantiles.iloc[0],
        'ninetyfifth': quantiles.iloc[2],
        'median': quantiles.iloc[1],
    }
    return {key: round(float(value), decimals) for key, value in stats.items()}


class ParameterSummaryAggregator(LoggingMixin):
    """
    Builds the parameter summary table from a normalized corpus.

    Parameters in ``excluded_parameters`` (``fpet`` and ``ftall`` by default)
    are left out of the summary because fixed textbook values are used for
    them instead of empirical limits.
    """

    def __init__(
        self,
        decimals: int = 4,
        excluded_parameters: Iterable[str] = FIXED_VALUE_PARAMETERS,
        logger: Optional[logging.Logger] = None,
    ):
        self.decimals = decimals
        self.excluded_parameters = frozenset(p.lower() for p in excluded_parameters)
        self.logger = logger

    def _check_columns(self, corpus: pd.DataFrame, *columns: str) -> None:
        missing = [c for c in columns if c not in corpus.columns]
        if missing:
            raise AggregationError(f"Cannot summarize corpus without columns: {missing}")

    def summarize(self, corpus: pd.DataFrame) -> pd.DataFrame:
        """
        One row per parameter with min, max and the 5/50/95th percentiles.

        Returns:
            DataFrame with columns Parameter, min, max, fifth, ninetyfifth,
            median, sorted by parameter name.
        """
        self._check_columns(corpus, CorpusColumns.PARAMETER, CorpusColumns.VALUE)

        retained = corpus[~corpus[CorpusColumns.PARAMETER].isin(self.excluded_parameters)]
        rows = []
        for parameter, group in retained.groupby(CorpusColumns.PARAMETER, sort=True):
            stats = describe_values(group[CorpusColumns.VALUE], self.decimals)
            if stats is None:
                self.logger.warning(f"Skipping parameter '{parameter}': no numeric observations")
                continue
            rows.append({CorpusColumns.PARAMETER: parameter, **stats})

        summary = pd.DataFrame(rows, columns=list(SUMMARY_COLUMNS))
        self.logger.info(
            f"Summarized {len(summary)} parameters "
            f"(excluded: {', '.join(sorted(self.excluded_parameters)) or 'none'})"
        )
        return summary

    def summarize_by_group(self, corpus: pd.DataFrame, group_column: str) -> pd.DataFrame:
        """
        The same statistics per (parameter, group) pair.

        Used for the per-class and per-basin tables written next to the
        charts, so no parameters are excluded here.
        """
        self._check_columns(corpus, CorpusColumns.PARAMETER, CorpusColumns.VALUE, group_column)

        rows = []
        grouped = corpus.groupby([CorpusColumns.PARAMETER, group_column], sort=True)
        for (parameter, group_value), group in grouped:
            stats = describe_values(group[CorpusColumns.VALUE], self.decimals)
            if stats is None:
                continue
            rows.append({
                CorpusColumns.PARAMETER: parameter,
                group_column: group_value,
                'count': len(group),
                **stats,
            })

        return pd.DataFrame(
            rows, columns=[CorpusColumns.PARAMETER, group_column, 'count', *STAT_COLUMNS]
        )


def write_summary(summary: pd.DataFrame, path: Union[str, Path]) -> Path:
    """Write a summary table as CSV without the index and return its path."""
    path = Path(path)
    ensure_dir(path.parent)
    summary.to_csv(path, index=False)
    return path
