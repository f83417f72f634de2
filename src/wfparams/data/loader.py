# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Parameter-set loading and corpus assembly.

A parameter-set file is a wide table: the header row lists class names and
the first column holds parameter names. Loading reshapes it to long form,
one observation per (parameter, class) cell, with the file-name metadata
attached to every row.
"""

import logging
from typing import Iterable, Iterator, List, Optional

import pandas as pd

from wfparams.core.constants import CorpusColumns
from wfparams.core.exceptions import LoaderError, wfparams_error_handler
from wfparams.core.mixins import LoggingMixin
from wfparams.data.catalog import ParameterSetFile


class ParameterSetLoader(LoggingMixin):
    """Reads parameter-set files into long-form observation tables."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger

    def read_wide(self, parameter_set: ParameterSetFile) -> pd.DataFrame:
        """Read the wide table, with the first column renamed to ``Parameter``.

        Class columns are left as parsed so that blank cells stay NaN.
        """
        with wfparams_error_handler(f"reading {parameter_set.name}", error_type=LoaderError):
            wide = pd.read_csv(parameter_set.path, skipinitialspace=True)

        if wide.shape[1] < 2:
            raise LoaderError(
                f"{parameter_set.name} needs a parameter column and at least one class column"
            )

        wide = wide.rename(columns={wide.columns[0]: CorpusColumns.PARAMETER})
        return wide

    def load(self, parameter_set: ParameterSetFile) -> pd.DataFrame:
        """Load one file as long-form observation records.

        Returns:
            DataFrame with columns Parameter, ClassType, Source, SetNumber,
            Basin, ClassLabel, Value. Rows follow the file's parameter
            rows, and within a row the class columns left to right.
        """
        wide = self.read_wide(parameter_set)
        class_columns = [c for c in wide.columns if c != CorpusColumns.PARAMETER]

        for column, value in parameter_set.metadata().items():
            wide[column] = value

        long = wide.melt(
            id_vars=list(CorpusColumns.KEY),
            value_vars=class_columns,
            var_name=CorpusColumns.CLASS_LABEL,
            value_name=CorpusColumns.VALUE,
            ignore_index=False,
        ).sort_index(kind='stable').reset_index(drop=True)
        self.logger.debug(
            f"{parameter_set.name}: {len(wide)} parameters x {len(class_columns)} classes"
        )
        return long[list(CorpusColumns.ALL)]

    def iter_records(self, files: Iterable[ParameterSetFile]) -> Iterator[pd.DataFrame]:
        """Lazily load each file in turn; each file is read exactly once."""
        for parameter_set in files:
            yield self.load(parameter_set)


def assemble_corpus(frames: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """Concatenate per-file observation tables into one corpus.

    File order and within-file row order are preserved.

    Raises:
        LoaderError: If there is nothing to assemble.
    """
    frames: List[pd.DataFrame] = list(frames)
    if not frames:
        raise LoaderError("No parameter-set tables to assemble")
    corpus = pd.concat(frames, ignore_index=True)
    return corpus[list(CorpusColumns.ALL)]
