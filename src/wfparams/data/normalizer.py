# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Corpus normalization.

Contributors name parameters and land classes inconsistently (``MF`` vs
``fm``, ``forest1``/``forest2``, ``grass`` vs ``crops``). The normalizer
brings a raw corpus onto one naming scheme, assigns each parameter to its
family and drops everything that cannot be analysed:

1. lower-case all text fields
2. strip digits, underscores and periods from class labels
3. rewrite parameter names with the ordered rule chain
4. merge synonymous class labels
5. drop the ``default`` class
6. classify parameters into land/river/global families, dropping the rest
7. keep complete cases with a numeric value

All steps are pure; the input frame is never modified.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from wfparams.core.constants import (
    CLASS_LABEL_STRIP_PATTERN,
    CLASS_LABEL_SYNONYMS,
    DEFAULT_CLASS_LABEL,
    PARAMETER_REWRITE_RULES,
    CorpusColumns,
    MatchMode,
    ParameterFamily,
)
from wfparams.core.exceptions import NormalizationError, ValidationError
from wfparams.core.mixins import LoggingMixin

_WORD_PATTERNS = {
    rule.pattern: re.compile(rf'\b{re.escape(rule.pattern)}\b')
    for rule in PARAMETER_REWRITE_RULES
    if rule.mode is MatchMode.WORD
}
_CLASS_LABEL_STRIP = re.compile(CLASS_LABEL_STRIP_PATTERN)


def _lower_text(value) -> str:
    return str(value).strip().lower()


def rewrite_parameter_name(name: str) -> str:
    """Apply the rewrite chain, in order, to an already lower-cased name."""
    for rule in PARAMETER_REWRITE_RULES:
        if rule.mode is MatchMode.WORD:
            name = _WORD_PATTERNS[rule.pattern].sub(rule.replacement, name)
        else:
            name = name.replace(rule.pattern, rule.replacement)
    return name


def normalize_parameter_name(name: str) -> str:
    """
    Normalize one parameter name.

    Example:
        >>> normalize_parameter_name('MF')
        'fm'
        >>> normalize_parameter_name(' LZF ')
        'flz'
    """
    return rewrite_parameter_name(str(name).strip().lower())


def normalize_class_label(label: str) -> str:
    """
    Normalize one class label: lower-case, drop numbering, merge synonyms.

    Example:
        >>> normalize_class_label('Forest2')
        'forest'
        >>> normalize_class_label('Crops.1')
        'agricultural'
    """
    label = _CLASS_LABEL_STRIP.sub('', str(label).strip().lower())
    return CLASS_LABEL_SYNONYMS.get(label, label)


def classify_parameter(name: str) -> Optional[str]:
    """Return the family of a normalized parameter name, or None if unknown."""
    for family, members in ParameterFamily.MEMBERSHIP.items():
        if name in members:
            return family
    return None


@dataclass
class NormalizationReport:
    """Row counts for one normalization run."""
    input_rows: int = 0
    default_class_rows: int = 0
    unclassified_rows: int = 0
    incomplete_rows: int = 0
    output_rows: int = 0
    unclassified_parameters: List[str] = field(default_factory=list)
    empty_parameters: List[str] = field(default_factory=list)

    @property
    def dropped_rows(self) -> int:
        return self.input_rows - self.output_rows


class CorpusNormalizer(LoggingMixin):
    """Normalizes a raw long-form corpus and reports what was dropped."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger
        self.report = NormalizationReport()

    def normalize(self, corpus: pd.DataFrame) -> pd.DataFrame:
        """
        Return the normalized corpus with an added ``Family`` column.

        Raises:
            NormalizationError: If a canonical column is missing.
        """
        missing = [c for c in CorpusColumns.ALL if c not in corpus.columns]
        if missing:
            raise NormalizationError(f"Corpus is missing columns: {missing}")

        report = NormalizationReport(input_rows=len(corpus))
        frame = corpus[list(CorpusColumns.ALL)].copy()

        for column in CorpusColumns.TEXT:
            frame[column] = frame[column].map(_lower_text, na_action='ignore')

        frame[CorpusColumns.CLASS_LABEL] = frame[CorpusColumns.CLASS_LABEL].map(
            normalize_class_label, na_action='ignore'
        )
        frame[CorpusColumns.PARAMETER] = frame[CorpusColumns.PARAMETER].map(
            rewrite_parameter_name, na_action='ignore'
        )

        is_default = frame[CorpusColumns.CLASS_LABEL] == DEFAULT_CLASS_LABEL
        report.default_class_rows = int(is_default.sum())
        frame = frame[~is_default].copy()

        families = frame[CorpusColumns.PARAMETER].map(classify_parameter, na_action='ignore')
        missing_parameter = frame[CorpusColumns.PARAMETER].isna()
        unclassified = families.isna() & ~missing_parameter
        report.unclassified_rows = int(unclassified.sum())
        report.unclassified_parameters = sorted(frame.loc[unclassified, CorpusColumns.PARAMETER].unique())
        frame[CorpusColumns.FAMILY] = families
        frame = frame[~unclassified].copy()

        frame[CorpusColumns.VALUE] = pd.to_numeric(frame[CorpusColumns.VALUE], errors='coerce')
        complete = frame.notna().all(axis=1)
        report.incomplete_rows = int((~complete).sum())
        present = set(frame[CorpusColumns.PARAMETER].dropna())
        kept = set(frame.loc[complete, CorpusColumns.PARAMETER])
        report.empty_parameters = sorted(present - kept)
        frame = frame[complete].reset_index(drop=True)
        frame[CorpusColumns.VALUE] = frame[CorpusColumns.VALUE].astype(float)

        report.output_rows = len(frame)
        self.report = report
        self._log_report(report)
        return frame

    def _log_report(self, report: NormalizationReport) -> None:
        if report.unclassified_parameters:
            self.logger.warning(
                f"Dropped {report.unclassified_rows} records with unclassified parameters: "
                f"{', '.join(report.unclassified_parameters)}"
            )
        for name in report.empty_parameters:
            self.logger.warning(f"Skipping parameter '{name}': no numeric observations")
        self.logger.info(
            f"Normalized corpus: {report.output_rows} of {report.input_rows} records kept "
            f"({report.default_class_rows} default-class, {report.incomplete_rows} incomplete)"
        )


def partition(corpus: pd.DataFrame, family: str) -> pd.DataFrame:
    """Subset a normalized corpus to one parameter family.

    Raises:
        ValidationError: If ``family`` is not a known family name.
    """
    if family not in ParameterFamily.MEMBERSHIP:
        raise ValidationError(
            f"Unknown parameter family '{family}'; expected one of {ParameterFamily.all_families()}"
        )
    return corpus[corpus[CorpusColumns.FAMILY] == family]
