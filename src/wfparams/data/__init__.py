# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Parameter-set ingestion: file discovery, loading and normalization.
"""

from wfparams.data.catalog import ParameterSetCatalog, ParameterSetFile, parse_parameter_set_filename
from wfparams.data.loader import ParameterSetLoader, assemble_corpus
from wfparams.data.normalizer import (
    CorpusNormalizer,
    NormalizationReport,
    classify_parameter,
    normalize_class_label,
    normalize_parameter_name,
    partition,
)

__all__ = [
    'ParameterSetCatalog',
    'ParameterSetFile',
    'parse_parameter_set_filename',
    'ParameterSetLoader',
    'assemble_corpus',
    'CorpusNormalizer',
    'NormalizationReport',
    'classify_parameter',
    'normalize_class_label',
    'normalize_parameter_name',
    'partition',
]
