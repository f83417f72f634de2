# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Core infrastructure for wfparams: exceptions, constants, mixins and configuration.
"""

from wfparams.core.exceptions import (
    AggregationError,
    CatalogError,
    ConfigurationError,
    LoaderError,
    NormalizationError,
    ReportingError,
    ValidationError,
    WFParamsError,
)

__all__ = [
    'WFParamsError',
    'ConfigurationError',
    'CatalogError',
    'LoaderError',
    'NormalizationError',
    'AggregationError',
    'ReportingError',
    'ValidationError',
]
