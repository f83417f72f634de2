"""Summary statistics over normalized parameter corpora."""

from .parameter_summary import (
    PERCENTILES,
    ParameterSummaryAggregator,
    describe_values,
    write_summary,
)

__all__ = [
    'PERCENTILES',
    'ParameterSummaryAggregator',
    'describe_values',
    'write_summary',
]
