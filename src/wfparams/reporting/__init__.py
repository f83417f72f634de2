"""
Chart generation for normalized parameter corpora.
"""

from .reporting_manager import ReportingManager

__all__ = ['ReportingManager']
