"""
Command handlers for the wfparams CLI.
"""

from .analysis_commands import AnalysisCommands
from .base import BaseCommand
from .catalog_commands import CatalogCommands

__all__ = [
    'AnalysisCommands',
    'BaseCommand',
    'CatalogCommands',
]
