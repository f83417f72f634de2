"""Command-line interface for wfparams."""

from .argument_parser import CLIParser

__all__ = ['CLIParser']
