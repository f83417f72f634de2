"""Plotters for parameter charts."""

from .parameter_boxplot_plotter import FamilyPlotResult, ParameterBoxplotPlotter

__all__ = ['FamilyPlotResult', 'ParameterBoxplotPlotter']
