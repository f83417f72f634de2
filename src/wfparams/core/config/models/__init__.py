# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Hierarchical configuration models for wfparams.

Key design features:
- Type-safe hierarchical structure (config.paths.input_dir vs config['INPUT_DIR'])
- Factory methods: from_minimal(), from_file()
- Immutable configs (frozen=True) to prevent mutation bugs
"""

from .analysis import AnalysisConfig
from .paths import PathsConfig
from .plotting import PlottingConfig
from .root import WFParamsConfig
from .system import SystemConfig

__all__ = [
    "WFParamsConfig",
    "PathsConfig",
    "AnalysisConfig",
    "PlottingConfig",
    "SystemConfig",
]
