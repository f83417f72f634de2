# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Root configuration model.

WFParamsConfig groups the section models and exposes the factory methods
used by the CLI and the tests.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

from .analysis import AnalysisConfig
from .base import FROZEN_CONFIG
from .paths import PathsConfig
from .plotting import PlottingConfig
from .system import SystemConfig


class WFParamsConfig(BaseModel):
    """
    Complete wfparams configuration.

    Example:
        >>> config = WFParamsConfig.from_minimal('parameter_sets', 'results')
        >>> config.analysis.decimals
        4
    """
    model_config = FROZEN_CONFIG

    paths: PathsConfig
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    plotting: PlottingConfig = Field(default_factory=PlottingConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        overrides: Optional[Dict[str, Any]] = None,
        *,
        use_env: bool = True,
    ) -> 'WFParamsConfig':
        """Load a YAML configuration (nested or flat) with env and CLI overrides."""
        from wfparams.core.config.factories import from_file_factory
        return from_file_factory(cls, Path(path), overrides, use_env=use_env)

    @classmethod
    def from_minimal(
        cls,
        input_dir: Union[str, Path],
        output_dir: Union[str, Path],
        **overrides: Any,
    ) -> 'WFParamsConfig':
        """Build a configuration from the two required paths plus flat overrides."""
        from wfparams.core.config.factories import from_mapping_factory
        flat = {'INPUT_DIR': input_dir, 'OUTPUT_DIR': output_dir}
        flat.update(overrides)
        return from_mapping_factory(cls, flat)

    def to_dict(self, flatten: bool = True) -> Dict[str, Any]:
        """Return the configuration as a flat (alias-keyed) or nested dict."""
        if flatten:
            from wfparams.core.config.transformers import flatten_nested_config
            return flatten_nested_config(self)
        return self.model_dump(mode='json')
