# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Plotting configuration model.

Controls whether boxplots are rendered and how they are sized and scaled.
"""

from pydantic import BaseModel, Field, field_validator

from .base import FROZEN_CONFIG


class PlottingConfig(BaseModel):
    """Boxplot rendering settings"""
    model_config = FROZEN_CONFIG

    enabled: bool = Field(default=True, alias='PLOT_ENABLED')
    figure_width: float = Field(default=8.0, alias='PLOT_FIGURE_WIDTH')
    figure_height: float = Field(default=5.0, alias='PLOT_FIGURE_HEIGHT')
    dpi: int = Field(default=150, alias='PLOT_DPI')
    whisker_iqr: float = Field(default=1.5, alias='PLOT_WHISKER_IQR')
    ylim_expansion: float = Field(default=0.05, alias='PLOT_YLIM_EXPANSION')
    min_observations: int = Field(default=2, alias='PLOT_MIN_OBSERVATIONS')

    @field_validator('figure_width', 'figure_height', 'dpi', 'whisker_iqr')
    @classmethod
    def validate_positive(cls, v, info):
        """Ensure strictly positive sizes"""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v

    @field_validator('ylim_expansion')
    @classmethod
    def validate_expansion(cls, v):
        if v < 0:
            raise ValueError(f"ylim_expansion must be non-negative, got {v}")
        return v

    @field_validator('min_observations')
    @classmethod
    def validate_min_observations(cls, v):
        if v < 1:
            raise ValueError(f"min_observations must be at least 1, got {v}")
        return v
