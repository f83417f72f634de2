# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Analysis configuration model.

Controls the summary statistics table and the optional intermediate outputs.
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from wfparams.core.constants import FIXED_VALUE_PARAMETERS

from .base import FROZEN_CONFIG


class AnalysisConfig(BaseModel):
    """Summary statistics settings"""
    model_config = FROZEN_CONFIG

    decimals: int = Field(default=4, alias='SUMMARY_DECIMALS')
    excluded_parameters: Tuple[str, ...] = Field(
        default=FIXED_VALUE_PARAMETERS, alias='EXCLUDED_PARAMETERS'
    )
    write_group_summaries: bool = Field(default=False, alias='WRITE_GROUP_SUMMARIES')
    write_corpus: bool = Field(default=False, alias='WRITE_CORPUS')

    @field_validator('decimals')
    @classmethod
    def validate_decimals(cls, v):
        if v < 0:
            raise ValueError(f"decimals must be non-negative, got {v}")
        return v

    @field_validator('excluded_parameters', mode='before')
    @classmethod
    def split_parameter_list(cls, v):
        """Accept a comma-separated string (env vars, CLI) as well as a list."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(',')
        return tuple(str(item).strip().lower() for item in v if str(item).strip())
