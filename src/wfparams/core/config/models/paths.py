# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Paths configuration model.

Contains PathsConfig: where parameter-set files are read from and where the
summary table, charts and logs are written.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .base import FROZEN_CONFIG


class PathsConfig(BaseModel):
    """Input and output locations"""
    model_config = FROZEN_CONFIG

    input_dir: Path = Field(alias='INPUT_DIR')
    output_dir: Path = Field(alias='OUTPUT_DIR')
    file_pattern: str = Field(default='*', alias='FILE_PATTERN')
    summary_file: str = Field(default='ParameterSummary.csv', alias='SUMMARY_FILE')
    charts_dir: str = Field(default='charts', alias='CHARTS_DIR')

    @field_validator('input_dir', 'output_dir')
    @classmethod
    def validate_paths(cls, v):
        """Expand user home and resolve to an absolute path."""
        return Path(v).expanduser().resolve()

    @field_validator('summary_file', 'file_pattern')
    @classmethod
    def validate_not_blank(cls, v, info):
        if not str(v).strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return str(v).strip()
