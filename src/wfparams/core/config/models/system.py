# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
System configuration model.

Contains SystemConfig for run-level settings: logging and error policy.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .base import FROZEN_CONFIG


class SystemConfig(BaseModel):
    """System-level configuration: logging, error policy"""
    model_config = FROZEN_CONFIG

    log_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = Field(default='INFO', alias='LOG_LEVEL')
    log_to_file: bool = Field(default=True, alias='LOG_TO_FILE')
    log_format: Literal['detailed', 'simple'] = Field(default='detailed', alias='LOG_FORMAT')
    stop_on_error: bool = Field(default=True, alias='STOP_ON_ERROR')

    @field_validator('log_level', 'log_format', mode='before')
    @classmethod
    def normalize_case(cls, v, info):
        """LOG_LEVEL is upper-case, LOG_FORMAT lower-case, whatever the input."""
        if isinstance(v, str):
            return v.strip().upper() if info.field_name == 'log_level' else v.strip().lower()
        return v
