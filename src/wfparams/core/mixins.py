# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Core mixins for wfparams modules.

Provides base mixins for logging and configuration access that the
pipeline components build upon.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from wfparams.core.config.models import WFParamsConfig


class LoggingMixin:
    """
    Mixin providing standardized logger access.

    Ensures a logger is always available, defaulting to one named after the
    class if none is explicitly set.
    """

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        _logger = getattr(self, '_logger', None)
        if _logger is None:
            module = self.__class__.__module__
            name = self.__class__.__name__
            self._logger = logging.getLogger(f"{module}.{name}")
            return self._logger
        return _logger

    @logger.setter
    def logger(self, value: Optional[logging.Logger]) -> None:
        """Set the logger instance."""
        self._logger = value


class ConfigMixin:
    """
    Mixin for classes that use a typed ``WFParamsConfig``.

    Subclasses set ``self._config``; the convenience properties below resolve
    the commonly used paths from it.
    """

    @property
    def config(self) -> 'WFParamsConfig':
        """The typed configuration."""
        return self._config

    @config.setter
    def config(self, value: 'WFParamsConfig') -> None:
        self._config = value

    @property
    def input_dir(self) -> Path:
        """Directory holding the parameter-set files."""
        return self.config.paths.input_dir

    @property
    def output_dir(self) -> Path:
        """Directory receiving the summary table, charts and logs."""
        return self.config.paths.output_dir

    @property
    def charts_dir(self) -> Path:
        """Directory receiving the boxplot images."""
        return self.output_dir / self.config.paths.charts_dir


def ensure_dir(path: Union[str, Path]) -> Path:
    """Create ``path`` (and parents) if needed and return it as a Path."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = ['LoggingMixin', 'ConfigMixin', 'ensure_dir']
