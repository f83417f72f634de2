"""
Logging setup and run summaries for wfparams.

Configures the ``wfparams`` logger hierarchy (console plus an optional log
file under ``<output_dir>/_logs``) and writes a JSON run summary at the end
of every workflow.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from wfparams.core.config import ensure_typed_config
from wfparams.core.mixins import ensure_dir

try:
    from wfparams.wfparams_version import __version__
except ImportError:
    __version__ = "0+unknown"

LOGGER_NAME = 'wfparams'
LOG_SUBDIR = '_logs'

LOG_FORMATS = {
    'detailed': '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
    'simple': '%(asctime)s - %(levelname)s - %(message)s',
}
CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingManager:
    """
    Owns the handlers of the ``wfparams`` logger for one run.

    Attributes:
        logger: The configured ``wfparams`` logger
        log_dir: Directory receiving the log file and run summary
        log_file: Path of the log file, or None when file logging is off
    """

    def __init__(self, config: Any, debug_mode: bool = False):
        self.config = ensure_typed_config(config)
        self.debug_mode = debug_mode
        self.timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        self.log_dir = self.config.paths.output_dir / LOG_SUBDIR
        self.log_file: Optional[Path] = None
        self.logger = self.setup_logging()

    def _level(self) -> int:
        if self.debug_mode:
            return logging.DEBUG
        return getattr(logging, self.config.system.log_level, logging.INFO)

    def setup_logging(self) -> logging.Logger:
        """Attach fresh console and file handlers to the ``wfparams`` logger."""
        logger = logging.getLogger(LOGGER_NAME)
        level = self._level()
        logger.setLevel(level)
        logger.propagate = False

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console)

        if self.config.system.log_to_file:
            ensure_dir(self.log_dir)
            self.log_file = self.log_dir / f"wfparams_{self.timestamp}.log"
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(LOG_FORMATS[self.config.system.log_format], datefmt=DATE_FORMAT)
            )
            logger.addHandler(file_handler)

        logger.debug(f"Logging initialized at level {logging.getLevelName(level)}")
        if self.log_file:
            logger.debug(f"Log file: {self.log_file}")
        return logger

    def log_step_header(self, index: int, total: int, name: str, description: str) -> None:
        """Log the banner that opens a workflow step."""
        self.logger.info("=" * 60)
        self.logger.info(f"Step {index}/{total}: {name}")
        self.logger.info(description)
        self.logger.info("=" * 60)

    def log_completion(self, success: bool, message: str, duration: Optional[float] = None) -> None:
        """Log the outcome of a workflow step."""
        if success:
            timing = f" (Duration: {duration:.2f}s)" if duration is not None else ""
            self.logger.info(f"✓ Completed: {message}{timing}")
        else:
            self.logger.error(f"✗ Failed: {message}")

    def create_run_summary(
        self,
        steps_completed: List[Any],
        errors: List[Any],
        warnings: List[Any],
        execution_time: float,
        status: str,
    ) -> Path:
        """
        Write a JSON summary of the run next to the log file.

        Returns:
            Path of the written summary
        """
        summary: Dict[str, Union[str, float, List[Any], Dict[str, str], None]] = {
            'run_id': self.timestamp,
            'wfparams_version': __version__,
            'status': status,
            'execution_time_seconds': round(execution_time, 3),
            'steps_completed': steps_completed,
            'errors': errors,
            'warnings': warnings,
            'paths': {
                'input_dir': str(self.config.paths.input_dir),
                'output_dir': str(self.config.paths.output_dir),
            },
            'log_file': str(self.log_file) if self.log_file else None,
        }

        ensure_dir(self.log_dir)
        summary_file = self.log_dir / f"run_summary_{self.timestamp}.json"
        with open(summary_file, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, default=str)

        self.logger.info(f"Run summary written to: {summary_file}")
        return summary_file

    def close(self) -> None:
        """Detach and close every handler this manager added."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
