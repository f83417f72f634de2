# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Custom exception hierarchy for wfparams.

This module defines a hierarchy of exceptions that provide clear, specific
error types for the failure modes of the parameter-set pipeline.
"""

import logging
from contextlib import contextmanager
from typing import Optional, TypeVar


class WFParamsError(Exception):
    """
    Base exception for all wfparams-specific errors.

    All custom exceptions in wfparams should inherit from this class.
    This allows catching all wfparams errors with a single except clause.
    """
    pass


class ConfigurationError(WFParamsError):
    """
    Configuration-related errors.

    Raised when:
    - Required configuration keys are missing
    - Configuration values are invalid
    - Configuration file cannot be parsed
    """
    pass


class CatalogError(WFParamsError):
    """
    Parameter-set discovery failures.

    Raised when:
    - The input directory does not exist or holds no parameter-set files
    - A file name does not follow ``{ClassType}_{Source}_{SetNumber}_{Basin}.csv``
    - The class type token is neither ``Land`` nor ``River``
    """
    pass


class LoaderError(WFParamsError):
    """
    Parameter-set reading failures.

    Raised when:
    - A parameter-set file cannot be read or parsed as CSV
    - A file has no parameter column or no class columns
    - There is nothing to assemble into a corpus
    """
    pass


class NormalizationError(WFParamsError):
    """
    Corpus normalization failures.

    Raised when:
    - The corpus is missing one of the canonical columns
    """
    pass


class AggregationError(WFParamsError):
    """
    Summary statistics failures.

    Raised when:
    - The corpus handed to the aggregator lacks required columns
    - A group-by column does not exist
    """
    pass


class ReportingError(WFParamsError):
    """
    Visualization and reporting failures.

    Raised when:
    - A parameter has too few observations to draw a boxplot
    - Plot generation or saving fails
    """
    pass


class ValidationError(WFParamsError):
    """
    Data or argument validation failures.

    Raised when:
    - Input data fails validation checks
    - A family or step name is unknown
    """
    pass


# =============================================================================
# Validation Helpers
# =============================================================================

T = TypeVar('T')


def require(condition: bool, message: str, error_type: type = None) -> None:
    """
    Validate a condition, raising an exception if it fails.

    Args:
        condition: The condition that must be True
        message: Error message if condition is False
        error_type: Exception type to raise (default: ValidationError)

    Raises:
        ValidationError (or specified error_type) if condition is False

    Example:
        >>> require(len(files) > 0, "No parameter-set files found")
    """
    if error_type is None:
        error_type = ValidationError
    if not condition:
        raise error_type(message)


def require_not_none(value: Optional[T], name: str, error_type: type = None) -> T:
    """
    Validate that a value is not None, returning it if valid.

    Args:
        value: The value to check
        name: Name of the value (for error message)
        error_type: Exception type to raise (default: ValidationError)

    Returns:
        The value if it is not None

    Raises:
        ValidationError (or specified error_type) if value is None
    """
    if error_type is None:
        error_type = ValidationError
    if value is None:
        raise error_type(f"{name} must not be None")
    return value


@contextmanager
def wfparams_error_handler(
    operation: str,
    logger: Optional[logging.Logger] = None,
    reraise: bool = True,
    error_type: type = WFParamsError
):
    """
    Context manager for standardized error handling.

    Logs the failure, converts foreign exceptions into ``error_type`` and
    optionally re-raises.

    Args:
        operation: Description of the operation being performed (for logging)
        logger: Logger instance for error messages. If None, errors are not logged.
        reraise: Whether to re-raise the exception after handling (default: True)
        error_type: wfparams exception type to convert generic exceptions to

    Example:
        >>> with wfparams_error_handler("reading Land_UW_1_Basin.csv", logger, error_type=LoaderError):
        ...     frame = pd.read_csv(path)
    """
    try:
        yield
    except WFParamsError:
        if logger:
            logger.error(f"Error during {operation}", exc_info=True)
        if reraise:
            raise
    except Exception as e:
        if logger:
            logger.error(f"Error during {operation}: {e}", exc_info=True)
        if reraise:
            raise error_type(f"Failed during {operation}: {e}") from e


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Base
    'WFParamsError',
    # Domain exceptions
    'ConfigurationError',
    'CatalogError',
    'LoaderError',
    'NormalizationError',
    'AggregationError',
    'ReportingError',
    'ValidationError',
    # Helpers
    'require',
    'require_not_none',
    'wfparams_error_handler',
]
