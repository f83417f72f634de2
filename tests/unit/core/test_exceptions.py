"""Unit tests for the exception hierarchy and validation helpers."""

from unittest.mock import MagicMock

import pytest

from wfparams.core.exceptions import (
    AggregationError,
    CatalogError,
    ConfigurationError,
    LoaderError,
    NormalizationError,
    ReportingError,
    ValidationError,
    WFParamsError,
    require,
    require_not_none,
    wfparams_error_handler,
)

pytestmark = [pytest.mark.unit]


class TestHierarchy:

    @pytest.mark.parametrize("error_type", [
        ConfigurationError,
        CatalogError,
        LoaderError,
        NormalizationError,
        AggregationError,
        ReportingError,
        ValidationError,
    ])
    def test_all_derive_from_base(self, error_type):
        """Every domain error can be caught as WFParamsError."""
        with pytest.raises(WFParamsError):
            raise error_type("boom")


class TestRequire:

    def test_passes(self):
        require(True, "never raised")

    def test_default_error_type(self):
        with pytest.raises(ValidationError, match="no files"):
            require(False, "no files")

    def test_custom_error_type(self):
        with pytest.raises(CatalogError):
            require(False, "no files", CatalogError)

    def test_require_not_none_returns_value(self):
        assert require_not_none(0, "count") == 0

    def test_require_not_none_raises(self):
        with pytest.raises(ValidationError, match="corpus must not be None"):
            require_not_none(None, "corpus")


class TestErrorHandler:
    """Test wfparams_error_handler."""

    def test_converts_foreign_exceptions(self):
        logger = MagicMock()
        with pytest.raises(LoaderError, match="reading Land_UW_1_Bow.csv") as exc_info:
            with wfparams_error_handler("reading Land_UW_1_Bow.csv", logger, error_type=LoaderError):
                raise OSError("disk gone")

        assert isinstance(exc_info.value.__cause__, OSError)
        logger.error.assert_called_once()

    def test_domain_errors_pass_through(self):
        with pytest.raises(CatalogError):
            with wfparams_error_handler("discovery", error_type=LoaderError):
                raise CatalogError("bad name")

    def test_no_reraise(self):
        logger = MagicMock()
        with wfparams_error_handler("optional step", logger, reraise=False):
            raise ValueError("ignored")
        logger.error.assert_called_once()
