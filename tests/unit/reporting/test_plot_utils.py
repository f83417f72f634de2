"""Unit tests for chart axis helpers."""

import numpy as np
import pytest

from wfparams.core.exceptions import ReportingError
from wfparams.reporting.core import expanded_limits, finite_values, whisker_limits

pytestmark = [pytest.mark.unit]


class TestFiniteValues:

    def test_drops_nan_and_inf(self):
        values = finite_values([1.0, np.nan, 2.0, np.inf, -np.inf])
        assert values.tolist() == [1.0, 2.0]

    def test_empty(self):
        assert finite_values([]).size == 0


class TestWhiskerLimits:
    """Test Tukey whisker computation."""

    def test_outlier_outside_whiskers(self):
        """An extreme value does not stretch the whisker range."""
        assert whisker_limits([1.0, 2.0, 3.0, 4.0, 100.0]) == (1.0, 4.0)

    def test_no_outliers(self):
        assert whisker_limits([1.0, 2.0, 3.0, 4.0, 5.0]) == (1.0, 5.0)

    def test_constant_sample(self):
        assert whisker_limits([2.0, 2.0, 2.0]) == (2.0, 2.0)

    def test_whisker_multiplier(self):
        """A wider multiplier lets the extreme value back in."""
        low, high = whisker_limits([1.0, 2.0, 3.0, 4.0, 100.0], whis=100.0)
        assert (low, high) == (1.0, 100.0)

    def test_nan_ignored(self):
        assert whisker_limits([1.0, np.nan, 3.0]) == (1.0, 3.0)

    def test_interpolated_quartiles(self):
        """Quartiles 1.25 and 3.75 put the upper fence at 7.5, so 8 falls outside.

        Tukey's hinges (1 and 4) would have reached it.
        """
        assert whisker_limits([0.0, 1.0, 2.0, 3.0, 4.0, 8.0]) == (0.0, 4.0)

    @pytest.mark.parametrize("values", [[], [np.nan, np.nan]])
    def test_empty_raises(self, values):
        with pytest.raises(ReportingError):
            whisker_limits(values)


class TestExpandedLimits:
    """Test axis padding."""

    def test_five_percent_total(self):
        """The range grows by 5% in total, half on each side."""
        low, high = expanded_limits(0.0, 10.0)
        assert low == pytest.approx(-0.25)
        assert high == pytest.approx(10.25)

    def test_custom_expansion(self):
        low, high = expanded_limits(1.0, 3.0, expansion=0.5)
        assert (low, high) == pytest.approx((0.5, 3.5))

    def test_reversed_bounds(self):
        assert expanded_limits(10.0, 0.0) == pytest.approx((-0.25, 10.25))

    def test_zero_span(self):
        """A single value gets a pad proportional to its magnitude."""
        low, high = expanded_limits(2.0, 2.0)
        assert low == pytest.approx(1.9)
        assert high == pytest.approx(2.1)
        assert low < high

    def test_zero_span_at_zero(self):
        assert expanded_limits(0.0, 0.0) == (-0.5, 0.5)
