"""
Unit tests for period derivation.
"""

import numpy as np
import pytest

from ucomp import InvalidArgument, MissingConfiguration
from ucomp.core.checker.period_checks import derive_periods


class TestDerivePeriods:
    """Tests for periods computed from the frequency."""

    def test_monthly(self):
        """Test fundamental period and harmonics of monthly data."""
        np.testing.assert_allclose(
            derive_periods(12), [12.0, 6.0, 4.0, 3.0, 2.4, 2.0]
        )

    @pytest.mark.parametrize("frequency", [4, 7, 12, 24, 52])
    def test_harmonics_shape(self, frequency):
        """Test length, first element and ordering of derived periods."""
        periods = derive_periods(frequency)

        assert len(periods) == frequency // 2
        assert periods[0] == frequency
        assert np.all(np.diff(periods) < 0)

    @pytest.mark.parametrize("frequency", [1, 0.5, 0, -3])
    def test_annual_and_below(self, frequency):
        """Test that frequencies up to one give a single period of 1."""
        np.testing.assert_array_equal(derive_periods(frequency), [1.0])

    def test_explicit_periods_pass_through(self):
        """Test that supplied periods are used unchanged."""
        periods = derive_periods(12, np.array([12.0, 4.0]))

        np.testing.assert_array_equal(periods, [12.0, 4.0])

    def test_explicit_periods_copied(self):
        """Test that supplied periods are not shared with the caller."""
        supplied = np.array([7.0, 3.5])
        periods = derive_periods(7, supplied)
        periods[0] = 1.0

        assert supplied[0] == 7.0

    def test_no_harmonics_raises(self):
        """Test that a frequency without any harmonic is rejected."""
        with pytest.raises(MissingConfiguration):
            derive_periods(1.5)

    @pytest.mark.parametrize("frequency", ["12", np.nan, True])
    def test_invalid_frequency_raises(self, frequency):
        """Test that the frequency must be a finite real number."""
        with pytest.raises(InvalidArgument):
            derive_periods(frequency)
