"""
Pytest configuration and shared fixtures for ucomp package tests.
"""

import numpy as np
import pytest


@pytest.fixture
def airpassengers():
    """Classic AirPassengers dataset (monthly airline passengers 1949-1952)."""
    return np.array([
        112, 118, 132, 129, 121, 135, 148, 148, 136, 119, 104, 118,
        115, 126, 141, 135, 125, 149, 170, 170, 158, 133, 114, 140,
        145, 150, 178, 163, 172, 178, 199, 199, 184, 162, 146, 166,
        171, 180, 193, 181, 183, 218, 230, 242, 209, 191, 172, 194
    ], dtype=float)


@pytest.fixture
def quarterly_series():
    """Quarterly series with trend and seasonality."""
    np.random.seed(42)
    n = 40
    t = np.arange(n)
    return 50 + 0.3 * t + 5 * np.sin(2 * np.pi * t / 4) + np.random.randn(n)


@pytest.fixture
def padded_series():
    """Series with missing values at both ends."""
    return np.array([np.nan, np.nan, 2.0, 3.0, np.nan])


@pytest.fixture
def inputs_with_future():
    """Three inputs covering 10 observations plus 5 future values."""
    np.random.seed(42)
    return np.random.randn(3, 15)
