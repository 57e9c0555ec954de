import math

import numpy as np

from ..errors import InvalidArgument, MissingConfiguration


def _check_frequency(frequency):
    """Validate the number of observations per year."""
    if isinstance(frequency, (bool, np.bool_)) or not isinstance(
        frequency, (int, float, np.integer, np.floating)
    ):
        raise InvalidArgument("'frequency' must be a real number")
    if not math.isfinite(frequency):
        raise InvalidArgument("'frequency' must be finite")
    return float(frequency)


def derive_periods(frequency, periods=None):
    """
    Compute the fundamental period and its harmonics.

    With no explicit periods and ``frequency > 1`` the periods are
    ``frequency / j`` for ``j = 1, ..., floor(frequency / 2)``. With
    ``frequency <= 1`` a single period of 1 (annual data) is used. Explicit
    periods are returned unchanged.

    Parameters
    ----------
    frequency : float
        Number of observations per year
    periods : array-like or None, optional
        Explicit periods, fundamental first

    Returns
    -------
    numpy.ndarray
        Float vector of periods

    Raises
    ------
    MissingConfiguration
        If no period can be derived.

    Examples
    --------
    >>> derive_periods(12)
    array([12. ,  6. ,  4. ,  3. ,  2.4,  2. ])
    >>> derive_periods(1)
    array([1.])
    """
    frequency = _check_frequency(frequency)

    if periods is not None:
        periods = np.atleast_1d(np.asarray(periods, dtype=float)).copy()
    elif frequency > 1:
        periods = frequency / np.arange(1, math.floor(frequency / 2) + 1)
    else:
        periods = np.ones(1)

    if periods.size == 0 or np.isnan(periods[0]):
        raise MissingConfiguration('Input "periods" should be supplied')
    return periods
