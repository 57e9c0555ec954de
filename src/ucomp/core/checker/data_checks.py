import numpy as np
import pandas as pd

from ..errors import InvalidArgument, LengthMismatch
from ._utils import _warn

# u of this width and a single row stands for "no inputs"
SENTINEL_COLUMNS = 2


def _check_data(y):
    """
    Convert the observed series to a one-dimensional float array.

    Parameters
    ----------
    y : array-like, pandas.Series or pandas.DataFrame
        Observed time series. Entries that cannot be parsed as numbers are
        treated as missing.

    Returns
    -------
    numpy.ndarray
        A new float array; the caller's object is left untouched.
    """
    if isinstance(y, str):
        raise InvalidArgument("'y' must be a numeric series")
    if hasattr(y, "values"):
        data_values = np.asarray(y.values)
    else:
        data_values = np.asarray(y)
    if data_values.ndim > 1:
        data_values = np.squeeze(data_values)
    if data_values.ndim != 1 or data_values.size == 0:
        raise InvalidArgument("'y' must be a non-empty one-dimensional series")
    try:
        data_values = pd.to_numeric(data_values, errors="coerce")
    except (TypeError, ValueError):
        raise InvalidArgument("Data must be numeric or convertible to numeric values")
    return np.array(data_values, dtype=float)


def _check_inputs(u, n, h):
    """
    Orient the input matrix and derive the horizon from it.

    Parameters
    ----------
    u : numpy.ndarray or None
        Input matrix, either with time along rows or along columns
    n : int
        Length of the observed series
    h : int or None
        Horizon requested by the caller

    Returns
    -------
    tuple
        (u with time along columns, h)
    """
    if u is None or np.size(u) == 0:
        return np.zeros((1, SENTINEL_COLUMNS)), h

    u = np.atleast_2d(u)
    k, cu = u.shape
    # Time runs along columns
    if 0 < cu < k:
        u = u.T
    if u.shape[1] <= SENTINEL_COLUMNS:
        # Too short to hold regressors, same as the sentinel
        return u, h

    if n > u.shape[1]:
        raise LengthMismatch(
            "Length of output data never could be greater than length of inputs"
        )
    # Inputs carry their own future values, so they fix the horizon
    return u, u.shape[1] - n


def _trim_missing(y, u, silent=False):
    """
    Remove missing values at the beginning and end of the series.

    Interior missing values are left for the estimator to handle.

    Parameters
    ----------
    y : numpy.ndarray
        Observed series
    u : numpy.ndarray
        Input matrix with time along columns
    silent : bool, optional
        Whether to suppress notices

    Returns
    -------
    tuple
        (y, u) restricted to the span of observed values
    """
    n = len(y)
    if not (np.isnan(y[0]) or np.isnan(y[n - 1])):
        return y, u

    observed = np.flatnonzero(~np.isnan(y))
    if observed.size == 0:
        raise InvalidArgument("'y' contains missing values only")
    min_ind, max_ind = observed[0], observed[-1]

    _warn(
        f"{min_ind} leading and {n - 1 - max_ind} trailing missing values "
        "removed from the series.",
        silent,
    )
    y = y[min_ind : max_ind + 1]
    if u.shape[1] > SENTINEL_COLUMNS:
        u = u[:, min_ind : max_ind + 1]
    return y, u


def preprocess_series(y, u=None, h=None, silent=False):
    """
    Repair the observed series and inputs, and derive the forecast horizon.

    The steps are:

    1. **Orientation**: ``u`` is transposed when it has fewer (non zero)
       columns than rows, so that time runs along columns.
    2. **Sentinel**: an empty ``u`` becomes a 1x2 matrix of zeros. When ``u``
       holds real inputs (more than 2 columns) the horizon is the number of
       its columns beyond the length of ``y``, whatever the caller asked for.
    3. **Consistency**: with real inputs (more than 2 columns) the inputs
       cannot be shorter than ``y``.
    4. **Trimming**: leading and trailing missing values are dropped from
       ``y`` and the matching columns from ``u``.

    Parameters
    ----------
    y : array-like
        Observed series
    u : array-like or None, optional
        Input matrix
    h : int or None, optional
        Requested horizon
    silent : bool, optional
        Whether to suppress notices

    Returns
    -------
    tuple
        (y, u, h)

    Raises
    ------
    LengthMismatch
        If the inputs do not cover the whole observed series.
    """
    y = _check_data(y)
    u, h = _check_inputs(u, len(y), h)
    y, u = _trim_missing(y, u, silent)
    return y, u, h
