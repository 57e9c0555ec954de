"""
Set up of univariate Unobserved Components (UC) models.

:func:`uc_setup` is the single entry point: it validates the options, repairs
the data, derives the periods and compiles the model string into the
canonical request consumed by estimation, filtering, smoothing, forecasting
and validation.
"""

from typing import Any

from numpy.typing import ArrayLike

from .checker._utils import _warn
from .checker.data_checks import preprocess_series
from .checker.model_checks import normalize_model
from .checker.option_checks import resolve_options
from .checker.organizers import assemble_request
from .checker.period_checks import derive_periods
from .ucomp import UComp


def uc_setup(y: ArrayLike, frequency: float, **options: Any) -> UComp:
    """
    Set up a UC model.

    Parameters
    ----------
    y : array-like or pandas.Series
        Time series to model. Missing values (NaN) are allowed; leading and
        trailing ones are removed.
    frequency : float
        Fundamental period, number of observations per year.
    **options
        u : array-like, optional
            Matrix of inputs, one row per input. If the output is to be
            forecast, ``u`` must contain the future values of the inputs and
            the horizon is taken from them. Default: no inputs.
        periods : array-like, optional
            Fundamental period and harmonics. Computed from ``frequency``
            when not supplied.
        model : str, optional
            Model for each component, ``'trend/seasonal/irregular'`` or
            ``'trend/cycle/seasonal/irregular'``:

            - Trend: ``?``, ``none``, ``rw``, ``irw``, ``llt``, ``dt``
            - Cycle: ``?``, ``none`` or a combination of signed periods.
              Positive values fix the period of a cycle, negative values
              estimate it starting from their absolute value. A ``?`` after
              them tests for the existence of the cycles.
            - Seasonal: ``?``, ``none``, ``equal``, ``different``
            - Irregular: ``?``, ``none``, ``arma(0,0)``, ``arma(p,q)``

            Default: ``'?/none/?/?'``.
        outlier : float, optional
            Critical t value for outlier detection. NaN (default) disables
            it; a negative value runs one detection after identification, a
            positive one runs detection for every model in identification.
            The request stores it with the sign flipped.
        stepwise : bool, optional
            Stepwise identification. Default: False.
        t_test : bool, optional
            Unit root test to reduce the identification search. Alias:
            ``tTest``. Default: False.
        p0 : array-like, optional
            Initial parameter values. Discarded if the model has wildcards.
        p : array-like, optional
            Fixed parameter values. Discarded if the model has wildcards.
        h : int, optional
            Forecast horizon. Ignored when inputs are supplied. Default: 18.
        criterion : {'aic', 'bic', 'aicc'}, optional
            Information criterion for identification. Default: ``'aic'``.
        verbose : bool, optional
            Show progress notices. Default: True.
        arma : bool, optional
            Consider ARMA irregulars during identification. Default: True.
        c_llik : bool, optional
            Concentrated likelihood. Alias: ``cLlik``. Default: True.

    Returns
    -------
    UComp
        Validated request. Its ``results`` and ``hidden`` records are empty
        until later stages fill them in.

    Raises
    ------
    InvalidArgument
        If an option violates its contract.
    LengthMismatch
        If the inputs are shorter than the series.
    MissingConfiguration
        If no period can be derived.
    EmptyModel
        If the model specifies nothing.

    Examples
    --------
    >>> import numpy as np
    >>> y = np.log(np.arange(1.0, 49.0))
    >>> m = uc_setup(y, 12, model="llt/equal/arma(0,0)")
    >>> m.model
    'llt/none/equal/arma(0,0)'
    >>> m.h
    18
    """
    resolved = resolve_options(options)
    silent = not resolved["verbose"]

    periods = derive_periods(frequency, resolved["periods"])
    y, u, h = preprocess_series(y, resolved["u"], resolved["h"], silent)
    if resolved["h"] is not None and h != resolved["h"]:
        _warn(f"Horizon taken from the inputs (h = {h}).", silent)

    model_info = normalize_model(
        resolved["model"], periods, h=h, p0=resolved["p0"], p=resolved["p"]
    )
    return assemble_request(resolved, y, u, periods, model_info)
