"""UComp: structured container for a UC model request."""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Optional

import numpy as np
from numpy.typing import NDArray

from .checker.model_checks import ModelComponents, parse_model


@dataclass(frozen=True, eq=False)
class Hidden:
    """Bookkeeping reserved for the estimation stages.

    Nothing in here is known at setup time; the defaults mark every entry as
    not computed yet.

    Attributes
    ----------
    grad : numpy.ndarray or None
        Gradient of the objective function at the optimum.
    d_t : numpy.ndarray or None
        Time-varying state vector adjustments.
    estim_ok : str
        Estimation status message.
    obj_fun_value : float
        Value of the objective function at the optimum.
    inn_variance : float
        Innovations variance.
    non_stationary_terms, ns, n_par : int or None
        Counts of diffuse states, states and parameters.
    harmonics, const_par, type_par : numpy.ndarray or None
        Harmonics in use and parameter bookkeeping for the optimiser.
    cycle_limits : numpy.ndarray or None
        Search bounds for estimated cycle periods.
    type_outliers : numpy.ndarray
        Outlier types and positions, ``[-1, -1]`` when none were found.
    beta, beta_v : numpy.ndarray or None
        Input coefficients and their variances.
    """

    grad: Optional[NDArray] = None
    d_t: Optional[NDArray] = None
    estim_ok: str = "Not estimated"
    obj_fun_value: float = 0.0
    inn_variance: float = 1.0
    non_stationary_terms: Optional[int] = None
    ns: Optional[int] = None
    n_par: Optional[int] = None
    harmonics: Optional[NDArray] = None
    const_par: Optional[NDArray] = None
    type_par: Optional[NDArray] = None
    cycle_limits: Optional[NDArray] = None
    type_outliers: NDArray = field(default_factory=lambda: -np.ones((1, 2)))
    beta: Optional[NDArray] = None
    beta_v: Optional[NDArray] = None


@dataclass(frozen=True, eq=False)
class UCResults:
    """Fields filled in by the stages that consume a :class:`UComp`.

    Attributes
    ----------
    p, v, y_for, y_for_v, criteria
        Estimated parameters, innovations, forecasts, their variance and the
        information criteria (estimation).
    table : str
        Estimation and validation table (validation).
    comp, comp_v
        Estimated components and their variance (decomposition).
    y_fit, y_fit_v, a, P
        Fitted values, their variance, state estimates and their variance
        (filtering and smoothing).
    eta, eps
        State and observation perturbation estimates (disturbance smoothing).
    """

    p: Optional[NDArray] = None
    v: Optional[NDArray] = None
    y_for: Optional[NDArray] = None
    y_for_v: Optional[NDArray] = None
    criteria: Optional[NDArray] = None
    table: str = ""
    comp: Optional[Any] = None
    comp_v: Optional[Any] = None
    y_fit: Optional[NDArray] = None
    y_fit_v: Optional[NDArray] = None
    a: Optional[NDArray] = None
    P: Optional[NDArray] = None
    eta: Optional[NDArray] = None
    eps: Optional[NDArray] = None


@dataclass(frozen=True, eq=False)
class UComp:
    """Validated request for a UC model, as read by the estimation stages.

    Instances are never modified: later stages build extended copies with
    :meth:`evolve`.

    Attributes
    ----------
    y : numpy.ndarray
        Observed series, without leading or trailing missing values.
    u : numpy.ndarray
        Inputs with time along columns, or the 1x2 zero matrix when there are
        none.
    model : str
        Canonical ``trend/cycle/seasonal/irregular`` model string.
    h : int
        Forecast horizon.
    periods : numpy.ndarray
        Fundamental period and harmonics.
    rhos : numpy.ndarray
        One coefficient per period, all ones.
    outlier : float
        Critical value for outlier detection with the caller's sign flipped:
        positive runs one detection after identification, negative runs
        detection for every model in identification. NaN when disabled.
    t_test, stepwise, verbose, c_llik, arma : bool
        Estimation control flags.
    criterion : str
        Information criterion for identification.
    p0 : numpy.ndarray or None
        Initial parameter values.
    p : numpy.ndarray or None
        Fixed parameter values.
    results : UCResults
        Outputs of later stages.
    hidden : Hidden
        Bookkeeping of later stages.
    """

    y: NDArray
    u: NDArray
    model: str
    h: int
    periods: NDArray
    rhos: NDArray
    outlier: float = np.nan
    t_test: bool = False
    stepwise: bool = False
    verbose: bool = True
    c_llik: bool = True
    arma: bool = True
    criterion: str = "aic"
    p0: Optional[NDArray] = None
    p: Optional[NDArray] = None
    results: UCResults = field(default_factory=UCResults)
    hidden: Hidden = field(default_factory=Hidden)

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self.y)

    @property
    def has_inputs(self) -> bool:
        """Whether real input variables are present."""
        return self.u.shape[1] > 2

    @property
    def components(self) -> ModelComponents:
        """Model string split by component."""
        return parse_model(self.model)[0]

    def evolve(self, **changes) -> "UComp":
        """Return a copy with some fields replaced.

        ``results`` and ``hidden`` may be given either as whole records or as
        dictionaries of the entries to update.
        """
        for name in ("results", "hidden"):
            if isinstance(changes.get(name), dict):
                changes[name] = replace(getattr(self, name), **changes[name])
        return replace(self, **changes)

    def to_dict(self):
        """Convert to a nested dictionary."""
        return asdict(self)
