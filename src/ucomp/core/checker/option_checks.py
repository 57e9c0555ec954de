"""
Declarative option schema for UC model setup.

Every option accepted by :func:`ucomp.uc_setup` is declared once in
``OPTION_SCHEMA`` as a name, a default and a predicate. A single generic
validator (:func:`resolve_options`) merges the caller values with the defaults
and checks each of them, so the contract of an option lives in one place.
"""

import math
import warnings
from typing import Any, Callable, Dict, NamedTuple

import numpy as np

from ..errors import InvalidArgument
from ._utils import _is_unset

CRITERION_OPTIONS = ("aic", "bic", "aicc")
DEFAULT_MODEL = "?/none/?/?"

# camelCase names used by the Matlab/R toolboxes
OPTION_ALIASES = {"tTest": "t_test", "cLlik": "c_llik"}


class Option(NamedTuple):
    name: str
    default: Any
    predicate: Callable[[Any], bool]
    description: str


def _is_bool(value):
    return isinstance(value, (bool, np.bool_))


def _is_real(value):
    return isinstance(value, (int, float, np.integer, np.floating)) and not _is_bool(
        value
    )


def _as_float_array(value):
    """Return ``value`` as a float array, or None if it is not numeric."""
    if isinstance(value, str) or _is_bool(value):
        return None
    if hasattr(value, "to_numpy"):
        value = value.to_numpy()
    try:
        values = np.asarray(value, dtype=float)
    except (TypeError, ValueError):
        return None
    if values.dtype.kind == "b":
        return None
    return values


def _no_inputs(value):
    """None or a scalar NaN stand for "no inputs"."""
    return value is None or (np.ndim(value) == 0 and _is_unset(value))


def _is_matrix(value):
    if _no_inputs(value):
        return True
    values = _as_float_array(value)
    return values is not None and values.ndim <= 2


def _is_vector(value):
    if _is_unset(value):
        return True
    values = _as_float_array(value)
    return values is not None and values.ndim <= 1 and values.size > 0


def _is_periods(value):
    if not _is_vector(value):
        return False
    if _is_unset(value):
        return True
    values = np.atleast_1d(_as_float_array(value))
    return bool(
        np.all(np.isfinite(values))
        and np.all(values > 0)
        and len(np.unique(values)) == values.size
    )


def _is_horizon(value):
    if value is None:
        return True
    if not _is_real(value):
        return False
    return math.isnan(value) or (math.isfinite(value) and value >= 0)


def _is_outlier(value):
    return _is_real(value)


def _is_criterion(value):
    return isinstance(value, str) and value.lower() in CRITERION_OPTIONS


OPTION_SCHEMA = (
    Option("u", None, _is_matrix, "a numeric matrix of inputs or None"),
    Option("periods", None, _is_periods, "a vector of unique positive periods or None"),
    Option("model", DEFAULT_MODEL, lambda v: isinstance(v, str), "a model string"),
    Option("h", None, _is_horizon, "a non-negative forecast horizon or None"),
    Option("outlier", np.nan, _is_outlier, "a real critical value (NaN disables)"),
    Option("t_test", False, _is_bool, "a boolean"),
    Option("stepwise", False, _is_bool, "a boolean"),
    Option("verbose", True, _is_bool, "a boolean"),
    Option("c_llik", True, _is_bool, "a boolean"),
    Option("arma", True, _is_bool, "a boolean"),
    Option("p0", None, _is_vector, "a numeric vector or None"),
    Option("p", None, _is_vector, "a numeric vector or None"),
    Option(
        "criterion",
        "aic",
        _is_criterion,
        f"one of {', '.join(repr(c) for c in CRITERION_OPTIONS)}",
    ),
)


def _check_horizon(h):
    """Truncate a non-integer horizon, warning the caller."""
    if _is_unset(h):
        return None
    if math.floor(h) != h:
        warnings.warn(
            "h must be integer. It will be used its integer part.", UserWarning
        )
    return int(math.floor(h))


def resolve_options(options: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge caller options with the schema defaults and validate them.

    Parameters
    ----------
    options : dict
        Keyword options as passed by the caller. The camelCase aliases
        ``tTest`` and ``cLlik`` are accepted.

    Returns
    -------
    dict
        One entry per option in ``OPTION_SCHEMA``. Arrays are copied, unset
        vectors are ``None``, ``h`` is an ``int`` or ``None`` and the
        criterion is lower case.

    Raises
    ------
    InvalidArgument
        If an option is unknown or violates its predicate.
    """
    supplied = {}
    for name, value in options.items():
        key = OPTION_ALIASES.get(name, name)
        if key in supplied:
            raise InvalidArgument(f"Option '{key}' given more than once")
        supplied[key] = value

    known = {option.name for option in OPTION_SCHEMA}
    unknown = sorted(set(supplied) - known)
    if unknown:
        raise InvalidArgument(f"Unknown option(s): {', '.join(unknown)}")

    resolved = {}
    for option in OPTION_SCHEMA:
        value = supplied.get(option.name, option.default)
        if not option.predicate(value):
            raise InvalidArgument(
                f"Option '{option.name}' must be {option.description}, "
                f"got {value!r}"
            )
        resolved[option.name] = value

    # Normalise representations without touching the caller's objects
    if _no_inputs(resolved["u"]):
        resolved["u"] = None
    else:
        resolved["u"] = _as_float_array(resolved["u"]).copy()
    for name in ("periods", "p0", "p"):
        if _is_unset(resolved[name]):
            resolved[name] = None
        else:
            resolved[name] = np.atleast_1d(_as_float_array(resolved[name])).copy()
    resolved["h"] = _check_horizon(resolved["h"])
    resolved["outlier"] = float(resolved["outlier"])
    resolved["criterion"] = resolved["criterion"].lower()
    for name in ("t_test", "stepwise", "verbose", "c_llik", "arma"):
        resolved[name] = bool(resolved[name])

    return resolved
