"""
Parsing and normalisation of UC model strings.

A model string names one type for each of the four components, in the order
trend/cycle/seasonal/irregular (the cycle may be left out):

- Trend: ``?``, ``none``, ``rw``, ``irw``, ``llt``, ``dt``
- Cycle: ``?``, ``none`` or signed periods. ``+p`` fixes the period of a
  cycle to ``p``, ``-p`` estimates it starting from ``p``; several cycles may
  be chained and a trailing ``?`` asks to test for their existence.
- Seasonal: ``?``, ``none``, ``equal``, ``different``
- Irregular: ``?``, ``none``, ``arma(p,q)``

Normalisation turns any accepted string into the canonical four-token form
read by the estimator.
"""

from typing import NamedTuple

import numpy as np

from ..errors import EmptyModel, InvalidArgument

WILDCARD = "?"
NONE = "none"
DEFAULT_HORIZON = 18
DEFAULT_ARMA_ORDER = "(0,0)"


class ModelComponents(NamedTuple):
    """One model type per component, in canonical order."""

    trend: str
    cycle: str
    seasonal: str
    irregular: str

    def __str__(self):
        return "/".join(self)

    @property
    def has_wildcard(self) -> bool:
        return any(WILDCARD in token for token in self)


def parse_model(model):
    """
    Split a model string into its components.

    Parameters
    ----------
    model : str
        ``"trend/seasonal/irregular"`` or ``"trend/cycle/seasonal/irregular"``

    Returns
    -------
    tuple
        (ModelComponents, shorthand) where ``shorthand`` tells whether the
        cycle was left out. A missing cycle is returned as ``"none"``.
    """
    if not isinstance(model, str):
        raise InvalidArgument("'model' must be a string")
    tokens = ["".join(token.split()) for token in model.split("/")]
    if len(tokens) not in (3, 4) or not all(tokens):
        raise InvalidArgument(
            f"Wrong model specification '{model}'. Use 'trend/seasonal/irregular' "
            "or 'trend/cycle/seasonal/irregular'"
        )
    if len(tokens) == 3:
        trend, seasonal, irregular = tokens
        return ModelComponents(trend, NONE, seasonal, irregular), True
    return ModelComponents(*tokens), False


def is_empty_model(components, periods):
    """
    Tell whether a model has nothing to estimate nor to search for.

    Every component is switched off. The seasonal component does not count
    with annual data (fundamental period 1). A wildcard anywhere means there
    is something to identify.
    """
    if components.has_wildcard:
        return False
    seasonal_off = components.seasonal == NONE or periods[0] == 1
    return (
        components.trend == NONE
        and components.cycle == NONE
        and components.irregular == NONE
        and seasonal_off
    )


def _complete_arma(irregular):
    """Give an explicit (p,q) order to ARMA irregular components."""
    if "arma" not in irregular:
        return irregular
    if "(" not in irregular:
        return irregular + DEFAULT_ARMA_ORDER
    if not irregular.endswith(")"):
        return irregular + ")"
    return irregular


def _normalize_cycle(cycle, periods):
    """
    Make the cycle search strategy explicit.

    A lone wildcard searches for one cycle with an initial period of four
    times the fundamental period, testing its existence. A bare period is a
    fixed one.
    """
    if cycle == WILDCARD:
        hint = np.format_float_positional(-4 * periods[0], trim="-")
        return f"{hint}{WILDCARD}"
    if cycle != NONE and cycle[0] not in "+-":
        return "+" + cycle
    return cycle


def normalize_model(model, periods, h=None, p0=None, p=None):
    """
    Compile a model string into its canonical form.

    Steps, in order:

    1. Seasonal switched off for annual data (fundamental period 1).
    2. Missing cycle filled in as ``none``.
    3. Everything lower case.
    4. Empty models rejected.
    5. A wildcard anywhere discards fixed parameters ``p0`` and ``p``, since
       the structure itself is still to be identified.
    6. ARMA irregulars get an explicit order, ``(0,0)`` by default.
    7. Horizon defaults to 18.
    8. Cycle made explicit: ``?`` becomes ``-4*period?``, a bare number gets
       a ``+`` sign.

    Parameters
    ----------
    model : str
        Model string
    periods : numpy.ndarray
        Fundamental period and harmonics
    h : int or None, optional
        Forecast horizon
    p0 : numpy.ndarray or None, optional
        Initial parameter values
    p : numpy.ndarray or None, optional
        Fixed parameter values

    Returns
    -------
    dict
        Dictionary with ``model`` (canonical string), ``components``,
        ``h``, ``p0``, ``p`` and ``rhos`` (one coefficient per period)

    Raises
    ------
    InvalidArgument
        If the string does not have 3 or 4 components.
    EmptyModel
        If no component is specified.

    Examples
    --------
    >>> normalize_model("llt/equal/arma", np.array([12.0, 6.0]))["model"]
    'llt/none/equal/arma(0,0)'
    """
    components, _ = parse_model(model)

    if periods[0] == 1:
        components = components._replace(seasonal=NONE)
    components = ModelComponents(*(token.lower() for token in components))

    if is_empty_model(components, periods):
        raise EmptyModel("No model specified")

    if components.has_wildcard:
        p0 = None
        p = None

    components = components._replace(
        irregular=_complete_arma(components.irregular),
        cycle=_normalize_cycle(components.cycle, periods),
    )

    if h is None:
        h = DEFAULT_HORIZON

    return {
        "model": str(components),
        "components": components,
        "h": h,
        "p0": p0,
        "p": p,
        "rhos": np.ones(len(periods)),
    }
