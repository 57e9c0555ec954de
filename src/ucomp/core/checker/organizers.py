from ..ucomp import Hidden, UComp, UCResults


def _read_only(values):
    """Freeze an array owned by the request."""
    if values is not None:
        values.setflags(write=False)
    return values


def assemble_request(options, y, u, periods, model_info):
    """
    Package validated values into a UComp request.

    Parameters
    ----------
    options : dict
        Resolved options (see ``resolve_options``)
    y : numpy.ndarray
        Preprocessed series
    u : numpy.ndarray
        Preprocessed input matrix
    periods : numpy.ndarray
        Fundamental period and harmonics
    model_info : dict
        Output of ``normalize_model``

    Returns
    -------
    UComp
        Request with empty results and bookkeeping records
    """
    return UComp(
        y=_read_only(y),
        u=_read_only(u),
        model=model_info["model"],
        h=int(model_info["h"]),
        periods=_read_only(periods),
        rhos=_read_only(model_info["rhos"]),
        # Stored with the sign flipped, as read by the estimator
        outlier=-options["outlier"],
        t_test=options["t_test"],
        stepwise=options["stepwise"],
        verbose=options["verbose"],
        c_llik=options["c_llik"],
        arma=options["arma"],
        criterion=options["criterion"],
        p0=_read_only(model_info["p0"]),
        p=_read_only(model_info["p"]),
        results=UCResults(),
        hidden=Hidden(),
    )
