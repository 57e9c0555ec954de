import numpy as np


def _warn(msg, silent=False):
    """
    Print a notice for the user unless running silently.

    Parameters
    ----------
    msg : str
        Warning message
    silent : bool, optional
        Whether to suppress the notice
    """
    if not silent:
        print(f"Warning: {msg}")


def _is_unset(value):
    """
    Tell whether an optional value means "not supplied".

    ``None`` is unset, and so is a float value (or vector) whose first element
    is NaN, which is how the UComp toolboxes flag missing options.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return False
    values = np.asarray(value)
    if values.size == 0 or values.dtype.kind not in "fc":
        return False
    return bool(np.isnan(values.flat[0]))
