"""
Exceptions raised while setting up a UC model.

All of them derive from ``ValueError`` so that code written against the usual
numpy/pandas conventions keeps working.
"""


class UCompError(ValueError):
    """Base class for every setup failure."""


class InvalidArgument(UCompError):
    """An option violates its declared type or shape contract."""


class LengthMismatch(UCompError):
    """The input matrix is shorter than the series it has to cover."""


class MissingConfiguration(UCompError):
    """No period information could be derived."""


class EmptyModel(UCompError):
    """The model string specifies nothing to fit or to search for."""
