from ucomp.core.errors import (
    EmptyModel,
    InvalidArgument,
    LengthMismatch,
    MissingConfiguration,
    UCompError,
)
from ucomp.core.uc_setup import uc_setup
from ucomp.core.ucomp import Hidden, UComp, UCResults
from ucomp.utils import show_versions

__all__ = [
    "EmptyModel",
    "Hidden",
    "InvalidArgument",
    "LengthMismatch",
    "MissingConfiguration",
    "UCResults",
    "UComp",
    "UCompError",
    "show_versions",
    "uc_setup",
]
