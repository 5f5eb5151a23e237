"""Exact rational numbers with bounded float approximation."""

from .arrays import as_ratio_array, zeros, zeros_like
from .config import DEFAULT_ITERATIONS, RECIPROCAL_PLACES
from .conversion import continued_fraction
from .errors import (
    ContractViolationError,
    InvalidArgumentError,
    NonIntegralError,
    RatioError,
    RatioOverflowError,
    ZeroDenominatorError,
)
from .functions import (
    convert_float_to_ratio,
    convert_ratio_to_float,
    cos,
    exp,
    int_part,
    invert,
    ln,
    log10,
    sin,
    sqrt,
    tan,
)
from .rational import Ratio, rationalize

__all__ = [
    "Ratio",
    "rationalize",
    "DEFAULT_ITERATIONS",
    "RECIPROCAL_PLACES",
    "continued_fraction",
    "convert_float_to_ratio",
    "convert_ratio_to_float",
    "int_part",
    "sin",
    "cos",
    "tan",
    "exp",
    "ln",
    "log10",
    "sqrt",
    "invert",
    "as_ratio_array",
    "zeros",
    "zeros_like",
    "RatioError",
    "InvalidArgumentError",
    "ZeroDenominatorError",
    "NonIntegralError",
    "RatioOverflowError",
    "ContractViolationError",
]
