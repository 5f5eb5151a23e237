"""Module-level functions over ratios and numeric-like values.

The transcendental functions convert to float, apply :mod:`math` and
approximate the result again with ``DEFAULT_ITERATIONS`` steps, so they are
not exact.
"""
from __future__ import annotations

from typing import Any

from .config import DEFAULT_ITERATIONS
from .conversion import convert_ratio_to_float, int_part
from .rational import NumberLike, Ratio


def sin(value: NumberLike) -> Ratio:
    return Ratio.rationalize(value).sin()


def cos(value: NumberLike) -> Ratio:
    return Ratio.rationalize(value).cos()


def tan(value: NumberLike) -> Ratio:
    return Ratio.rationalize(value).tan()


def exp(value: NumberLike) -> Ratio:
    """Return ``e`` raised to *value* as a :class:`Ratio` approximation."""
    return Ratio.rationalize(value).exp()


def ln(value: NumberLike) -> Ratio:
    return Ratio.rationalize(value).ln()


def log10(value: NumberLike) -> Ratio:
    return Ratio.rationalize(value).log10()


def abs(value: NumberLike) -> Ratio:
    return Ratio.rationalize(value).__abs__()


def pow(value: NumberLike, exponent: Any) -> Ratio:
    """Raise numerator and denominator of *value* to the integer *exponent*."""
    return Ratio.rationalize(value) ** exponent


def sqrt(value: NumberLike) -> Ratio:
    """Square root; exact when both terms are perfect squares.

    Raises :class:`~ratio.errors.RatioOverflowError` for negative values.
    """
    return Ratio.rationalize(value).sqrt()


def invert(value: NumberLike) -> Ratio:
    return Ratio.rationalize(value).invert()


def reduce(value: Ratio) -> Ratio:
    """Return a lowest-terms copy of *value*."""
    return Ratio.reduced(value)


def convert_float_to_ratio(value: float, max_iterations: int = DEFAULT_ITERATIONS) -> Ratio:
    """Approximate *value* as a :class:`Ratio` in *max_iterations* steps."""
    return Ratio.from_float(value, max_iterations)


__all__ = [
    "sin",
    "cos",
    "tan",
    "exp",
    "ln",
    "log10",
    "abs",
    "pow",
    "sqrt",
    "invert",
    "reduce",
    "int_part",
    "convert_float_to_ratio",
    "convert_ratio_to_float",
]
