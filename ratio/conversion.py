"""Continued-fraction approximation between floats and ratios.

The routines here work on plain numbers and ``(numerator, denominator)``
pairs; :class:`ratio.Ratio` wraps them into its constructors.
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import Any, List, Optional, Tuple

from .config import DEFAULT_ITERATIONS, RECIPROCAL_PLACES
from .errors import ContractViolationError, InvalidArgumentError

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = RECIPROCAL_PLACES) -> float:
    """Round *value* to *places* decimals, halves away from zero."""
    factor = 10.0 ** places
    scaled = abs(value) * factor
    if math.isinf(scaled):
        # Far above the resolution of ``places``; nothing to round.
        return value
    return math.copysign(math.floor(scaled + 0.5) / factor, value)


def int_part(value: Any) -> int:
    """Return the integer part of *value* for values of at least one.

    Anything below one (negative values included) gives ``0``. Works for
    floats, integers, :class:`fractions.Fraction` and :class:`ratio.Ratio`.

    Exact integers above one give themselves. A loop stopping at
    ``value - k <= 1`` would return ``value - 1`` for them and leave a
    remainder of exactly one for the next refinement step.
    """
    if value < 1:
        return 0
    if value == 1:
        return 1
    return math.floor(value)


def _check_budget(max_iterations: Any) -> int:
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, numbers.Integral):
        raise InvalidArgumentError(
            f"max_iterations must be an integer, got {type(max_iterations)!r}"
        )
    if max_iterations < 0:
        raise InvalidArgumentError("max_iterations must be >= 0")
    return int(max_iterations)


def _terms(x: float, budget: int) -> List[Optional[int]]:
    """Expand ``x >= 0`` into integer parts, with ``None`` marking a reciprocal."""
    terms: List[Optional[int]] = []
    while x != 0 and budget > 0:
        if x < 1:
            reciprocal = 1.0 / x
            if math.isinf(reciprocal):
                logger.debug("%r is below the approximation resolution, truncating to 0", x)
                break
            # The reciprocal is >= 1, so the next pass consumes budget.
            terms.append(None)
            x = round_half_up(reciprocal)
        else:
            whole = int_part(x)
            terms.append(whole)
            x -= whole
            budget -= 1
    return terms


def continued_fraction(x: float, max_iterations: int = DEFAULT_ITERATIONS) -> Tuple[int, int]:
    """Approximate *x* as a reduced ``(numerator, denominator)`` pair.

    Every step splits off the integer part of the current value and
    continues on the fractional remainder, which costs one iteration. A
    remainder below one is replaced by its reciprocal rounded to
    ``RECIPROCAL_PLACES`` decimals; that step is free, but always hands a
    value of at least one to the next step, so at most
    ``2 * max_iterations + 1`` steps run. The terms are then folded back
    from the innermost one outwards.

    Raises :class:`InvalidArgumentError` for NaN, infinities and negative or
    non-integer budgets.
    """
    budget = _check_budget(max_iterations)
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        raise InvalidArgumentError("cannot convert NaN or infinity to Ratio")

    terms = _terms(abs(x), budget)
    num, den = 0, 1
    for term in reversed(terms):
        if term is None:
            num, den = den, num
        else:
            # gcd(term * den + num, den) == gcd(num, den) == 1
            num = term * den + num
    if x < 0:
        num = -num
    logger.debug(
        "approximated %r with %d of %d iterations (%d terms)",
        x,
        sum(term is not None for term in terms),
        budget,
        len(terms),
    )
    return num, den


def convert_ratio_to_float(value: Any) -> float:
    """Return ``numerator / denominator`` of *value* as a float."""
    if value.denominator <= 0:
        raise ContractViolationError(
            f"denominator should be positive, got {value.denominator}"
        )
    return value.numerator / value.denominator


__all__ = [
    "continued_fraction",
    "convert_ratio_to_float",
    "int_part",
    "round_half_up",
]
