"""Exceptions raised by :mod:`ratio`.

Each class also derives from the builtin exception a caller would reach for
first, so ``except ZeroDivisionError`` keeps working around a division by a
zero :class:`~ratio.Ratio`.
"""


class RatioError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(RatioError, ValueError):
    """An argument cannot be turned into a valid :class:`~ratio.Ratio`."""


class ZeroDenominatorError(InvalidArgumentError, ZeroDivisionError):
    """A zero denominator was requested, directly or through a division."""


class NonIntegralError(InvalidArgumentError, TypeError):
    """Numerator or denominator is not an integer."""


class RatioOverflowError(RatioError, OverflowError):
    """The result is not representable as a real ratio (e.g. ``sqrt(-1)``)."""


class ContractViolationError(RatioError, AssertionError):
    """A value that should satisfy the ratio invariants does not.

    Only reachable after writing fields with ``normalize=False``.
    """


__all__ = [
    "RatioError",
    "InvalidArgumentError",
    "ZeroDenominatorError",
    "NonIntegralError",
    "RatioOverflowError",
    "ContractViolationError",
]
