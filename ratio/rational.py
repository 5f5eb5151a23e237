"""Exact rational numbers with NumPy interoperability."""
from __future__ import annotations

import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

import numpy as np

from .config import DEFAULT_ITERATIONS
from .conversion import continued_fraction, convert_ratio_to_float
from .errors import (
    ContractViolationError,
    InvalidArgumentError,
    NonIntegralError,
    RatioOverflowError,
    ZeroDenominatorError,
)

logger = logging.getLogger(__name__)

NumberLike = Union["Ratio", Fraction, numbers.Real]


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise NonIntegralError(f"{name} must be an integer, got {type(value)!r}")


def _normalize(num: int, den: int) -> Tuple[int, int]:
    if den == 0:
        raise ZeroDenominatorError("denominator must be non-zero")
    if den < 0:
        num, den = -num, -den
    gcd = math.gcd(num, den)
    return num // gcd, den // gcd


def _scalar_pair(value: Any, max_iterations: int) -> Tuple[int, int]:
    """Return the ``(numerator, denominator)`` a scalar promotes to.

    Integers and fractions are exact; other reals go through the
    continued-fraction approximation with *max_iterations* steps.
    """
    if isinstance(value, Ratio):
        return _normalize(value._numerator, value._denominator)
    if isinstance(value, numbers.Integral):
        return int(value), 1
    if isinstance(value, Fraction):
        return value.numerator, value.denominator
    if isinstance(value, np.generic):
        return _scalar_pair(value.item(), max_iterations)
    if isinstance(value, numbers.Real):
        return continued_fraction(float(value), max_iterations)
    raise NonIntegralError(f"Cannot interpret {type(value)!r} as Ratio")


class Ratio:
    """A fraction ``numerator/denominator`` kept in lowest terms.

    The denominator is always strictly positive and shares no factor with
    the numerator. Arithmetic and comparisons accept other ratios, integers,
    :class:`fractions.Fraction` and floats on either side; floats are first
    approximated with :func:`ratio.conversion.continued_fraction` using
    ``DEFAULT_ITERATIONS`` steps, so ``Ratio(1, 3) == 1 / 3`` holds because
    the approximation of ``0.333...`` is exactly ``1/3``.

    Instances are plain values. The only in-place writes are
    :meth:`set_numerator` and :meth:`set_denominator`; they are not
    internally synchronized, so callers sharing an instance across threads
    must serialize access themselves.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Ratio semantics in NumPy expressions.

    def __init__(self, numerator: Any = 0, denominator: Any = None) -> None:
        if denominator is None:
            num, den = _scalar_pair(numerator, DEFAULT_ITERATIONS)
        else:
            num = _ensure_int(numerator, name="numerator")
            den = _ensure_int(denominator, name="denominator")
            num, den = _normalize(num, den)

        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_float(cls, value: float, max_iterations: int = DEFAULT_ITERATIONS) -> "Ratio":
        """Approximate *value* with at most *max_iterations* refinement steps."""
        if isinstance(value, np.generic):
            value = value.item()
        num, den = continued_fraction(value, max_iterations)
        return cls(num, den)

    @classmethod
    def rationalize(cls, value: NumberLike, max_iterations: Optional[int] = None) -> "Ratio":
        """Coerce a numeric-like value into :class:`Ratio`.

        A :class:`Ratio` is returned as is, after checking that no unchecked
        write left it with a non-positive denominator.
        """
        if isinstance(value, Ratio):
            value._require_valid()
            return value
        if max_iterations is None:
            max_iterations = DEFAULT_ITERATIONS
        num, den = _scalar_pair(value, max_iterations)
        return cls(num, den)

    @classmethod
    def reduced(cls, value: "Ratio") -> "Ratio":
        """Return a reduced copy of *value*, even one written unchecked."""
        return cls(value._numerator, value._denominator)

    # ------------------------------------------------------------------
    # Accessors and mutators
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def get_numerator(self) -> int:
        return self._numerator

    def get_denominator(self) -> int:
        return self._denominator

    def set_numerator(self, value: Any, *, normalize: bool = True) -> None:
        """Replace the numerator in place.

        With ``normalize=False`` the value is stored as given and the ratio
        is not reduced again: ``Ratio(1, 2)`` with numerator set to ``4``
        stays ``(4/2)`` until :meth:`reduce` is called.
        """
        num = _ensure_int(value, name="numerator")
        if normalize:
            self._numerator, self._denominator = _normalize(num, self._denominator)
        else:
            logger.debug("numerator of %r written unchecked: %d", self, num)
            self._numerator = num

    def set_denominator(self, value: Any, *, normalize: bool = True) -> None:
        """Replace the denominator in place.

        ``normalize=False`` skips every check, a zero or negative
        denominator included. Such a value makes comparisons, arithmetic and
        float conversion raise :class:`ContractViolationError` until
        :meth:`reduce` restores the invariants.
        """
        den = _ensure_int(value, name="denominator")
        if normalize:
            self._numerator, self._denominator = _normalize(self._numerator, den)
        else:
            logger.debug("denominator of %r written unchecked: %d", self, den)
            self._denominator = den

    def reduce(self) -> "Ratio":
        """Bring this ratio back to lowest terms in place and return it."""
        self._numerator, self._denominator = _normalize(self._numerator, self._denominator)
        return self

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def _require_valid(self) -> None:
        if self._denominator <= 0:
            raise ContractViolationError(
                f"denominator should be positive, got {self._denominator}"
            )

    # ------------------------------------------------------------------
    # Derived functions
    def sin(self) -> "Ratio":
        return Ratio.from_float(math.sin(float(self)))

    def cos(self) -> "Ratio":
        return Ratio.from_float(math.cos(float(self)))

    def tan(self) -> "Ratio":
        return Ratio.from_float(math.tan(float(self)))

    def exp(self) -> "Ratio":
        """Return ``e`` raised to this value as a :class:`Ratio` approximation."""
        return Ratio.from_float(math.exp(float(self)))

    def ln(self) -> "Ratio":
        """Natural logarithm, computed as ``log(numerator) - log(denominator)``."""
        self._require_valid()
        if self._numerator <= 0:
            raise InvalidArgumentError("logarithm is undefined for non-positive Ratio values")
        return Ratio.from_float(math.log(self._numerator) - math.log(self._denominator))

    # NumPy object arrays look up ``log`` for ``np.log``.
    log = ln

    def log10(self) -> "Ratio":
        self._require_valid()
        if self._numerator <= 0:
            raise InvalidArgumentError("logarithm is undefined for non-positive Ratio values")
        return Ratio.from_float(math.log10(self._numerator) - math.log10(self._denominator))

    def sqrt(self) -> "Ratio":
        """Return the (principal) square root within the available precision."""
        if self._numerator < 0 or self._denominator < 0:
            raise RatioOverflowError("square root is undefined for negative Ratio values")
        self._require_valid()

        num_sqrt = math.isqrt(self._numerator)
        den_sqrt = math.isqrt(self._denominator)
        if num_sqrt * num_sqrt == self._numerator and den_sqrt * den_sqrt == self._denominator:
            # Perfect squares keep the root exact.
            return Ratio(num_sqrt, den_sqrt)

        return Ratio.from_float(math.sqrt(float(self)))

    def invert(self) -> "Ratio":
        """Swap numerator and denominator."""
        if self._numerator == 0:
            raise ZeroDenominatorError("cannot invert a zero Ratio")
        return Ratio(self._denominator, self._numerator)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return convert_ratio_to_float(self)

    def __trunc__(self) -> int:
        self._require_valid()
        if self._numerator < 0:
            return -(-self._numerator // self._denominator)
        return self._numerator // self._denominator

    def __int__(self) -> int:
        return self.__trunc__()

    def __floor__(self) -> int:
        self._require_valid()
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        self._require_valid()
        return -(-self._numerator // self._denominator)

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Ratio({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"({self._numerator}/{self._denominator})"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _coerce_scalar(value: Any) -> "Ratio":
        if isinstance(value, (Ratio, numbers.Real, np.generic)):
            return Ratio.rationalize(value)
        raise TypeError(f"Cannot interpret {type(value)!r} as Ratio")

    def _coerce_operand(self, value: Any) -> Any:
        """Coerce a scalar, or every element of an array, list or tuple."""
        if isinstance(value, (list, tuple)):
            value = np.array(value, dtype=object)
        if isinstance(value, np.ndarray):
            return np.vectorize(self._coerce_scalar, otypes=[object])(value)
        return self._coerce_scalar(value)

    def _elementwise(self, op, *operands: Any) -> Any:
        if any(isinstance(operand, np.ndarray) for operand in operands):
            return np.vectorize(op, otypes=[object])(*operands)
        return op(*operands)

    def _binary_operation(self, other: Any, op):
        self._require_valid()
        return self._elementwise(op, self, self._coerce_operand(other))

    def _reflected_operation(self, other: Any, op):
        self._require_valid()
        return self._elementwise(op, self._coerce_operand(other), self)

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, Ratio):
            if value.denominator != 1:
                raise NonIntegralError("Exponent must be an integer")
            return value.numerator
        if isinstance(value, np.generic):
            return self._coerce_power(value.item())
        if isinstance(value, numbers.Real):
            if not float(value).is_integer():
                raise NonIntegralError("Exponent must be an integer")
            return int(value)
        raise TypeError("Unsupported exponent type")

    # ------------------------------------------------------------------
    # Arithmetic operators
    @staticmethod
    def _add(a: "Ratio", b: "Ratio") -> "Ratio":
        return Ratio(
            a._numerator * b._denominator + b._numerator * a._denominator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _sub(a: "Ratio", b: "Ratio") -> "Ratio":
        return Ratio(
            a._numerator * b._denominator - b._numerator * a._denominator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _mul(a: "Ratio", b: "Ratio") -> "Ratio":
        return Ratio(
            a._numerator * b._numerator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _truediv(a: "Ratio", b: "Ratio") -> "Ratio":
        if b._numerator == 0:
            raise ZeroDenominatorError("division by zero")
        return Ratio(
            a._numerator * b._denominator,
            a._denominator * b._numerator,
        )

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._truediv)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        self._require_valid()
        power = self._coerce_power(exponent)
        if power >= 0:
            return Ratio(self._numerator ** power, self._denominator ** power)
        if self._numerator == 0:
            raise ZeroDenominatorError("0 cannot be raised to a negative power")
        positive = -power
        return Ratio(self._denominator ** positive, self._numerator ** positive)

    def __neg__(self) -> "Ratio":
        self._require_valid()
        return Ratio(-self._numerator, self._denominator)

    def __pos__(self) -> "Ratio":
        return self

    def __abs__(self) -> "Ratio":
        # Elementwise, so a negative denominator written unchecked is
        # repaired; only a zero one is a broken value.
        if self._denominator == 0:
            raise ContractViolationError("denominator should not be 0")
        return Ratio(abs(self._numerator), abs(self._denominator))

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> bool:
        self._require_valid()
        other_ratio = self._coerce_scalar(other)
        return op(
            self._numerator * other_ratio._denominator,
            other_ratio._numerator * self._denominator,
        )

    def __eq__(self, other: Any) -> bool:
        try:
            return self._compare(other, operator.eq)
        except TypeError:
            return False

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Matches int/Fraction hashes for the same exact value.
        return hash(Fraction(self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
        np.sin: lambda a: a.sin(),
        np.cos: lambda a: a.cos(),
        np.tan: lambda a: a.tan(),
        np.exp: lambda a: a.exp(),
        np.log: lambda a: a.ln(),
        np.log10: lambda a: a.log10(),
        np.sqrt: lambda a: a.sqrt(),
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        op = self._UFUNC_DISPATCH.get(ufunc)
        if method != "__call__" or op is None:
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Ratio ufuncs")
        operands = [self._coerce_operand(value) for value in inputs]
        return self._elementwise(op, *operands)


def rationalize(value: NumberLike, max_iterations: Optional[int] = None) -> Ratio:
    """Public helper to convert *value* into :class:`Ratio`."""

    return Ratio.rationalize(value, max_iterations=max_iterations)


__all__ = ["Ratio", "rationalize"]
