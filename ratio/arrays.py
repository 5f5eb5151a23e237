"""NumPy object arrays holding :class:`~ratio.Ratio` values."""
from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import numpy as np

from .config import DEFAULT_ITERATIONS
from .rational import Ratio


def _converter(max_iterations: int):
    def convert(item: Any) -> Ratio:
        # Plain floats take the caller's budget; ratios are checked, not copied.
        if isinstance(item, (float, np.floating)):
            return Ratio.from_float(item, max_iterations)
        return Ratio.rationalize(item, max_iterations)

    return np.vectorize(convert, otypes=[object])


def as_ratio_array(
    values: Any,
    *,
    max_iterations: Optional[int] = None,
    copy: bool = True,
) -> np.ndarray:
    """Return an object array of :class:`Ratio` with the shape of *values*.

    Floats are approximated with *max_iterations* steps (``DEFAULT_ITERATIONS``
    when omitted); integers and fractions are exact. Ratios left broken by an
    unchecked write raise :class:`~ratio.errors.ContractViolationError`.

    With ``copy=False`` an object array passed in is converted in place and
    returned itself.
    """
    if max_iterations is None:
        max_iterations = DEFAULT_ITERATIONS
    if not isinstance(values, (np.ndarray, list, tuple)):
        values = list(values)

    convert = _converter(max_iterations)
    if copy:
        return convert(np.array(values, dtype=object))

    array = np.asarray(values, dtype=object)
    array[...] = convert(array)
    return array


def zeros(shape: Union[int, Tuple[int, ...]]) -> np.ndarray:
    """Return an array of *shape* holding distinct zero ratios.

    Every cell gets its own instance, so an in-place write through
    :meth:`Ratio.set_numerator` touches a single cell.
    """
    array = np.empty(shape, dtype=object)
    for index in np.ndindex(array.shape):
        array[index] = Ratio()
    return array


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""
    return zeros(np.shape(values))


__all__ = ["as_ratio_array", "zeros", "zeros_like"]
