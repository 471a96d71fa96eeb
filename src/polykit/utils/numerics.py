"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from polykit.utils.types import FloatArray

__all__ = [
    "as_1d_float_array",
    "get_coefficient",
    "power_term",
]


def as_1d_float_array(
    x: ArrayLike,
    *,
    name: str = "x",
    copy: bool = False,
) -> FloatArray:
    """Convert input to a 1D float array.

    Performs a minimal shape check (must be 1D) and ensures a float64
    dtype. Empty input is allowed.

    Args:
        x: Input array-like.
        name: Name used in error messages.
        copy: If True, the result never shares memory with ``x``.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        ValueError: If the converted array is not 1D.
    """
    arr = np.array(x, dtype=np.float64, copy=True) if copy else np.asarray(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr


def get_coefficient(coefficients: FloatArray, index: int) -> np.float64:
    """Return ``coefficients[index]`` with a clear bounds error.

    Args:
        coefficients: 1D coefficient array, lowest power first.
        index: Non-negative power whose coefficient is requested.

    Returns:
        The stored coefficient.

    Raises:
        IndexError: If ``index`` is beyond the number of coefficients.
    """
    n = coefficients.size
    if index < 0 or index >= n:
        raise IndexError(
            f"coefficient index {index} out of bounds for {n} coefficient(s)"
        )
    return coefficients[index]


def power_term(x: FloatArray, exponent: int) -> FloatArray | np.float64:
    """Raises ``x`` to a non-negative integer power with the general power routine.

    Results follow the platform ``pow`` rounding of ``numpy.power``, not
    repeated multiplication.
    """
    return np.power(x, int(exponent))
