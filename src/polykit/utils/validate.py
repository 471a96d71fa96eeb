"""Validation utilities for PolynomialFunction."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from polykit.logger import polykit_logger
from polykit.utils.numerics import as_1d_float_array
from polykit.utils.types import FloatArray

__all__ = [
    "validate_coefficients",
]


def validate_coefficients(coefficients: ArrayLike) -> FloatArray:
    """Validates and freezes a polynomial coefficient sequence.

    Policy:
      - Must be one-dimensional. The number of coefficients is not checked,
        an empty sequence is accepted and only fails once a coefficient is
        read.
      - Always copied, so later changes to ``coefficients`` are not seen by
        the returned array.
      - Non-finite values are accepted but reported with a warning.

    Args:
        coefficients: Ordered coefficients, index ``i`` multiplying ``x**i``.

    Returns:
        A read-only float64 copy of ``coefficients``.

    Raises:
        ValueError: If ``coefficients`` is not one-dimensional.
    """
    arr = as_1d_float_array(coefficients, name="coefficients", copy=True)

    if not np.all(np.isfinite(arr)):
        bad = np.flatnonzero(~np.isfinite(arr)).tolist()
        polykit_logger.warning(
            "coefficients contain non-finite values at indices %s.", bad
        )

    arr.setflags(write=False)
    return arr
