"""Utility functions for PolyKit package."""

from .numerics import as_1d_float_array, get_coefficient, power_term
from .validate import validate_coefficients

__all__ = [
    "as_1d_float_array",
    "get_coefficient",
    "power_term",
    "validate_coefficients",
]
