"""Structural interface for real functions of one real variable."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from polykit.utils.types import ScalarOrArray


@runtime_checkable
class UnivariateRealFunction(Protocol):
    """Protocol for objects that map a real number to a real number.

    Any object with a ``value(x)`` method satisfies it; no registration or
    subclassing is needed. It carries no runtime behavior apart from
    ``isinstance`` checks.
    """
    def value(self, x: ScalarOrArray) -> ScalarOrArray:
        """Compute the function value at ``x``."""
        ...
