"""Provides the PolynomialFunction class.

A polynomial is defined by its coefficients, lowest power first, so that
``coefficients[i]`` multiplies ``x**i``. The value and the first two
derivatives are computed from closed-form expressions:

* value: ``c_n * x^n + ... + c_1 * x + c_0``
* first derivative: ``n * c_n * x^(n-1) + ... + 2 * c_2 * x + c_1``
* second derivative: ``n * (n-1) * c_n * x^(n-2) + ... + 3 * 2 * c_3 * x + 2 * c_2``

Sums are accumulated from the lowest to the highest power.

Typical usage example:

>>> from polykit.polynomial_function import PolynomialFunction
>>>
>>> p = PolynomialFunction([1.0, -2.0, 3.0, 4.0])  # 4x^3 + 3x^2 - 2x + 1
>>> p.value(2.0)
41.0
>>> p.first_derivative(2.0)
58.0
>>> p.second_derivative(2.0)
54.0
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np
from numpy.typing import ArrayLike

from polykit.logger import polykit_logger
from polykit.utils.numerics import get_coefficient, power_term
from polykit.utils.types import FloatArray, ScalarOrArray
from polykit.utils.validate import validate_coefficients

__all__ = ["PolynomialFunction"]

_STATE_KEY = "coefficients"


def _as_output(result: Any) -> ScalarOrArray:
    """Returns a Python float for scalar results and a float array otherwise."""
    if np.ndim(result) == 0:
        return float(result)
    return np.asarray(result, dtype=float)


class PolynomialFunction:
    """Polynomial in one real variable with closed-form derivatives.

    The coefficients are copied on construction and stored read-only, so an
    instance never changes and can be shared between threads freely.

    The number of coefficients is not checked up front. An empty
    polynomial can be built but raises ``IndexError`` from :meth:`value`;
    :meth:`first_derivative` needs at least two coefficients and
    :meth:`second_derivative` at least three. In particular the first
    derivative of a constant raises instead of returning ``0.0``.

    Every evaluation accepts a scalar or an array of points. Scalars give a
    ``float``, arrays give a float array of the same shape.

    Example:
        >>> import numpy as np
        >>> p = PolynomialFunction([0.0, 0.0, 1.0])  # x^2
        >>> p(4.0)
        16.0
        >>> p.first_derivative(np.array([1.0, 2.0]))
        array([2., 4.])
    """

    def __init__(self, coefficients: ArrayLike) -> None:
        """Initialise with the polynomial coefficients.

        Args:
            coefficients: Ordered 1D sequence of reals; index ``0`` is the
                constant term and index ``N`` the coefficient of ``x^N``.

        Raises:
            ValueError: If ``coefficients`` is not one-dimensional.
        """
        self._coefficients = validate_coefficients(coefficients)

    @property
    def coefficients(self) -> FloatArray:
        """Read-only array of the coefficients, lowest power first."""
        return self._coefficients

    @property
    def degree(self) -> int:
        """Highest power with a stored coefficient (``-1`` when empty)."""
        return self._coefficients.size - 1

    def value(self, x: ArrayLike) -> ScalarOrArray:
        """Computes the value of the polynomial.

        Args:
            x: Point or points at which to evaluate.

        Returns:
            ``c_0 + c_1 * x + ... + c_n * x^n``.

        Raises:
            IndexError: If the polynomial has no coefficients.
        """
        c = self._coefficients
        points = np.asarray(x, dtype=float)

        result = np.full(points.shape, get_coefficient(c, 0))
        for i in range(1, c.size):
            result = result + c[i] * power_term(points, i)

        return _as_output(result)

    def first_derivative(self, x: ArrayLike) -> ScalarOrArray:
        """Computes the first derivative of the polynomial.

        Args:
            x: Point or points at which to evaluate.

        Returns:
            ``c_1 + 2 * c_2 * x + ... + n * c_n * x^(n-1)``.

        Raises:
            IndexError: If the polynomial has fewer than two coefficients.
        """
        c = self._coefficients
        points = np.asarray(x, dtype=float)

        result = np.full(points.shape, get_coefficient(c, 1))
        for i in range(2, c.size):
            result = result + i * c[i] * power_term(points, i - 1)

        return _as_output(result)

    def second_derivative(self, x: ArrayLike) -> ScalarOrArray:
        """Computes the second derivative of the polynomial.

        Args:
            x: Point or points at which to evaluate.

        Returns:
            ``2 * c_2 + 3 * 2 * c_3 * x + ... + n * (n-1) * c_n * x^(n-2)``.

        Raises:
            IndexError: If the polynomial has fewer than three coefficients.
        """
        c = self._coefficients
        points = np.asarray(x, dtype=float)

        result = np.full(points.shape, 2.0 * get_coefficient(c, 2))
        for i in range(3, c.size):
            result = result + i * (i - 1) * c[i] * power_term(points, i - 2)

        return _as_output(result)

    def differentiate(self, x: ArrayLike, order: int = 1) -> ScalarOrArray:
        """Evaluates the derivative of the given order.

        Args:
            x: Point or points at which to evaluate.
            order: ``0`` for the value, ``1`` or ``2`` for the derivatives.

        Returns:
            The requested derivative at ``x``.

        Raises:
            ValueError: If ``order`` is not 0, 1 or 2.
            IndexError: If the polynomial has too few coefficients for ``order``.
        """
        match order:
            case 0:
                return self.value(x)
            case 1:
                return self.first_derivative(x)
            case 2:
                return self.second_derivative(x)
            case _:
                raise ValueError(f"order must be 0, 1 or 2; got {order!r}.")

    def __call__(self, x: ArrayLike) -> ScalarOrArray:
        """Evaluates the polynomial at ``x``; same as :meth:`value`."""
        return self.value(x)

    def to_dict(self) -> dict[str, list[float]]:
        """Returns the coefficients as a plain dict, order preserved."""
        return {_STATE_KEY: self._coefficients.tolist()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PolynomialFunction:
        """Rebuilds a polynomial from the output of :meth:`to_dict`.

        Args:
            data: Mapping with a ``"coefficients"`` entry. Other keys are
                ignored with a warning.

        Returns:
            A new :class:`PolynomialFunction`.

        Raises:
            ValueError: If ``data`` has no ``"coefficients"`` entry.
        """
        if _STATE_KEY not in data:
            raise ValueError(f"data must contain a {_STATE_KEY!r} entry.")

        extra = sorted(str(k) for k in data if k != _STATE_KEY)
        if extra:
            polykit_logger.warning(
                "PolynomialFunction.from_dict ignoring unknown keys: %s.",
                ", ".join(extra),
            )
        return cls(data[_STATE_KEY])

    def __getstate__(self) -> dict[str, list[float]]:
        return self.to_dict()

    def __setstate__(self, state: Mapping[str, Any]) -> None:
        self._coefficients = validate_coefficients(state[_STATE_KEY])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._coefficients.tolist()!r})"
