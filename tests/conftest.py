"""Pytest configuration file with shared polynomial fixtures."""

import numpy as np
import pytest

from polykit.polynomial_function import PolynomialFunction


@pytest.fixture
def rng():
    """Seeded random generator so property checks are reproducible."""
    return np.random.default_rng(20040129)


@pytest.fixture
def cubic():
    """Return ``4x^3 + 3x^2 - 2x + 1``."""
    return PolynomialFunction([1.0, -2.0, 3.0, 4.0])
