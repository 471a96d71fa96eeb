"""Provides all polykit functions."""

from importlib.metadata import PackageNotFoundError, version

from polykit.polynomial_function import PolynomialFunction
from polykit.univariate import UnivariateRealFunction

try:
    __version__ = version("polykit")
except PackageNotFoundError:
    pass

__all__ = [
    "PolynomialFunction",
    "UnivariateRealFunction",
]
