"""Lagrange interpolation built on the dual-number algebra."""

from .lagrange import (
    flat_lagrange_basis,
    flat_lagrange_interpolation,
    lagrange_basis,
    lagrange_interpolation,
)
from .lagrange_derivative import LagrangeDerivative

__all__ = [
    "lagrange_basis",
    "lagrange_interpolation",
    "flat_lagrange_basis",
    "flat_lagrange_interpolation",
    "LagrangeDerivative",
]
