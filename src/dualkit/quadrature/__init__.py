"""Numerical quadrature."""

from .simpson import simpson_integral

__all__ = ["simpson_integral"]
