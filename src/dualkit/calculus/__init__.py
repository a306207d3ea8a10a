"""Calculus utilities.

Provides constructors for gradient and Hessian computations.
"""

from .gradient import build_gradient
from .hessian import build_hessian

__all__ = ["build_gradient", "build_hessian"]
