"""Utility functions for DualKit package."""

from .sandbox import get_partial_function
from .validate import (
    validate_derivative_order,
    validate_positive,
    validate_simplex,
)

__all__ = [
    "get_partial_function",
    "validate_derivative_order",
    "validate_positive",
    "validate_simplex",
]
