"""Validation utilities for DualKit."""

from __future__ import annotations

import numbers
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from dualkit.logger import dualkit_logger

__all__ = [
    "validate_derivative_order",
    "validate_positive",
    "validate_simplex",
]


def validate_derivative_order(order: int) -> int:
    """Checks that ``order`` is a non-negative integer.

    Args:
        order: Requested derivative order.

    Returns:
        The order as a Python int.

    Raises:
        ValueError: If ``order`` is negative, boolean, or not an integer.
    """
    if isinstance(order, bool) or not isinstance(order, numbers.Integral) or order < 0:
        raise ValueError(f"order must be a non-negative integer; got {order!r}.")
    return int(order)


def validate_positive(value: float, name: str) -> float:
    """Checks that ``value`` is a strictly positive real number.

    Args:
        value: Value to check.
        name: Name used in error messages.

    Returns:
        The value as a float.

    Raises:
        ValueError: If ``value`` is not strictly positive.
    """
    value = float(value)
    if not value > 0:
        raise ValueError(f"{name} must be positive; got {value!r}.")
    return value


def validate_simplex(simplex: Sequence[ArrayLike]) -> list[NDArray[np.float64]]:
    """Converts an initial simplex into a list of 1D float arrays.

    At least three points are required, i.e. the search space must have
    dimension two or more. An affinely dependent simplex is accepted but
    reported through ``dualkit_logger``, since Nelder-Mead cannot leave the
    subspace it spans.

    Args:
        simplex: Sequence of points, each a real number or 1D array-like.

    Returns:
        List of points as 1D NumPy arrays.

    Raises:
        ValueError: If fewer than three points are given, or the points do not
            share one 1D shape.
    """
    if len(simplex) < 3:
        raise ValueError(
            f"simplex dimension must be at least 2 (3 or more points); got {len(simplex)} points."
        )

    points = [np.atleast_1d(np.asarray(p, dtype=float)) for p in simplex]
    shape = points[0].shape
    if len(shape) != 1 or any(p.shape != shape for p in points):
        raise ValueError(
            f"simplex points must be 1D and share one shape; got {[p.shape for p in points]}."
        )

    edges = np.stack([p - points[0] for p in points[1:]])
    if np.linalg.matrix_rank(edges) < min(shape[0], len(points) - 1):
        dualkit_logger.warning(
            "Initial simplex is degenerate (affinely dependent points); "
            "Nelder-Mead will only search the subspace it spans."
        )
    return points
