"""Plain vector arithmetic used by the simplex optimizer.

Points are real numbers or 1D NumPy arrays; none of these helpers touch dual
numbers.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "vector_sum",
    "centroid",
    "mean",
    "variance",
    "std_dev",
    "lerp",
]


def vector_sum(*points: ArrayLike) -> NDArray[np.float64]:
    """Returns the component-wise sum of one or more points.

    Raises:
        ValueError: If no points are given.
    """
    if len(points) == 0:
        raise ValueError("cannot sum 0 points")
    total = np.array(points[0], dtype=float)
    for p in points[1:]:
        total = total + np.asarray(p, dtype=float)
    return total


def centroid(*points: ArrayLike) -> NDArray[np.float64]:
    """Returns the arithmetic mean of the given points."""
    return vector_sum(*points) / len(points)


def mean(*xs: float) -> float:
    return float(np.mean(xs))


def variance(*xs: float) -> float:
    """Population variance (mean squared deviation from the mean)."""
    mu = mean(*xs)
    return mean(*((x - mu) ** 2 for x in xs))


def std_dev(*xs: float) -> float:
    return float(np.sqrt(variance(*xs)))


def lerp(x1: ArrayLike, x2: ArrayLike, n: int) -> list:
    """Returns ``n + 2`` evenly spaced points from ``x1`` to ``x2`` inclusive.

    Interior points are built by repeatedly adding the fixed step
    ``(x2 - x1) / (n + 1)`` to the previous point, so they may drift from the
    exact grid by a few ulps; the last point is ``x2`` itself.

    Args:
        x1: First endpoint, a real number or 1D array-like.
        x2: Second endpoint, same shape as ``x1``.
        n: Number of interior points.

    Returns:
        List of floats for scalar endpoints, or of 1D arrays for vector
        endpoints.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative; got {n}.")

    start = np.array(x1, dtype=float)
    stop = np.array(x2, dtype=float)
    step = (stop - start) / (n + 1)

    out = [start]
    for _ in range(n):
        out.append(out[-1] + step)
    out.append(stop)

    if start.ndim == 0:
        return [float(x) for x in out]
    return out
