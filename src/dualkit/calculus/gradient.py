"""Contains functions used to construct the gradient of scalar-valued functions."""

from collections.abc import Callable
from typing import Sequence

import numpy as np

from dualkit.algebra.num import Num, NumLike
from dualkit.derivative_kit import DerivativeKit
from dualkit.utils.sandbox import get_partial_function


def build_gradient(
    function: Callable[[list[Num]], NumLike],
    theta0: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Returns the gradient of a scalar-valued function.

    Each component seeds one coordinate with a dual number while the others
    are held fixed, so the result is exact up to rounding.

    Args:
        function: The function to be differentiated. Receives a list of
            ``Num`` parameters and must be written with ``Num`` operations.
        theta0: The parameter vector at which the gradient is evaluated.

    Returns:
        A 1D array representing the gradient.

    Raises:
        ValueError: If ``theta0`` is empty.
        FloatingPointError: If any gradient component is not finite.
    """
    theta0 = np.asarray(theta0, dtype=float).reshape(-1)
    if theta0.size == 0:
        raise ValueError("theta0 must be a non-empty 1D array.")

    grad = np.asarray(
        [_grad_component(function, theta0, i) for i in range(theta0.size)],
        dtype=float,
    )
    if not np.isfinite(grad).all():
        raise FloatingPointError("Non-finite values encountered in build_gradient.")
    return grad


def _grad_component(
        function: Callable[[list[Num]], NumLike],
        theta0: np.ndarray,
        i: int,
) -> float:
    """Returns one entry of the gradient for a scalar-valued function.

    Args:
        function: A function that returns a single value.
        theta0: The parameter values where the derivative is evaluated.
        i: The index of the parameter being varied.

    Returns:
        The partial derivative with respect to parameter ``i``.
    """
    partial_vec = get_partial_function(function, i, theta0)
    kit = DerivativeKit(partial_vec, float(theta0[i]))
    return kit.differentiate(method="dual", order=1)
