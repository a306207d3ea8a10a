"""Contains functions used in constructing the Hessian of a scalar-valued function."""

from collections.abc import Callable
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dualkit.algebra.num import Dual, Num, NumLike, as_num, real_part
from dualkit.autodiff.differentiate import differentiate
from dualkit.utils.sandbox import get_partial_function

__all__ = [
    "build_hessian",
]


def build_hessian(
    function: Callable[[list[Num]], NumLike],
    theta0: Sequence[float] | np.ndarray,
) -> NDArray[np.floating]:
    """Returns the full Hessian of a scalar-valued function.

    Entry ``(i, j)`` is obtained by differentiating, with respect to
    parameter ``j``, the dual-number derivative with respect to parameter
    ``i``. Only the upper triangle is computed; the result is symmetric by
    construction.

    Args:
        function: The function to be differentiated. Receives a list of
            ``Num`` parameters and must be written with ``Num`` operations.
        theta0: The parameter vector at which the Hessian is evaluated.

    Returns:
        Array of shape ``(p, p)``.

    Raises:
        ValueError: If ``theta0`` is empty.
        FloatingPointError: If non-finite values are encountered.
    """
    theta0 = np.asarray(theta0, dtype=float).reshape(-1)
    if theta0.size == 0:
        raise ValueError("theta0 must be a non-empty 1D array.")

    p = theta0.size
    hess = np.empty((p, p), dtype=float)
    for i in range(p):
        for j in range(i, p):
            hess[i, j] = hess[j, i] = _hessian_entry(function, theta0, i, j)

    if not np.isfinite(hess).all():
        raise FloatingPointError("Non-finite values encountered in build_hessian.")
    return hess


def _hessian_entry(
        function: Callable[[list[Num]], NumLike],
        theta0: np.ndarray,
        i: int,
        j: int,
) -> float:
    """Returns the second partial derivative with respect to parameters ``i`` and ``j``.

    The outer derivative perturbs parameter ``j``; inside it, the inner
    derivative seeds parameter ``i`` one tower level higher. Parameters that
    already carry the outer perturbation are wrapped as ``Dual(value, 0)`` so
    they stay constant at the inner level instead of being mistaken for the
    inner seed.
    """

    def first_partial(s: NumLike) -> float | Num:
        shifted = [as_num(t) for t in theta0]
        shifted[j] = as_num(s)
        fixed = [
            Dual(v, 0.0) if k != i and isinstance(v, Dual) else v
            for k, v in enumerate(shifted)
        ]
        return differentiate(get_partial_function(function, i, fixed))(shifted[i])

    return real_part(differentiate(first_partial)(float(theta0[j])))
