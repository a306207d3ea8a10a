"""Provides the LagrangeDerivative class.

Estimates derivatives of plain real functions (NumPy ufuncs, black-box
models) that cannot be evaluated on dual numbers. The function is sampled on
a small equally spaced grid centred on ``x0``; the Lagrange polynomial through
the samples is then differentiated exactly with dual numbers.

Examples:
---------

    >>> import numpy as np
    >>> from dualkit.interpolation.lagrange_derivative import LagrangeDerivative
    >>> d = LagrangeDerivative(np.sin, x0=0.7)
    >>> bool(np.isclose(d.differentiate(order=1), np.cos(0.7), rtol=1e-8))
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

from dualkit.algebra.num import real_part
from dualkit.autodiff.differentiate import DualDerivative
from dualkit.interpolation.lagrange import lagrange_interpolation
from dualkit.utils.validate import validate_derivative_order, validate_positive

__all__ = ["LagrangeDerivative"]


class LagrangeDerivative:
    """Computes derivatives by differentiating a local Lagrange interpolant.

    With ``num_points`` nodes the interpolant is exact for polynomials of
    degree ``num_points - 1``; its derivatives at the centre node reproduce
    the usual central finite-difference stencils.

    Attributes:
        function: The function to differentiate. Must accept a single float
            and return a real number.
        x0: The point at which the derivative is evaluated.
    """

    def __init__(self, function: Callable[[float], Any], x0: float) -> None:
        """Initialises the class based on function and central value.

        Args:
            function: The function to differentiate.
            x0: The point at which the derivative is evaluated.
        """
        self.function = function
        self.x0 = float(x0)

    def nodes(self, stepsize: float, num_points: int) -> np.ndarray:
        """Returns ``num_points`` equally spaced nodes centred on ``x0``."""
        offsets = np.arange(num_points, dtype=float) - (num_points - 1) / 2.0
        return self.x0 + stepsize * offsets

    def differentiate(
        self,
        *,
        order: int = 1,
        stepsize: float = 0.01,
        num_points: int = 5,
    ) -> float:
        """Computes the derivative of the sampled interpolant at ``x0``.

        Args:
            order: The order of the derivative to compute. Default is 1.
            stepsize: Spacing between interpolation nodes. Default is 0.01.
            num_points: Number of interpolation nodes. Must exceed ``order``.
                Default is 5.

        Returns:
            The estimated derivative as a float.

        Raises:
            ValueError: If ``stepsize`` is not positive, ``num_points < 2``, or
                ``num_points <= order``.
        """
        order = validate_derivative_order(order)
        stepsize = validate_positive(stepsize, "stepsize")
        if num_points < 2:
            raise ValueError(f"num_points must be at least 2; got {num_points}.")
        if num_points <= order:
            raise ValueError(
                f"num_points={num_points} cannot resolve a derivative of order {order}; "
                f"use at least {order + 1} points."
            )

        xs = [float(x) for x in self.nodes(stepsize, num_points)]
        ys = [real_part(self.function(x)) for x in xs]
        interpolant = lagrange_interpolation(xs, ys)
        return DualDerivative(interpolant, self.x0).differentiate(order=order)
