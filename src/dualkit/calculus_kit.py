"""Provides the CalculusKit class.

A light wrapper around the calculus helpers that exposes a simple API
for gradient and Hessian computations with dual numbers.

Typical usage examples:

>>> import numpy as np
>>> from dualkit.algebra import sin
>>> from dualkit.calculus_kit import CalculusKit
>>>
>>> def model(theta):
...     # scalar-valued function: f(θ) = sin(θ0) * θ1
...     return sin(theta[0]) * theta[1]
>>>
>>> calc = CalculusKit(model, x0=np.array([0.5, 2.0]))
>>> grad = calc.gradient()
>>> hess = calc.hessian()
"""

from collections.abc import Callable
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dualkit.algebra.num import Num, NumLike

from .calculus import build_gradient, build_hessian


class CalculusKit:
    """Provides access to gradient and Hessian tensors."""

    def __init__(
        self,
        function: Callable[[list[Num]], NumLike],
        x0: Sequence[float] | np.ndarray,
    ):
        """Initialise with function and expansion point.

        Args:
            function: Maps a list of ``Num`` parameters to a scalar ``Num``.
            x0: Point at which to evaluate derivatives (shape (P,)).
        """
        self.function = function
        self.x0 = np.asarray(x0, dtype=float)

    def gradient(self) -> NDArray[np.floating]:
        """Returns the gradient of a scalar-valued function."""
        return build_gradient(self.function, self.x0)

    def hessian(self) -> NDArray[np.floating]:
        """Returns the Hessian of a scalar-valued function."""
        return build_hessian(self.function, self.x0)
