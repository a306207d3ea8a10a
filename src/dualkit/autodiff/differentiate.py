"""Forward-mode differentiation on top of the dual-number algebra.

The derivative of ``f`` at ``x`` is read off the tangent of ``f(x + ε)``.
Because the seed ``Dual(x, 1)`` may itself be a dual number, composing
:func:`differentiate` produces higher derivatives without a dedicated API.

Example:
--------

First and second derivative of ``x³`` at ``x = 2``:

    >>> from dualkit.algebra import power
    >>> from dualkit.autodiff.differentiate import differentiate
    >>> cube = lambda x: power(x, 3)
    >>> differentiate(cube)(2.0)
    12.0
    >>> differentiate(differentiate(cube))(2.0)
    12.0

Notes:
------

- The function must be written with the operations of
  :mod:`dualkit.algebra` (or the ``Num`` operators). Native ``math``/NumPy
  calls on :func:`~dualkit.algebra.real_part` values silently drop the
  tangent and return a derivative of zero.
- Nested calls share a single infinitesimal per level; a function that
  differentiates with respect to a variable it also closes over is not
  distinguished from a plain higher derivative.
"""

from __future__ import annotations

from typing import Callable

from dualkit.algebra.num import (
    Dual,
    Num,
    NumLike,
    Scalar,
    promote,
    real_part,
)
from dualkit.utils.validate import validate_derivative_order

__all__ = [
    "differentiate",
    "DualDerivative",
]


def differentiate(
    function: Callable[[Num], NumLike],
) -> Callable[[NumLike], float | Num]:
    """Returns the derivative function of ``function``.

    Args:
        function: Scalar function built from ``Num`` operations.

    Returns:
        A callable ``g(x)`` evaluating ``function'`` at ``x``. The result is a
        float when ``x`` is a plain number, and a ``Num`` when ``x`` carries
        tangents of an enclosing differentiation.
    """

    def derivative(x: NumLike) -> float | Num:
        _, tangent = promote(function(Dual(x, 1.0)))
        if isinstance(tangent, Scalar):
            return tangent.value
        return tangent

    return derivative


class DualDerivative:
    """DerivativeKit engine for forward-mode dual-number differentiation.

    Supports scalar functions written with :mod:`dualkit.algebra` operations.
    """

    def __init__(self, function: Callable[[Num], NumLike], x0: float):
        """Initializes the engine with a target function and evaluation point."""
        self.function = function
        self.x0 = float(x0)

    def differentiate(self, *, order: int = 1) -> float:
        """Computes the k-th derivative by nesting dual numbers ``order`` times.

        Args:
            order: Derivative order (>= 0). ``0`` evaluates the function.

        Returns:
            Derivative value as a float.

        Raises:
            ValueError: If ``order`` is negative or not an integer.
        """
        g = self.function
        for _ in range(validate_derivative_order(order)):
            g = differentiate(g)
        return real_part(g(self.x0))
