"""Lagrange interpolation over the dual-number algebra.

Interpolants are evaluated entirely through :mod:`dualkit.algebra`, so the
evaluation point, the nodes and the node values may all be dual numbers. In
particular, an interpolant can be passed straight to
:func:`~dualkit.autodiff.differentiate`.

Two families are provided:

* :func:`lagrange_interpolation` uses the textbook basis
  ``L_i(x) = prod_{j != i} (x - x_j) / (x_i - x_j)``. Each evaluation costs
  ``O(n²)``; nothing is cached.
* :func:`flat_lagrange_interpolation` multiplies every basis polynomial by a
  linear factor ``(x - x*) / (x_i - x*)``. For ``i = 0`` the anchor ``x*`` is
  chosen so the basis has zero slope at the first node; for ``i != 0`` the
  anchor is ``x_0`` itself. The resulting interpolant still passes through
  every node but leaves the first node flat, which tames overshoot at that
  boundary.

Coincident nodes are not rejected; they divide by zero and surface as
``inf``/``nan`` in the result.

Example:
    >>> from dualkit.interpolation.lagrange import lagrange_interpolation
    >>> p = lagrange_interpolation([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    >>> float(p(1.5))
    2.25
"""

from __future__ import annotations

from typing import Callable, Sequence

from dualkit.algebra.num import (
    Num,
    NumLike,
    add,
    divide,
    multiply,
    num_prod,
    num_sum,
    subtract,
)

__all__ = [
    "lagrange_basis",
    "lagrange_interpolation",
    "flat_lagrange_basis",
    "flat_lagrange_interpolation",
]


def lagrange_basis(xs: Sequence[NumLike], i: int) -> Callable[[NumLike], Num]:
    """Returns the ``i``-th Lagrange basis polynomial over the nodes ``xs``.

    Args:
        xs: Interpolation nodes.
        i: Index of the node at which the basis polynomial equals one.

    Returns:
        Callable evaluating ``L_i`` at a point.
    """
    xs = list(xs)
    xi = xs[i]

    def basis(x: NumLike) -> Num:
        return num_prod(
            divide(subtract(x, xj), subtract(xi, xj))
            for j, xj in enumerate(xs)
            if j != i
        )

    return basis


def lagrange_interpolation(
    xs: Sequence[NumLike],
    ys: Sequence[NumLike],
) -> Callable[[NumLike], Num]:
    """Returns the Lagrange interpolating polynomial through ``(xs, ys)``.

    Args:
        xs: Distinct interpolation nodes.
        ys: Values at the nodes. One term is summed per entry of ``ys``.

    Returns:
        Callable ``x ↦ sum_i ys[i] * L_i(x)``.
    """
    xs = list(xs)
    ys = list(ys)
    bases = [lagrange_basis(xs, i) for i in range(len(ys))]

    def interpolant(x: NumLike) -> Num:
        return num_sum(multiply(y, li(x)) for y, li in zip(ys, bases))

    return interpolant


def flat_lagrange_basis(xs: Sequence[NumLike], i: int) -> Callable[[NumLike], Num]:
    """Returns the ``i``-th flattened Lagrange basis polynomial.

    ``l_i(x) = L_i(x) * (x - x*) / (x_i - x*)`` with the anchor ``x*`` from
    :func:`_flat_anchor`.

    Args:
        xs: Interpolation nodes; at least two distinct values.
        i: Index of the node at which the basis polynomial equals one.

    Returns:
        Callable evaluating ``l_i`` at a point.
    """
    xs = list(xs)
    xi = xs[i]
    anchor = _flat_anchor(xs, i)
    li = lagrange_basis(xs, i)

    def basis(x: NumLike) -> Num:
        return multiply(li(x), divide(subtract(x, anchor), subtract(xi, anchor)))

    return basis


def flat_lagrange_interpolation(
    xs: Sequence[NumLike],
    ys: Sequence[NumLike],
) -> Callable[[NumLike], Num]:
    """Returns the interpolant through ``(xs, ys)`` built from flattened bases.

    Args:
        xs: Distinct interpolation nodes; at least two.
        ys: Values at the nodes.

    Returns:
        Callable ``x ↦ sum_i ys[i] * l_i(x)``.
    """
    xs = list(xs)
    ys = list(ys)
    bases = [flat_lagrange_basis(xs, i) for i in range(len(ys))]

    def interpolant(x: NumLike) -> Num:
        return num_sum(multiply(y, li(x)) for y, li in zip(ys, bases))

    return interpolant


def _flat_anchor(xs: list[NumLike], i: int) -> NumLike:
    """Returns the anchor ``x*`` of the linear factor of basis ``i``.

    For ``i = 0`` the anchor is ``x_0 + N / D`` where
    ``N = prod_{j != 0} (x_0 - x_j)`` and
    ``D = sum_{j != 0} prod_{k != 0, j} (x_0 - x_k)``; ``D / N`` is the slope of
    ``L_0`` at ``x_0``, which the linear factor cancels. Every other basis is
    anchored at ``x_0``.
    """
    x0 = xs[0]
    if i != 0:
        return x0

    n = num_prod(subtract(x0, xj) for xj in xs[1:])
    d = num_sum(
        num_prod(subtract(x0, xk) for k, xk in enumerate(xs) if k not in (0, j))
        for j in range(1, len(xs))
    )
    return add(x0, divide(n, d))
