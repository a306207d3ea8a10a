"""Helpers for treating coordinate paths as functions of time."""

from __future__ import annotations

from typing import Any, Callable

from dualkit.algebra.num import Num, NumLike, Scalar
from dualkit.autodiff.differentiate import differentiate

__all__ = ["compose", "local_tuple"]


def compose(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Returns ``x ↦ f(g(x))``."""
    return lambda x: f(g(x))


def local_tuple(
    path: Callable[[Num], NumLike],
) -> Callable[[NumLike], tuple[NumLike, float | Num, float | Num]]:
    """Turns a coordinate path into a function from time to its local tuple.

    The local tuple at time ``t`` is ``(t, q(t), Dq(t))``: the time, the
    coordinate, and the velocity obtained by differentiating the path.

    Args:
        path: Coordinate path ``q(t)`` written with ``Num`` operations.

    Returns:
        Callable mapping ``t`` to ``(t, q(t), Dq(t))``. Scalar coordinates are
        returned as floats.
    """
    velocity = differentiate(path)

    def at(t: NumLike):
        q = path(t)
        if isinstance(q, Scalar):
            q = q.value
        return t, q, velocity(t)

    return at
