"""Fixed-step composite Simpson's rule.

The interval is split into ``ceil((x1 - x0) / step)`` equal panels, so the
requested step is an upper bound on the panel width. There is no adaptive
refinement and no error estimate.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from dualkit.algebra.num import NumLike, real_part
from dualkit.utils.validate import validate_positive

__all__ = ["simpson_integral"]


def simpson_integral(
    f: Callable[[float], NumLike],
    x0: float,
    x1: float,
    step: float = 0.1,
) -> float:
    """Integrates ``f`` over ``[x0, x1]`` with the composite Simpson's rule.

    The integral is signed: swapping the bounds flips the sign of the result.
    Each panel ``[a, b]`` contributes ``(b - a) / 6 * (f(a) + 4 f(m) + f(b))``
    with ``m`` the panel midpoint, which is exact for cubic polynomials.

    Args:
        f: Real-valued integrand. ``Num`` return values are read through
            :func:`~dualkit.algebra.real_part`.
        x0: Lower bound.
        x1: Upper bound.
        step: Maximum panel width. Default is 0.1.

    Returns:
        Approximation of the integral.

    Raises:
        ValueError: If ``step`` is not positive.
    """
    step = validate_positive(step, "step")
    if x1 < x0:
        return -simpson_integral(f, x1, x0, step)

    n_steps = math.ceil((x1 - x0) / step)
    if n_steps == 0:
        return 0.0
    st = (x1 - x0) / n_steps

    total = 0.0
    for i in range(n_steps):
        a = x0 + i * st
        b = a + st
        h = (a + b) / 2
        total += (b - a) / 6 * (real_part(f(a)) + 4 * real_part(f(h)) + real_part(f(b)))
    return total
