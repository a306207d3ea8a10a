"""Nelder-Mead downhill simplex method.

Minimizes a real-valued function of several variables without derivatives.
The objective is called with the coordinates spread as positional arguments,
``f(*point)``, and may return a plain real or a ``Num`` (its primal value is
used).

Typical usage examples:

>>> import numpy as np
>>> from dualkit.optimize.nelder_mead import minimize
>>>
>>> def bowl(x, y):
...     return (x - 1.0) ** 2 + (y - 2.0) ** 2
>>>
>>> x_min = minimize(bowl, [[0.0, 0.0], [1.0, 0.0], [0.0, 1.5]])
>>> bool(np.allclose(x_min, [1.0, 2.0], atol=1e-5))
True

Options are passed either as a :class:`NelderMeadConfig` or as a mapping of
its keyword names:

>>> x_min, info = minimize(
...     bowl,
...     [[0.0, 0.0], [1.0, 0.0], [0.0, 1.5]],
...     {"epsilon": 1e-8, "max_iter": 500},
...     return_info=True,
... )
>>> info["converged"]
True
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from dualkit.algebra.num import NumLike, real_part
from dualkit.logger import dualkit_logger
from dualkit.optimize.nelder_mead_config import NelderMeadConfig
from dualkit.optimize.vectors import centroid, std_dev
from dualkit.utils.validate import validate_simplex

__all__ = [
    "Vertex",
    "minimize",
    "axis_simplex",
]


class Vertex(NamedTuple):
    """A simplex vertex and the objective value at it."""

    point: NDArray[np.float64]
    value: float


def minimize(
    function: Callable[..., NumLike],
    simplex: Sequence[ArrayLike],
    options: NelderMeadConfig | Mapping[str, Any] | None = None,
    *,
    return_info: bool = False,
) -> NDArray[np.float64] | tuple[NDArray[np.float64], dict[str, Any]]:
    """Returns an approximate minimizer of ``function``.

    Each iteration sorts the vertices by value, then tries in turn to reflect,
    expand or contract the worst vertex through the centroid of the others,
    and shrinks the whole simplex towards the best vertex when none of those
    moves helps. The run stops once the standard deviation of the vertex
    values drops below ``epsilon`` or after ``max_iter`` iterations.

    Args:
        function: Objective, called as ``function(*point)``.
        simplex: Initial points; at least three, all of the same dimension,
            and affinely independent.
        options: A :class:`NelderMeadConfig`, a mapping of its keyword
            arguments, or ``None`` for the defaults.
        return_info: If True, also return a dict with ``value`` (objective at
            the returned point), ``n_iter``, ``n_fev``, ``converged`` and
            ``spread`` (final standard deviation of the vertex values).

    Returns:
        The best vertex found, or ``(point, info)`` if ``return_info`` is True.

    Raises:
        ValueError: If the simplex has fewer than three points or its points
            do not share one shape.
    """
    cfg = _resolve_options(options)
    points = validate_simplex(simplex)

    n_fev = 0

    def evaluate(x: NDArray[np.float64]) -> Vertex:
        nonlocal n_fev
        n_fev += 1
        return Vertex(x, real_part(function(*x)))

    vs = [evaluate(p) for p in points]
    converged = False
    n_iter = 0

    for _ in range(cfg.max_iter):
        # 1. Order
        vs.sort(key=lambda v: v.value)
        if std_dev(*(v.value for v in vs)) < cfg.epsilon:
            converged = True
            break
        n_iter += 1

        # 2. Centroid of all but the worst vertex
        x0 = centroid(*(v.point for v in vs[:-1]))
        best, second, worst = vs[0], vs[-2], vs[-1]

        # 3. Reflection
        reflected = evaluate(x0 + cfg.alpha * (x0 - worst.point))

        if reflected.value < second.value:
            if reflected.value >= best.value:
                vs[-1] = reflected
            else:
                # 4. Expansion
                expanded = evaluate(x0 + cfg.gamma * (reflected.point - x0))
                vs[-1] = expanded if expanded.value < reflected.value else reflected
            continue

        # 5. Contraction
        if reflected.value < worst.value:
            contracted = evaluate(x0 + cfg.rho * (reflected.point - x0))
            if contracted.value < reflected.value:
                vs[-1] = contracted
                continue
        else:
            contracted = evaluate(x0 + cfg.rho * (worst.point - x0))
            if contracted.value < worst.value:
                vs[-1] = contracted
                continue

        # 6. Shrink
        vs[1:] = [
            evaluate(best.point + cfg.sigma * (v.point - best.point))
            for v in vs[1:]
        ]

    vs.sort(key=lambda v: v.value)
    spread = std_dev(*(v.value for v in vs))
    converged = converged or spread < cfg.epsilon
    if not converged:
        dualkit_logger.warning(
            f"Nelder-Mead stopped after {n_iter} iterations without converging "
            f"(spread={spread:.3e}, epsilon={cfg.epsilon:.3e})."
        )

    x_best = vs[0].point.copy()
    if not return_info:
        return x_best

    info = {
        "value": vs[0].value,
        "n_iter": n_iter,
        "n_fev": n_fev,
        "converged": bool(converged),
        "spread": spread,
    }
    return x_best, info


def axis_simplex(
    x0: ArrayLike,
    step: float = 0.05,
    zero_step: float = 0.00025,
) -> list[NDArray[np.float64]]:
    """Builds an initial simplex around ``x0`` by stepping along each axis.

    Vertex ``i + 1`` moves coordinate ``i`` by the relative amount ``step``
    (``x_i * (1 + step)``), or by the absolute amount ``zero_step`` when that
    coordinate is zero.

    Args:
        x0: Starting point, a 1D array-like of length ``n``.
        step: Relative step for non-zero coordinates. Default is 0.05.
        zero_step: Absolute step for zero coordinates. Default is 0.00025.

    Returns:
        List of ``n + 1`` points, the first of which is ``x0``.

    Raises:
        ValueError: If ``x0`` is not a non-empty 1D array-like.
    """
    base = np.asarray(x0, dtype=float)
    if base.ndim != 1 or base.size == 0:
        raise ValueError(f"x0 must be a non-empty 1D array; got shape {base.shape}.")

    points = [base.copy()]
    for i in range(base.size):
        p = base.copy()
        p[i] = p[i] * (1.0 + step) if p[i] != 0 else zero_step
        points.append(p)
    return points


def _resolve_options(
    options: NelderMeadConfig | Mapping[str, Any] | None,
) -> NelderMeadConfig:
    """Normalizes the ``options`` argument of :func:`minimize`.

    Raises:
        TypeError: If ``options`` is of an unsupported type or names an
            unknown option.
    """
    if options is None:
        return NelderMeadConfig()
    if isinstance(options, NelderMeadConfig):
        return options
    if isinstance(options, Mapping):
        return NelderMeadConfig(**options)
    raise TypeError(
        f"options must be a NelderMeadConfig or a mapping; got {type(options).__name__}."
    )
