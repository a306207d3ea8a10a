"""Helpers for restricting multivariate functions to a single coordinate."""

from __future__ import annotations

import numbers
from collections.abc import Callable
from typing import Sequence

import numpy as np

from dualkit.algebra.num import Num, NumLike, as_num

__all__ = [
    "get_partial_function",
]


def get_partial_function(
    full_function: Callable[[list[Num]], NumLike],
    variable_index: int,
    fixed_values: Sequence[NumLike],
) -> Callable[[NumLike], NumLike]:
    """Returns a single-variable version of a multivariate function.

    A single parameter must be specified by index. All other parameters
    are held fixed. The fixed values are kept as ``Num`` rather than cast to
    float, so they may carry tangents of an enclosing differentiation.

    Args:
        full_function: A function that takes a list of parameters and
            returns a scalar ``Num`` or real.
        variable_index: The index of the parameter to treat as the variable.
        fixed_values: Parameter values to use for all parameters except the
            one being varied.

    Returns:
        A function of a single variable, suitable for use in differentiation.

    Raises:
        ValueError: If ``fixed_values`` is not a flat sequence.
        TypeError: If ``variable_index`` is not an integer.
        IndexError: If ``variable_index`` is out of bounds for the size of ``fixed_values``.
    """
    if isinstance(fixed_values, np.ndarray) and fixed_values.ndim != 1:
        raise ValueError(
            f"fixed_values must be 1D; got shape {fixed_values.shape}."
        )
    fixed = [as_num(v) for v in fixed_values]
    if isinstance(variable_index, bool) or not isinstance(variable_index, numbers.Integral):
        raise TypeError(
            f"variable_index must be an integer; got {type(variable_index).__name__}."
        )
    if variable_index < 0 or variable_index >= len(fixed):
        raise IndexError(
            f"variable_index {variable_index} out of bounds for size {len(fixed)}."
        )

    def partial_function(x: NumLike) -> NumLike:
        params = list(fixed)
        params[variable_index] = as_num(x)
        return full_function(params)

    return partial_function
