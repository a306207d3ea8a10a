"""Recursive dual-number algebra.

Provides the ``Num`` representation and the arithmetic shared by the
differentiation, interpolation and calculus helpers.
"""

from .num import (
    Dual,
    Num,
    NumLike,
    Scalar,
    add,
    as_num,
    cos,
    divide,
    equals,
    exp,
    greater_or_equal,
    greater_than,
    invert,
    less_or_equal,
    less_than,
    multiply,
    negate,
    num_prod,
    num_sum,
    power,
    promote,
    real_part,
    sin,
    subtract,
)

__all__ = [
    "Scalar",
    "Dual",
    "Num",
    "NumLike",
    "as_num",
    "promote",
    "real_part",
    "add",
    "multiply",
    "negate",
    "subtract",
    "invert",
    "divide",
    "power",
    "sin",
    "cos",
    "exp",
    "equals",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    "num_sum",
    "num_prod",
]
