"""Provides the recursive dual-number algebra used throughout DualKit.

A ``Num`` is either a :class:`Scalar` wrapping a real number or a
:class:`Dual` pairing a primal value with the coefficient of a formal
infinitesimal ``ε`` (``ε² = 0``). Both components of a ``Dual`` are
themselves ``Num``, so duals nest into towers of any depth. Differentiating a
function that itself differentiates therefore needs no extra machinery: every
operation below recurses through the tower one level at a time.

All operations accept plain Python/NumPy reals as well as ``Num`` and lift
them to :class:`Scalar` on entry. When one operand is a ``Dual`` and the other
is not, the other operand is promoted to ``Dual(x, 0)`` for that level only.

Real arithmetic at the bottom of a tower is carried out in NumPy float64, so
dividing by zero or taking a fractional power of a negative number yields
``inf``/``nan`` (with NumPy's ``RuntimeWarning``) instead of raising.

Examples:
    Arithmetic on a dual number carries the derivative along:

        >>> from dualkit.algebra.num import Dual, multiply, sin
        >>> x = Dual(3.0, 1.0)
        >>> multiply(x, x)
        Dual(primal=Scalar(value=9.0), tangent=Scalar(value=6.0))

    The Python operators delegate to the same functions:

        >>> y = x * x + 2 * x
        >>> y.tangent
        Scalar(value=8.0)
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, TypeAlias, Union

import numpy as np

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


class _Operators:
    """Python operator protocol shared by both ``Num`` variants.

    Each operator forwards to the module-level function of the same meaning.
    Operands that are neither ``Num`` nor real numbers yield
    ``NotImplemented`` so Python can try the reflected operation.
    """

    __slots__ = ()

    # Keeps NumPy scalars from swallowing mixed expressions like np.float64(2) * x.
    __array_ufunc__ = None

    def __add__(self, other):
        return add(self, other) if _is_num_like(other) else NotImplemented

    def __radd__(self, other):
        return add(other, self) if _is_num_like(other) else NotImplemented

    def __sub__(self, other):
        return subtract(self, other) if _is_num_like(other) else NotImplemented

    def __rsub__(self, other):
        return subtract(other, self) if _is_num_like(other) else NotImplemented

    def __mul__(self, other):
        return multiply(self, other) if _is_num_like(other) else NotImplemented

    def __rmul__(self, other):
        return multiply(other, self) if _is_num_like(other) else NotImplemented

    def __truediv__(self, other):
        return divide(self, other) if _is_num_like(other) else NotImplemented

    def __rtruediv__(self, other):
        return divide(other, self) if _is_num_like(other) else NotImplemented

    def __pow__(self, n):
        return power(self, n) if _is_num_like(n) else NotImplemented

    def __neg__(self):
        return negate(self)

    def __pos__(self):
        return self

    def __eq__(self, other):
        return equals(self, other) if _is_num_like(other) else NotImplemented

    def __ne__(self, other):
        return not equals(self, other) if _is_num_like(other) else NotImplemented

    def __lt__(self, other):
        return less_than(self, other) if _is_num_like(other) else NotImplemented

    def __le__(self, other):
        return less_or_equal(self, other) if _is_num_like(other) else NotImplemented

    def __gt__(self, other):
        return greater_than(self, other) if _is_num_like(other) else NotImplemented

    def __ge__(self, other):
        return greater_or_equal(self, other) if _is_num_like(other) else NotImplemented


@dataclass(frozen=True, eq=False)
class Scalar(_Operators):
    """A real number at the bottom of a dual tower.

    Attributes:
        value: The real value, stored as a Python float.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True, eq=False)
class Dual(_Operators):
    """A value together with its first-order perturbation.

    Represents ``primal + tangent·ε`` with ``ε² = 0``. Plain reals passed to
    the constructor are lifted to :class:`Scalar`.

    Attributes:
        primal: The value component.
        tangent: The coefficient of the infinitesimal unit.
    """

    primal: Num
    tangent: Num

    def __post_init__(self) -> None:
        object.__setattr__(self, "primal", as_num(self.primal))
        object.__setattr__(self, "tangent", as_num(self.tangent))

    def __float__(self) -> float:
        raise TypeError(
            "Cannot convert a Dual to float without dropping its tangent; "
            "use real_part() to read the primal value explicitly."
        )


Num: TypeAlias = Union[Scalar, Dual]
NumLike: TypeAlias = Union[Scalar, Dual, numbers.Real]


def _is_num_like(x) -> bool:
    """Returns whether ``x`` can take part in ``Num`` arithmetic."""
    return isinstance(x, (Scalar, Dual, numbers.Real))


def as_num(x: NumLike) -> Num:
    """Lifts a real number to :class:`Scalar`; returns ``Num`` inputs unchanged.

    Args:
        x: A ``Num`` or any real number (Python or NumPy).

    Returns:
        The corresponding ``Num``.

    Raises:
        TypeError: If ``x`` is neither a ``Num`` nor a real number.
    """
    if isinstance(x, (Scalar, Dual)):
        return x
    if isinstance(x, numbers.Real):
        return Scalar(float(x))
    raise TypeError(f"Expected a real number or Num; got {type(x).__name__}.")


def promote(x: NumLike) -> tuple[Num, Num]:
    """Splits ``x`` into its ``(primal, tangent)`` pair.

    A scalar is promoted to ``(x, 0)``, i.e. treated as a constant with
    respect to the infinitesimal at this level.

    Args:
        x: Value to split.

    Returns:
        Tuple ``(primal, tangent)``.
    """
    match as_num(x):
        case Dual(primal, tangent):
            return primal, tangent
        case s:
            return s, Scalar(0.0)


def real_part(x: NumLike) -> float:
    """Returns the real number at the bottom of the primal chain of ``x``.

    Args:
        x: A ``Num`` or real number.

    Returns:
        The base value as a float; all tangent information is discarded.
    """
    match as_num(x):
        case Scalar(value):
            return value
        case Dual(primal, _):
            return real_part(primal)


def _base(x: Num) -> Num:
    """Steps one level down the primal chain; scalars are their own base."""
    match x:
        case Dual(primal, _):
            return primal
        case _:
            return x


def add(x: NumLike, y: NumLike) -> Num:
    """Adds two values component-wise."""
    match as_num(x), as_num(y):
        case Scalar(a), Scalar(b):
            return Scalar(np.add(a, b))
        case u, v:
            (pa, ta), (pb, tb) = promote(u), promote(v)
            return Dual(add(pa, pb), add(ta, tb))


def multiply(x: NumLike, y: NumLike) -> Num:
    """Multiplies two values using the product rule on the tangents.

    ``(a + bε)(c + dε) = ac + (bc + ad)ε``.
    """
    match as_num(x), as_num(y):
        case Scalar(a), Scalar(b):
            return Scalar(np.multiply(a, b))
        case u, v:
            (pa, ta), (pb, tb) = promote(u), promote(v)
            return Dual(multiply(pa, pb), add(multiply(ta, pb), multiply(pa, tb)))


def negate(x: NumLike) -> Num:
    """Flips the sign of every component."""
    match as_num(x):
        case Scalar(a):
            return Scalar(-a)
        case Dual(a, b):
            return Dual(negate(a), negate(b))


def subtract(x: NumLike, y: NumLike) -> Num:
    """Returns ``x - y``."""
    return add(x, negate(y))


def invert(x: NumLike) -> Num:
    """Returns the reciprocal ``1/x``.

    The tangent follows ``d(1/a) = -a'/a²``. A zero base value yields ``inf``
    rather than an exception.
    """
    match as_num(x):
        case Scalar(a):
            return Scalar(np.divide(1.0, a))
        case Dual(a, b):
            return Dual(invert(a), multiply(negate(b), invert(power(a, 2))))


def divide(x: NumLike, y: NumLike) -> Num:
    """Returns ``x / y``."""
    return multiply(x, invert(y))


def power(x: NumLike, n: float | Scalar) -> Num:
    """Raises ``x`` to a real exponent ``n``.

    Uses ``(a + bε)ⁿ = aⁿ + n·aⁿ⁻¹·bε``, exact at first order in ``ε``.

    Args:
        x: Base.
        n: Real exponent. A :class:`Scalar` is accepted and unwrapped.

    Returns:
        ``x`` raised to ``n``.

    Raises:
        TypeError: If ``n`` is a :class:`Dual`; only constant exponents are
            supported.
    """
    if isinstance(n, Dual):
        raise TypeError("power() requires a real exponent; got a Dual.")
    n = float(n)
    match as_num(x):
        case Scalar(a):
            return Scalar(np.power(a, n))
        case Dual(a, b):
            return Dual(power(a, n), multiply(multiply(n, power(a, n - 1)), b))


def sin(x: NumLike) -> Num:
    """Sine, with ``sin' = cos``."""
    match as_num(x):
        case Scalar(a):
            return Scalar(np.sin(a))
        case Dual(a, b):
            return Dual(sin(a), multiply(cos(a), b))


def cos(x: NumLike) -> Num:
    """Cosine, with ``cos' = -sin``."""
    match as_num(x):
        case Scalar(a):
            return Scalar(np.cos(a))
        case Dual(a, b):
            return Dual(cos(a), multiply(negate(sin(a)), b))


def exp(x: NumLike) -> Num:
    """Exponential, with ``exp' = exp``."""
    match as_num(x):
        case Scalar(a):
            return Scalar(np.exp(a))
        case Dual(a, b):
            return Dual(exp(a), multiply(exp(a), b))


def equals(x: NumLike, y: NumLike) -> bool:
    """Compares primal values; tangents are ignored.

    Recurses down the primal chain of whichever side is still a ``Dual`` until
    both sides are scalars, so towers of different depth compare fine.
    """
    match as_num(x), as_num(y):
        case Scalar(a), Scalar(b):
            return a == b
        case u, v:
            return equals(_base(u), _base(v))


def less_than(x: NumLike, y: NumLike) -> bool:
    """Returns whether the primal value of ``x`` is below that of ``y``."""
    match as_num(x), as_num(y):
        case Scalar(a), Scalar(b):
            return a < b
        case u, v:
            return less_than(_base(u), _base(v))


def less_or_equal(x: NumLike, y: NumLike) -> bool:
    return less_than(x, y) or equals(x, y)


def greater_than(x: NumLike, y: NumLike) -> bool:
    return not less_or_equal(x, y)


def greater_or_equal(x: NumLike, y: NumLike) -> bool:
    return greater_than(x, y) or equals(x, y)


def num_sum(xs: Iterable[NumLike]) -> Num:
    """Left fold of :func:`add` over ``xs``; the empty sum is ``0``."""
    return reduce(add, xs, Scalar(0.0))


def num_prod(xs: Iterable[NumLike]) -> Num:
    """Left fold of :func:`multiply` over ``xs``; the empty product is ``1``."""
    return reduce(multiply, xs, Scalar(1.0))
