"""Unit tests for dualkit.algebra.num."""

import dataclasses
import math

import numpy as np
import pytest

from dualkit.algebra.num import (
    Dual,
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


def _pair(x):
    """Returns (primal, tangent) of a depth-one value as floats."""
    p, t = promote(x)
    return real_part(p), real_part(t)


VALUES = [
    Scalar(1.5),
    Scalar(-2.0),
    Dual(3.0, 1.0),
    Dual(-0.5, 2.0),
    Dual(4.0, -3.0),
]


def test_as_num_lifts_reals():
    """Tests that Python and NumPy reals are lifted to Scalar."""
    for raw in (2, 2.0, np.float64(2.0), np.int64(2)):
        s = as_num(raw)
        assert isinstance(s, Scalar)
        assert s.value == 2.0
        assert isinstance(s.value, float)


def test_as_num_returns_num_unchanged():
    """Tests that Num inputs pass through as_num untouched."""
    d = Dual(1.0, 2.0)
    assert as_num(d) is d


def test_as_num_rejects_non_numbers():
    """Tests that non-numeric inputs raise TypeError."""
    with pytest.raises(TypeError):
        as_num("1.0")
    with pytest.raises(TypeError):
        as_num([1.0, 2.0])


def test_dual_constructor_lifts_components():
    """Tests that Dual lifts plain real components to Scalar."""
    d = Dual(3, 1)
    assert isinstance(d.primal, Scalar)
    assert isinstance(d.tangent, Scalar)


def test_values_are_immutable():
    """Tests that Num instances are frozen."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        Scalar(1.0).value = 2.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        Dual(1.0, 1.0).tangent = Scalar(0.0)


def test_promote_scalar_has_zero_tangent():
    """Tests that a scalar is promoted to (s, 0)."""
    p, t = promote(4.0)
    assert p.value == 4.0
    assert t.value == 0.0


def test_add_scalars_stays_scalar():
    """Tests that adding two scalars returns a scalar."""
    out = add(2.0, 3.0)
    assert isinstance(out, Scalar)
    assert out.value == 5.0


def test_add_mixed_promotes_scalar():
    """Tests that a scalar added to a dual only shifts the primal."""
    assert _pair(add(Dual(1.0, 2.0), 3.0)) == (4.0, 2.0)
    assert _pair(add(3.0, Dual(1.0, 2.0))) == (4.0, 2.0)


def test_multiply_applies_product_rule():
    """Tests that (a + bε)(c + dε) = ac + (bc + ad)ε."""
    assert _pair(multiply(Dual(2.0, 3.0), Dual(5.0, 7.0))) == (10.0, 29.0)


def test_multiply_by_scalar_scales_tangent():
    """Tests that multiplying by a scalar scales both components."""
    assert _pair(multiply(2.0, Dual(3.0, 1.0))) == (6.0, 2.0)


def test_negate_flips_every_level():
    """Tests that negation recurses through nested towers."""
    out = negate(Dual(Dual(1.0, 2.0), 3.0))
    assert _pair(out.primal) == (-1.0, -2.0)
    assert out.tangent.value == -3.0


def test_invert_dual_uses_reciprocal_rule():
    """Tests that d(1/a) = -a'/a²."""
    assert _pair(invert(Dual(2.0, 1.0))) == pytest.approx((0.5, -0.25))


def test_invert_zero_is_infinite():
    """Tests that inverting zero yields inf instead of raising."""
    assert invert(0.0).value == math.inf


def test_divide_by_zero_propagates_inf():
    """Tests that dividing a dual by zero propagates through the primal."""
    out = divide(Dual(1.0, 1.0), 0.0)
    assert real_part(out) == math.inf


def test_power_dual_uses_power_rule():
    """Tests that (a + bε)^n = a^n + n a^(n-1) b ε."""
    assert _pair(power(Dual(2.0, 1.0), 3)) == (8.0, 12.0)
    assert _pair(power(Dual(4.0, 1.0), 0.5)) == pytest.approx((2.0, 0.25))


def test_power_accepts_scalar_exponent():
    """Tests that a Scalar exponent is unwrapped."""
    assert power(3.0, Scalar(2.0)).value == 9.0


def test_power_rejects_dual_exponent():
    """Tests that a dual exponent raises TypeError."""
    with pytest.raises(TypeError):
        power(2.0, Dual(1.0, 1.0))


def test_power_of_negative_base_with_fractional_exponent_is_nan():
    """Tests that an undefined real power gives nan rather than a complex number."""
    assert math.isnan(power(-8.0, 1.0 / 3.0).value)


@pytest.mark.parametrize(
    "fn, expected",
    [
        (sin, (0.0, 1.0)),
        (cos, (1.0, 0.0)),
        (exp, (1.0, 1.0)),
    ],
)
def test_transcendental_derivatives_at_zero(fn, expected):
    """Tests the derivative rules of sin, cos and exp at zero."""
    assert _pair(fn(Dual(0.0, 1.0))) == pytest.approx(expected)


def test_transcendental_derivatives_chain_rule():
    """Tests that the tangent is scaled by the inner derivative."""
    x = 0.3
    p, t = _pair(sin(Dual(x, 2.0)))
    assert p == pytest.approx(math.sin(x))
    assert t == pytest.approx(2.0 * math.cos(x))
    p, t = _pair(cos(Dual(x, 2.0)))
    assert t == pytest.approx(-2.0 * math.sin(x))


@pytest.mark.parametrize("x", VALUES)
@pytest.mark.parametrize("y", VALUES)
def test_add_and_multiply_commute(x, y):
    """Tests that add and multiply are commutative."""
    assert _pair(add(x, y)) == _pair(add(y, x))
    assert _pair(multiply(x, y)) == _pair(multiply(y, x))


@pytest.mark.parametrize("x", VALUES)
@pytest.mark.parametrize("y", VALUES[:3])
@pytest.mark.parametrize("z", VALUES[2:])
def test_multiply_distributes_over_add(x, y, z):
    """Tests that x(y + z) = xy + xz."""
    lhs = _pair(multiply(x, add(y, z)))
    rhs = _pair(add(multiply(x, y), multiply(x, z)))
    assert lhs == pytest.approx(rhs)


@pytest.mark.parametrize("x", VALUES)
def test_subtract_self_is_zero(x):
    """Tests that x - x = 0 in both components."""
    assert _pair(subtract(x, x)) == (0.0, 0.0)
    assert equals(subtract(x, x), 0.0)


@pytest.mark.parametrize("x", VALUES)
def test_divide_self_is_one(x):
    """Tests that x / x = 1 with a vanishing tangent."""
    assert _pair(divide(x, x)) == pytest.approx((1.0, 0.0), abs=1e-15)


def test_mismatched_depths_promote_lazily():
    """Tests that towers of different depth combine level by level."""
    out = add(Dual(Dual(1.0, 1.0), 1.0), Dual(2.0, 3.0))
    assert _pair(out.primal) == (3.0, 1.0)
    assert out.tangent.value == 4.0


def test_equals_ignores_tangents():
    """Tests that equality compares primal values only."""
    assert equals(Dual(2.0, 5.0), Dual(2.0, -1.0))
    assert not equals(Dual(2.0, 5.0), Dual(3.0, 5.0))


def test_equals_scalar_against_dual():
    """Tests that a bare scalar is compared with the dual's primal."""
    assert equals(2.0, Dual(2.0, 1.0))
    assert equals(Dual(2.0, 1.0), 2.0)
    assert not equals(1.0, Dual(2.0, 1.0))


def test_comparisons_across_tower_depths():
    """Tests that ordering recurses down the primal chain of nested towers."""
    deep = Dual(Dual(1.0, 1.0), 1.0)
    assert less_than(deep, 1.5)
    assert less_than(0.5, deep)
    assert equals(deep, Dual(1.0, 7.0))


@pytest.mark.parametrize(
    "x, y, lt, le, gt, ge",
    [
        (1.0, 2.0, True, True, False, False),
        (2.0, 2.0, False, True, False, True),
        (3.0, 2.0, False, False, True, True),
    ],
)
def test_derived_comparisons(x, y, lt, le, gt, ge):
    """Tests less_or_equal, greater_than and greater_or_equal."""
    dx = Dual(x, 1.0)
    assert less_than(dx, y) is lt
    assert less_or_equal(dx, y) is le
    assert greater_than(dx, y) is gt
    assert greater_or_equal(dx, y) is ge


def test_num_sum_and_prod():
    """Tests the folds and their identities."""
    assert num_sum([]).value == 0.0
    assert num_prod([]).value == 1.0
    assert _pair(num_sum([1.0, 2.0, Dual(3.0, 1.0)])) == (6.0, 1.0)
    assert _pair(num_prod([2.0, Dual(3.0, 1.0), 4.0])) == (24.0, 8.0)


def test_operators_delegate_to_functions():
    """Tests the Python operator protocol on Num values."""
    x = Dual(3.0, 1.0)
    assert _pair(2 * x + 1) == (7.0, 2.0)
    assert _pair(x - 1) == (2.0, 1.0)
    assert _pair(1 - x) == (-2.0, -1.0)
    assert _pair(x / 2) == (1.5, 0.5)
    assert _pair(1 / Dual(2.0, 1.0)) == pytest.approx((0.5, -0.25))
    assert _pair(x ** 2) == (9.0, 6.0)
    assert _pair(-x) == (-3.0, -1.0)


def test_comparison_operators_use_primal():
    """Tests that ==, <, <=, >, >= compare primal values."""
    x = Dual(3.0, 1.0)
    assert x == 3.0
    assert x != 4.0
    assert x < 4.0
    assert x <= 3.0
    assert x > Scalar(2.0)
    assert x >= Dual(3.0, -5.0)


def test_comparison_with_unrelated_type_is_false():
    """Tests that comparing with a non-number falls back to identity."""
    assert (Scalar(1.0) == "1.0") is False
    with pytest.raises(TypeError):
        _ = Scalar(1.0) < "a"


def test_num_is_unhashable():
    """Tests that Num values cannot be hashed since equality ignores tangents."""
    with pytest.raises(TypeError):
        hash(Scalar(1.0))
    with pytest.raises(TypeError):
        hash(Dual(1.0, 1.0))


def test_float_conversion():
    """Tests that only scalars convert to float implicitly."""
    assert float(Scalar(2.5)) == 2.5
    with pytest.raises(TypeError):
        float(Dual(2.5, 1.0))


def test_real_part_walks_primal_chain():
    """Tests that real_part returns the base value of a tower."""
    assert real_part(Dual(Dual(3.0, 1.0), 1.0)) == 3.0
    assert real_part(4) == 4.0
