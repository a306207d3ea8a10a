"""Tests for the DerivativeKit front end and its method registry."""

import numpy as np
import pytest

from dualkit.algebra.num import exp, power, sin
from dualkit.autodiff.differentiate import DualDerivative
from dualkit.derivative_kit import (
    DerivativeKit,
    _method_maps,
    _METHOD_SPECS,
    available_methods,
    register_method,
)


def test_default_method_is_dual():
    """Tests that the dual engine is used when no method is given."""
    dk = DerivativeKit(lambda x: power(x, 3), x0=2.0)
    assert dk.differentiate(order=1) == 12.0
    assert dk.differentiate(order=2) == 12.0


@pytest.mark.parametrize("name", ["dual", "Forward-Mode", "AD", "forward"])
def test_dual_aliases(name):
    """Tests that dual aliases resolve regardless of case and punctuation."""
    dk = DerivativeKit(sin, x0=0.0)
    assert dk.differentiate(method=name) == pytest.approx(1.0)


@pytest.mark.parametrize("name", ["lagrange", "interpolation", "Lagrange-Interpolation"])
def test_lagrange_aliases(name):
    """Tests that the interpolation engine works on plain NumPy functions."""
    dk = DerivativeKit(np.exp, x0=0.5)
    assert dk.differentiate(method=name, order=1) == pytest.approx(np.exp(0.5), rel=1e-8)


def test_dual_and_lagrange_agree():
    """Tests that both engines agree on a smooth function."""
    dual = DerivativeKit(lambda x: exp(sin(x)), x0=0.4).differentiate(method="dual")
    lagr = DerivativeKit(lambda x: np.exp(np.sin(x)), x0=0.4).differentiate(method="lagrange")
    assert dual == pytest.approx(lagr, rel=1e-8)


def test_unknown_method_raises():
    """Tests that an unregistered method name raises ValueError."""
    with pytest.raises(ValueError, match="Unknown derivative method"):
        DerivativeKit(sin, x0=0.0).differentiate(method="spline")


def test_available_methods_lists_canonical_names():
    """Tests that the canonical names are listed."""
    assert available_methods() == ["dual", "lagrange"]


def test_register_method_adds_engine(monkeypatch):
    """Tests that a registered engine can be selected by name or alias."""
    monkeypatch.setattr(
        "dualkit.derivative_kit._METHOD_SPECS", list(_METHOD_SPECS), raising=True
    )
    _method_maps.cache_clear()

    class Doubled(DualDerivative):
        """Engine that doubles the dual-number derivative."""

        def differentiate(self, *, order=1, **kwargs):
            return 2.0 * super().differentiate(order=order)

    try:
        register_method("doubled", Doubled, aliases=("twice",))
        dk = DerivativeKit(lambda x: power(x, 2), x0=3.0)
        assert dk.differentiate(method="twice") == 12.0
        assert "doubled" in available_methods()
    finally:
        _method_maps.cache_clear()


@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("dual", {"ordr": 2}),
        ("dual", {"stepsize": 0.5, "num_points": 3}),
        ("lagrange", {"ordr": 2}),
        ("lagrange", {"step": 0.1}),
    ],
)
def test_unknown_engine_keyword_raises(method, kwargs):
    """Tests that keywords an engine does not accept raise TypeError."""
    dk = DerivativeKit(lambda x: power(x, 3), x0=2.0)
    with pytest.raises(TypeError):
        dk.differentiate(method=method, **kwargs)
