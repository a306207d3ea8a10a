"""Pytest configuration with shared objectives and simplices."""

import numpy as np
import pytest

__all__ = ["bowl", "unit_simplex"]


@pytest.fixture(autouse=True)
def _quiet_float_errors():
    """Silences NumPy floating-point warnings so tests can assert on inf/nan results."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        yield


@pytest.fixture
def bowl():
    """Return the quadratic bowl f(x, y) = (x - 1)^2 + (y - 2)^2."""
    def _bowl(x, y):
        return (x - 1.0) ** 2 + (y - 2.0) ** 2
    return _bowl


@pytest.fixture
def unit_simplex():
    """Return a non-degenerate 2D simplex at the origin."""
    return [[0.0, 0.0], [1.0, 0.0], [0.0, 1.5]]
