"""Provides all dualkit methods."""

from importlib.metadata import PackageNotFoundError, version

from dualkit.algebra.num import Dual, Scalar
from dualkit.autodiff.differentiate import differentiate
from dualkit.calculus_kit import CalculusKit
from dualkit.derivative_kit import DerivativeKit, register_method
from dualkit.interpolation.lagrange import (
    flat_lagrange_interpolation,
    lagrange_interpolation,
)
from dualkit.optimize.nelder_mead import minimize
from dualkit.optimize.nelder_mead_config import NelderMeadConfig
from dualkit.optimize.vectors import lerp
from dualkit.quadrature.simpson import simpson_integral

try:
    __version__ = version("dualkit")
except PackageNotFoundError:
    pass

__all__ = [
    "Scalar",
    "Dual",
    "differentiate",
    "DerivativeKit",
    "CalculusKit",
    "register_method",
    "lagrange_interpolation",
    "flat_lagrange_interpolation",
    "simpson_integral",
    "minimize",
    "NelderMeadConfig",
    "lerp",
]
