"""Derivative-free optimization.

Provides the Nelder-Mead downhill simplex method and the plain vector
helpers it is built on.
"""

from .nelder_mead import Vertex, axis_simplex, minimize
from .nelder_mead_config import NelderMeadConfig
from .vectors import centroid, lerp, mean, std_dev, variance, vector_sum

__all__ = [
    "minimize",
    "axis_simplex",
    "Vertex",
    "NelderMeadConfig",
    "vector_sum",
    "centroid",
    "mean",
    "variance",
    "std_dev",
    "lerp",
]
