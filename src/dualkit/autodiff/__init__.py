"""Forward-mode automatic differentiation."""

from .differentiate import DualDerivative, differentiate
from .paths import compose, local_tuple

__all__ = ["differentiate", "DualDerivative", "compose", "local_tuple"]
