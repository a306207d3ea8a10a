"""Provides the DerivativeKit API.

This class is a lightweight front end over DualKit's derivative engines.
You provide the function to differentiate and the point ``x0``, then choose a
backend by name:

* ``"dual"`` (default): exact forward-mode differentiation with nested dual
  numbers. The function must be written with :mod:`dualkit.algebra`
  operations.
* ``"lagrange"``: differentiates the Lagrange interpolant through samples of
  a plain real function. Works with any callable returning a real number.

Adding methods
--------------
New engines can be registered without modifying this class by calling
``register_method`` (see example below).

Examples:
    Basic usage:

        >>> from dualkit.algebra import power
        >>> from dualkit.derivative_kit import DerivativeKit
        >>> dk = DerivativeKit(function=lambda x: power(x, 3), x0=2.0)
        >>> dk.differentiate(order=2)
        12.0

    Registering a new method:

        >>> from dualkit.derivative_kit import register_method
        >>> from dualkit.some_new_method import NewMethodDerivative  # doctest: +SKIP
        >>> register_method(
        ...     name="new-method",
        ...     cls=NewMethodDerivative,
        ...     aliases=("new_method", "nm"),
        ... )  # doctest: +SKIP

Notes:
    - Method names are case/spacing/punctuation insensitive.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Callable, Iterable, Mapping, Protocol, Type

from dualkit.autodiff.differentiate import DualDerivative
from dualkit.interpolation.lagrange_derivative import LagrangeDerivative


class DerivativeEngine(Protocol):
    """Protocol each derivative engine must satisfy.

    Any class registered as a derivative engine must be constructible with a
    target function and an evaluation point ``x0``, and must provide a
    ``.differentiate(...)`` method returning the derivative.
    """
    def __init__(self, function: Callable[[Any], Any], x0: float):
        """Initialize the engine with a target function and evaluation point."""
        ...
    def differentiate(self, *args: Any, **kwargs: Any) -> Any:
        """Compute the derivative using the engine's algorithm."""
        ...


# These are the built-in methods available in the package by default.
_METHOD_SPECS: list[tuple[str, Type[DerivativeEngine], list[str]]] = [
    ("dual",     DualDerivative,     ["forward", "forward-mode", "ad"]),
    ("lagrange", LagrangeDerivative, ["interpolation", "lagrange-interpolation"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, Type[DerivativeEngine]], tuple[str, ...]]:
    """Construct and cache lookup tables for derivative methods.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to engine classes and
        ``canonical_names`` lists the sorted canonical method names.
    """
    method_map: dict[str, Type[DerivativeEngine]] = {}
    canonical: set[str] = set()
    for name, cls, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = cls
        canonical.add(k)
        for a in aliases:
            method_map[_norm(a)] = cls
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    cls: Type[DerivativeEngine],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new derivative method.

    Adds a new derivative engine that can be referenced by name in
    :class:`DerivativeKit`. The internal cache is cleared and rebuilt on the
    next lookup.

    Args:
        name: Canonical public name of the method.
        cls: Engine class implementing the DerivativeEngine protocol.
        aliases: Additional accepted spellings.
    """
    _METHOD_SPECS.append((name, cls, list(aliases)))
    _method_maps.cache_clear()


def _resolve(method: str) -> Type[DerivativeEngine]:
    """Resolve a user-provided method name or alias to an engine class.

    Raises:
        ValueError: If the name is not registered.
    """
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown derivative method '{method}'. Choose one of {{{opts}}}.") from None


class DerivativeKit:
    """Unified interface for computing derivatives of scalar functions.

    Example:
        >>> import numpy as np
        >>> from dualkit.derivative_kit import DerivativeKit
        >>> d = DerivativeKit(np.cos, x0=1.0)
        >>> d.differentiate(method="lagrange", order=1)  # doctest: +SKIP

    Attributes:
        function: The callable to differentiate.
        x0: The point at which the derivative is evaluated.
        default_method: The backend used when no method is specified.
    """

    def __init__(self, function: Callable[[Any], Any], x0: float):
        """Initializes the DerivativeKit with a target function and evaluation point.

        Args:
            function: The function to be differentiated.
            x0: Point at which to evaluate the derivative.
        """
        self.function = function
        self.x0 = x0
        self.default_method = "dual"

    def differentiate(self,
                      *,
                      method: str | None = None,
                      **kwargs: Any) -> Any:
        """Compute derivatives using the chosen method.

        Forwards all keyword arguments to the engine's ``.differentiate()``.

        Args:
            method: Method name or alias (e.g., "dual", "lagrange"). Default is "dual".
            **kwargs: Passed through to the chosen engine.

        Returns:
            The derivative result from the underlying engine.

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        Engine = _resolve(method or self.default_method)
        return Engine(self.function, self.x0).differentiate(**kwargs)


def available_methods() -> list[str]:
    """List canonical method names exposed by this API."""
    _, canon = _method_maps()
    return list(canon)
