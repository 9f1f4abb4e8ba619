"""Floating-point comparison helpers for tests.

``almost_equal`` compares floats and the value types of this package
component-wise with an absolute tolerance. It is meant for assertions only;
rendering code never branches on it.

Example:
    >>> from spheretrace.testing import almost_equal
    >>> almost_equal(0.1 + 0.2, 0.3)
    True
"""

from __future__ import annotations

from typing import Any

from spheretrace.core.color import Color
from spheretrace.core.ray import Ray
from spheretrace.core.vector import UnitVector, Vector
from spheretrace.geometry.sphere import Intersection

DEFAULT_EPSILON = 1e-7


def almost_equal_with_epsilon(a: Any, b: Any, epsilon: float) -> bool:
    """Compare two values, allowing each component to differ by < epsilon.

    Supports floats, Vector, UnitVector, Color, Ray, Intersection and None.
    ``None`` only equals ``None``. Intersections must also agree on
    ``sphere_index``.

    Raises:
        TypeError: If the values are of an unsupported or mismatched type.
    """
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, UnitVector) and isinstance(b, UnitVector):
        return almost_equal_with_epsilon(a.vector, b.vector, epsilon)
    if isinstance(a, Vector) and isinstance(b, Vector):
        return all(abs(p - q) < epsilon for p, q in zip(a.as_tuple(), b.as_tuple()))
    if isinstance(a, Color) and isinstance(b, Color):
        return all(abs(p - q) < epsilon for p, q in zip(a.as_tuple(), b.as_tuple()))
    if isinstance(a, Ray) and isinstance(b, Ray):
        return almost_equal_with_epsilon(
            a.position, b.position, epsilon
        ) and almost_equal_with_epsilon(a.direction, b.direction, epsilon)
    if isinstance(a, Intersection) and isinstance(b, Intersection):
        return (
            a.sphere_index == b.sphere_index
            and almost_equal_with_epsilon(a.position, b.position, epsilon)
            and almost_equal_with_epsilon(a.normal, b.normal, epsilon)
        )
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return abs(a - b) < epsilon
    raise TypeError(f"Cannot compare {type(a).__name__} with {type(b).__name__}")


def almost_equal(a: Any, b: Any) -> bool:
    """Compare two values with the default tolerance of 1e-7."""
    return almost_equal_with_epsilon(a, b, DEFAULT_EPSILON)
