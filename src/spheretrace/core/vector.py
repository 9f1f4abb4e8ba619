"""3D vectors and unit-length directions.

This module provides the Python-side vector types used to describe scenes
and to run the reference tracer:

- ``Vector``: an immutable triple of floats with the usual arithmetic.
- ``UnitVector``: a direction of length 1. It can only be obtained from
  ``normalize()`` (or ``Vector.normalized()``) and from the axis constants
  ``UNIT_X``, ``UNIT_Y`` and ``UNIT_Z``. Operations that would break the
  length invariant (addition, scaling) are not available on it; use
  ``.vector`` to get the underlying ``Vector`` for general arithmetic.

Operators are provided alongside the named methods (``a + b`` is
``a.add(b)``, ``-a`` is ``a.negate()``, and so on).

Example:
    >>> from spheretrace.core.vector import Vector, UNIT_Y
    >>> incident = Vector(-1.0, -1.0, -1.0).normalized()
    >>> incident.reflect(UNIT_Y).vector
    Vector(x=-0.577..., y=0.577..., z=-0.577...)
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector:
        """Return the zero vector."""
        return cls(0.0, 0.0, 0.0)

    def add(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, k: float) -> Vector:
        return Vector(self.x * k, self.y * k, self.z * k)

    def divide(self, k: float) -> Vector:
        """Divide each component by ``k``.

        Dividing by zero is not guarded; callers must not do it.
        """
        return Vector(self.x / k, self.y / k, self.z / k)

    def negate(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def dot(self, other: Vector) -> float:
        """Compute the dot product of two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the cross product ``self x other``.

        The cross product is not commutative; the camera derives its right
        direction as ``forward x up``.
        """
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> UnitVector:
        """Return the unit vector pointing in the same direction.

        Raises:
            ZeroDivisionError: If the vector has zero length.
        """
        return UnitVector(self.divide(self.length()), _key=_NORMALIZED)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __mul__(self, k: float) -> Vector:
        return self.scale(k)

    def __rmul__(self, k: float) -> Vector:
        return self.scale(k)

    def __truediv__(self, k: float) -> Vector:
        return self.divide(k)

    def __neg__(self) -> Vector:
        return self.negate()


# Construction key for UnitVector; only this module hands it out.
_NORMALIZED = object()


class UnitVector:
    """A direction of (approximately) unit length.

    Instances come from ``normalize()``, ``Vector.normalized()``, the axis
    constants, and the operations below that preserve unit length. Direct
    construction raises ``TypeError``.
    """

    __slots__ = ("_vector",)

    def __init__(self, vector: Vector, *, _key: object = None) -> None:
        if _key is not _NORMALIZED:
            raise TypeError("UnitVector can only be obtained through normalize()")
        self._vector = vector

    @property
    def vector(self) -> Vector:
        """The underlying ``Vector``."""
        return self._vector

    @property
    def x(self) -> float:
        return self._vector.x

    @property
    def y(self) -> float:
        return self._vector.y

    @property
    def z(self) -> float:
        return self._vector.z

    def negate(self) -> UnitVector:
        return UnitVector(self._vector.negate(), _key=_NORMALIZED)

    def dot(self, other: Vector | UnitVector) -> float:
        return self._vector.dot(_as_vector(other))

    def reflect(self, normal: UnitVector) -> UnitVector:
        """Mirror this direction about a surface normal.

        Computes ``R = I - 2 (I . N) N``. Both inputs are unit length, so
        the result is too.

        Args:
            normal: The surface normal.

        Returns:
            The reflected direction.
        """
        n = normal.vector
        reflected = self._vector.subtract(n.scale(2.0 * self._vector.dot(n)))
        return UnitVector(reflected, _key=_NORMALIZED)

    def as_tuple(self) -> tuple[float, float, float]:
        return self._vector.as_tuple()

    def __neg__(self) -> UnitVector:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitVector):
            return NotImplemented
        return self._vector == other._vector

    def __hash__(self) -> int:
        return hash(("UnitVector", self._vector))

    def __repr__(self) -> str:
        return f"UnitVector(x={self.x!r}, y={self.y!r}, z={self.z!r})"


UNIT_X = UnitVector(Vector(1.0, 0.0, 0.0), _key=_NORMALIZED)
UNIT_Y = UnitVector(Vector(0.0, 1.0, 0.0), _key=_NORMALIZED)
UNIT_Z = UnitVector(Vector(0.0, 0.0, 1.0), _key=_NORMALIZED)


def _as_vector(v: Vector | UnitVector) -> Vector:
    return v.vector if isinstance(v, UnitVector) else v


def dot(a: Vector | UnitVector, b: Vector | UnitVector) -> float:
    """Compute the dot product of two vectors or directions."""
    return _as_vector(a).dot(_as_vector(b))


def cross(a: Vector | UnitVector, b: Vector | UnitVector) -> Vector:
    """Compute the cross product ``a x b``."""
    return _as_vector(a).cross(_as_vector(b))


def length(v: Vector) -> float:
    """Compute the Euclidean length of a vector."""
    return v.length()


def normalize(v: Vector) -> UnitVector:
    """Normalize a vector to unit length.

    Raises:
        ZeroDivisionError: If ``v`` is the zero vector.
    """
    return v.normalized()


def reflect(incident: UnitVector, normal: UnitVector) -> UnitVector:
    """Reflect an incident direction about a surface normal."""
    return incident.reflect(normal)
