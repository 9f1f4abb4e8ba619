"""Rays, on the Python side and inside Taichi kernels.

A ray is a half-line: an origin point and a unit direction. The Python
``Ray`` is immutable; ``advance`` and ``reflect_at`` return new rays.

The second half of this module holds the Taichi counterparts used by the
parallel render kernel. Kernel arithmetic runs in double precision so that
kernel results agree with the Python tracer, which matters for the large
"wall" spheres of the demo scene.

Example:
    >>> from spheretrace.core.ray import Ray
    >>> from spheretrace.core.vector import Vector, UNIT_X
    >>> ray = Ray(Vector(0.0, 0.0, 0.0), UNIT_X)
    >>> ray.advance(5.0).position
    Vector(x=5.0, y=0.0, z=0.0)
"""

from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

from spheretrace.core.vector import UnitVector, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and a unit direction.

    Attributes:
        position: The origin of the ray.
        direction: The direction of travel.
    """

    position: Vector
    direction: UnitVector

    def advance(self, distance: float) -> "Ray":
        """Move the origin ``distance`` units along the direction."""
        return Ray(self.position + self.direction.vector * distance, self.direction)

    def reflect_at(self, point: Vector, normal: UnitVector) -> "Ray":
        """Bounce the ray off a surface.

        Args:
            point: Where the ray hit the surface; origin of the new ray.
            normal: Outward surface normal at ``point``.

        Returns:
            A ray starting at ``point`` travelling in the mirrored direction.
        """
        return Ray(point, self.direction.reflect(normal))


def advance(ray: Ray, distance: float) -> Ray:
    return ray.advance(distance)


def reflect_at(ray: Ray, point: Vector, normal: UnitVector) -> Ray:
    return ray.reflect_at(point, normal)


# =============================================================================
# Taichi Types and Functions
# =============================================================================

# Scalar type for all kernel-side geometry
real = ti.f64

# Type alias for 3D vectors inside kernels
vec3 = ti.types.vector(3, real)


@ti.dataclass
class KernelRay:
    """A ray inside a Taichi kernel.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction of the ray (vec3), unit length.
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: KernelRay, t: real) -> vec3:
    """Compute the point ``ray.origin + t * ray.direction``."""
    return ray.origin + t * ray.direction


@ti.func
def reflect(incident: vec3, normal: vec3) -> vec3:
    """Reflect an incident direction about a unit normal.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The surface normal (unit length).

    Returns:
        The reflected direction ``I - 2 (I . N) N``.
    """
    return incident - 2.0 * tm.dot(incident, normal) * normal


@ti.func
def reflect_ray_at(ray: KernelRay, point: vec3, normal: vec3) -> KernelRay:
    """Kernel counterpart of ``Ray.reflect_at``."""
    return KernelRay(origin=point, direction=reflect(ray.direction, normal))
