"""Sphere primitive with analytic ray-sphere intersection.

The intersection test is geometric rather than a quadratic solve:

1. ``to_center = center - ray.position``. A ray starting inside or on the
   sphere does not hit it.
2. ``t_center = to_center . ray.direction`` is how far along the ray the
   point C closest to the center lies. A negative value means the sphere is
   behind the ray.
3. The distance ``d`` between C and the center follows from Pythagoras on
   the triangle (ray origin, C, center). ``d > radius`` is a miss.
4. ``t_delta = sqrt(radius^2 - d^2)`` is the distance from C back to the
   near surface point, so the hit is at ``t_center - t_delta``.

Only the near intersection is ever computed. The normal at the hit points
away from the center.

The same algorithm is available as ``hit_sphere`` for Taichi kernels.

Example:
    >>> from spheretrace.core.color import Color
    >>> from spheretrace.core.ray import Ray
    >>> from spheretrace.core.vector import Vector, UNIT_Z
    >>> sphere = Sphere(Vector.zero(), 1.0, Color.red())
    >>> hit = sphere.intersect(Ray(Vector(0.0, 0.0, 10.0), -UNIT_Z), 0)
    >>> hit.position
    Vector(x=0.0, y=0.0, z=1.0)
"""

import math
from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

from spheretrace.core.color import Color
from spheretrace.core.ray import Ray, real, vec3
from spheretrace.core.vector import UnitVector, Vector


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point, radius and color.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        color: The surface color.
    """

    center: Vector
    radius: float
    color: Color

    def intersect(self, ray: Ray, index: int) -> "Intersection | None":
        """Find where ``ray`` first enters this sphere.

        Args:
            ray: The ray to test.
            index: Position of this sphere in its scene, recorded on the hit.

        Returns:
            The near intersection, or None if the ray misses the sphere,
            points away from it, or starts inside or on it.
        """
        to_center = self.center - ray.position
        distance = to_center.length()
        if distance <= self.radius:
            return None

        t_center = to_center.dot(ray.direction.vector)
        if t_center < 0.0:
            return None

        # Rounding can push the squared leg slightly below zero for rays
        # aimed straight at the center.
        d = math.sqrt(max(distance * distance - t_center * t_center, 0.0))
        if d > self.radius:
            return None

        t_delta = math.sqrt(max(self.radius * self.radius - d * d, 0.0))
        position = ray.advance(t_center - t_delta).position
        return Intersection(
            position=position,
            normal=(position - self.center).normalized(),
            sphere_index=index,
        )


@dataclass(frozen=True)
class Intersection:
    """A ray-sphere hit.

    Attributes:
        position: The point where the ray touched the sphere.
        normal: Outward surface normal at ``position``.
        sphere_index: Index of the hit sphere in the scene's sphere list.
    """

    position: Vector
    normal: UnitVector
    sphere_index: int


def intersect(sphere: Sphere, ray: Ray, index: int) -> "Intersection | None":
    """Test a ray against a single sphere. See ``Sphere.intersect``."""
    return sphere.intersect(ray, index)


# =============================================================================
# Taichi Intersection
# =============================================================================


@ti.dataclass
class HitRecord:
    """Record of a ray-sphere intersection inside a kernel.

    Attributes:
        hit: Whether the ray intersected the sphere (1 if hit, 0 if miss).
        point: The near intersection point. Only valid if hit == 1.
        normal: The outward unit normal at ``point``. Only valid if hit == 1.
    """

    hit: ti.i32
    point: vec3
    normal: vec3


@ti.func
def hit_sphere(ray_origin: vec3, ray_direction: vec3, center: vec3, radius: real) -> HitRecord:
    """Kernel version of ``Sphere.intersect``.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The unit direction of the ray.
        center: The sphere center.
        radius: The sphere radius.

    Returns:
        A HitRecord; check ``hit`` before reading the other fields.
    """
    did_hit = 0
    hit_point = vec3(0.0, 0.0, 0.0)
    hit_normal = vec3(0.0, 0.0, 0.0)

    to_center = center - ray_origin
    distance = tm.length(to_center)
    if distance > radius:
        t_center = tm.dot(to_center, ray_direction)
        if t_center >= 0.0:
            d = ti.sqrt(ti.max(distance * distance - t_center * t_center, 0.0))
            if d <= radius:
                t_delta = ti.sqrt(ti.max(radius * radius - d * d, 0.0))
                did_hit = 1
                hit_point = ray_origin + (t_center - t_delta) * ray_direction
                hit_normal = tm.normalize(hit_point - center)

    return HitRecord(hit=did_hit, point=hit_point, normal=hit_normal)
