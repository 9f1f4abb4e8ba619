"""Reference tracer: closest-hit search and recursive specular shading.

These functions run on the Python value types and define the expected
output of the renderer. The Taichi integrator mirrors them for parallel
rendering.

Shading model:
    - A ray that hits nothing is black.
    - A hit is shaded with ``brightness = normal . -direction``, clamped to
      [0, 1], and the sphere's color.
    - While bounces remain, the color reflected from the hit point is added
      (saturating at 1.0 per channel) before the brightness is applied.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from spheretrace.core.color import Color
from spheretrace.core.ray import Ray
from spheretrace.core.vector import UnitVector
from spheretrace.geometry.sphere import Intersection, Sphere


def closest_intersection(spheres: Sequence[Sphere], ray: Ray) -> Intersection | None:
    """Find the hit nearest to the ray origin among all spheres.

    Spheres are scanned in order; on equal distances the first one wins.

    Args:
        spheres: The scene's spheres.
        ray: The ray to trace.

    Returns:
        The nearest intersection (its ``sphere_index`` indexes ``spheres``),
        or None if no sphere is hit.
    """
    closest = None
    closest_distance = math.inf
    for index, sphere in enumerate(spheres):
        intersection = sphere.intersect(ray, index)
        if intersection is None:
            continue
        distance = (intersection.position - ray.position).length()
        if distance < closest_distance:
            closest_distance = distance
            closest = intersection
    return closest


def surface_brightness(normal: UnitVector, direction: UnitVector) -> float:
    """Cosine between the surface normal and the reversed ray direction.

    Near hits always face the ray, so only rounding on head-on or grazing
    hits can leave [0, 1]; the result is clamped to that range.
    """
    return min(max(normal.dot(direction.negate()), 0.0), 1.0)


def trace(spheres: Sequence[Sphere], ray: Ray, bounces: int) -> Color:
    """Compute the color seen along a ray.

    Args:
        spheres: The scene's spheres.
        ray: The ray to trace.
        bounces: How many more reflections to follow (non-negative).

    Returns:
        The shaded color.
    """
    intersection = closest_intersection(spheres, ray)
    if intersection is None:
        return Color.black()

    brightness = surface_brightness(intersection.normal, ray.direction)

    color = spheres[intersection.sphere_index].color
    if bounces > 0:
        reflected = ray.reflect_at(intersection.position, intersection.normal)
        color = color + trace(spheres, reflected, bounces - 1)
    return color * brightness
