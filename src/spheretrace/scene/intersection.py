"""Scene sphere storage and closest-hit queries for Taichi kernels.

Spheres are uploaded into Taichi fields in Structure-of-Arrays layout. The
index a sphere gets here is its position in the scene's sphere list, so a
kernel hit record's ``sphere_index`` means the same thing as the
``sphere_index`` of a Python ``Intersection``.

This module declares Taichi fields at import time; import it only after
``ti.init()`` has run.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from spheretrace.scene.intersection import load_spheres
    >>> load_spheres(spheres)
    >>> # Use intersect_scene within a Taichi kernel
"""

from collections.abc import Sequence

import taichi as ti
import taichi.math as tm

from spheretrace.core.ray import real, vec3
from spheretrace.geometry.sphere import Sphere, hit_sphere


@ti.dataclass
class SceneHitRecord:
    """Record of the closest ray-scene intersection.

    Attributes:
        hit: Whether the ray intersected any sphere (1 if hit, 0 if miss).
        point: The intersection point. Only valid if hit == 1.
        normal: The outward unit normal. Only valid if hit == 1.
        sphere_index: Index of the hit sphere, -1 on a miss.
    """

    hit: ti.i32
    point: vec3
    normal: vec3
    sphere_index: ti.i32


# Maximum number of spheres supported in the scene
MAX_SPHERES = 1024

# Larger than any distance found in a scene
FAR_DISTANCE = 1e300

sphere_centers = ti.Vector.field(3, dtype=real, shape=MAX_SPHERES)
sphere_radii = ti.field(dtype=real, shape=MAX_SPHERES)
sphere_colors = ti.Vector.field(3, dtype=real, shape=MAX_SPHERES)
num_spheres = ti.field(dtype=ti.i32, shape=())


def clear_scene() -> None:
    """Remove all spheres from the scene.

    Only the count is reset; stale field entries are overwritten by the
    next upload.
    """
    num_spheres[None] = 0


def add_sphere(sphere: Sphere) -> int:
    """Append a sphere to the scene.

    Args:
        sphere: The sphere to upload.

    Returns:
        The index of the added sphere.

    Raises:
        RuntimeError: If the maximum number of spheres is exceeded.
    """
    idx = num_spheres[None]
    if idx >= MAX_SPHERES:
        raise RuntimeError(f"Maximum number of spheres ({MAX_SPHERES}) exceeded")
    sphere_centers[idx] = list(sphere.center.as_tuple())
    sphere_radii[idx] = sphere.radius
    sphere_colors[idx] = list(sphere.color.as_tuple())
    num_spheres[None] = idx + 1
    return idx


def load_spheres(spheres: Sequence[Sphere]) -> int:
    """Replace the scene contents with ``spheres``, keeping their order.

    Returns:
        The number of spheres uploaded.

    Raises:
        RuntimeError: If there are more than MAX_SPHERES spheres.
    """
    if len(spheres) > MAX_SPHERES:
        raise RuntimeError(f"Maximum number of spheres ({MAX_SPHERES}) exceeded")
    clear_scene()
    for sphere in spheres:
        add_sphere(sphere)
    return get_sphere_count()


def get_sphere_count() -> int:
    """Get the number of spheres in the scene."""
    return int(num_spheres[None])


@ti.func
def get_sphere_color(sphere_index: ti.i32) -> vec3:
    return sphere_colors[sphere_index]


@ti.func
def intersect_scene(ray_origin: vec3, ray_direction: vec3) -> SceneHitRecord:
    """Find the closest sphere hit along a ray.

    Distances are measured from the ray origin to each hit point; on equal
    distances the sphere with the lower index wins.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The unit direction of the ray.

    Returns:
        A SceneHitRecord for the closest hit, or a miss record.
    """
    closest_distance = ti.cast(FAR_DISTANCE, real)
    result = SceneHitRecord(
        hit=0,
        point=vec3(0.0, 0.0, 0.0),
        normal=vec3(0.0, 0.0, 0.0),
        sphere_index=-1,
    )

    n_spheres = num_spheres[None]
    for i in range(n_spheres):
        rec = hit_sphere(ray_origin, ray_direction, sphere_centers[i], sphere_radii[i])
        if rec.hit == 1:
            distance = tm.length(rec.point - ray_origin)
            if distance < closest_distance:
                closest_distance = distance
                result = SceneHitRecord(
                    hit=1,
                    point=rec.point,
                    normal=rec.normal,
                    sphere_index=i,
                )

    return result
