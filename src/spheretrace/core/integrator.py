"""Parallel Taichi integrator for bounce-limited specular shading.

This module runs the shading model of ``spheretrace.core.tracer`` inside a
Taichi kernel, one thread per pixel. Every pixel reads only the uploaded
scene and camera and writes exactly one cell of the image, so the pixel loop
parallelizes without synchronization.

Bounce recursion is expanded at compile time: the bounce count is a
``ti.template()`` argument, so each distinct count compiles its own kernel
and no runtime recursion is needed.

Key features:
    - Closest-hit search over the uploaded spheres
    - Saturating color accumulation across reflections
    - Double precision throughout

This module declares Taichi fields at import time; import it only after
``ti.init()`` has run.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from spheretrace.core.image import ImageBuffer
    >>> from spheretrace.core.integrator import render_into, setup_camera
    >>> from spheretrace.scene.intersection import load_spheres
    >>>
    >>> load_spheres(spheres)
    >>> setup_camera(camera)
    >>> image = ImageBuffer(800, 600)
    >>> render_into(image, bounces=3)
"""

import taichi as ti
import taichi.math as tm

from spheretrace.camera.pinhole import Camera, ScreenGeometry, get_screen_ray
from spheretrace.core.color import Color
from spheretrace.core.image import ImageBuffer
from spheretrace.core.ray import Ray, real, reflect, vec3
from spheretrace.scene.intersection import get_sphere_color, intersect_scene

# Highest bounce count the kernel is compiled for
MAX_BOUNCES = 16

# =============================================================================
# Camera State
# =============================================================================

_camera_origin = ti.Vector.field(3, dtype=real, shape=())
_screen_forward = ti.Vector.field(3, dtype=real, shape=())
_screen_half_right = ti.Vector.field(3, dtype=real, shape=())
_screen_half_up = ti.Vector.field(3, dtype=real, shape=())

# Single-ray probe used by trace_sample()
_probe_origin = ti.Vector.field(3, dtype=real, shape=())
_probe_direction = ti.Vector.field(3, dtype=real, shape=())
_probe_result = ti.Vector.field(3, dtype=real, shape=())


def setup_camera(camera: Camera) -> None:
    """Upload the camera's screen geometry for the render kernel."""
    geometry = ScreenGeometry.from_camera(camera)
    _camera_origin[None] = list(geometry.origin.as_tuple())
    _screen_forward[None] = list(geometry.forward.as_tuple())
    _screen_half_right[None] = list(geometry.half_right.as_tuple())
    _screen_half_up[None] = list(geometry.half_up.as_tuple())


def _check_bounces(bounces: int) -> None:
    if not 0 <= bounces <= MAX_BOUNCES:
        raise ValueError(f"Bounce count must be in [0, {MAX_BOUNCES}], got {bounces}")


# =============================================================================
# Shading
# =============================================================================


@ti.func
def surface_brightness(normal: vec3, direction: vec3) -> real:
    """Kernel version of ``tracer.surface_brightness``, clamped to [0, 1]."""
    return tm.clamp(tm.dot(normal, -direction), 0.0, 1.0)


@ti.func
def trace_ray(origin: vec3, direction: vec3, bounces: ti.template()) -> vec3:
    """Shade a ray, following up to ``bounces`` reflections.

    Args:
        origin: The starting point of the ray.
        direction: The unit direction of the ray.
        bounces: Compile-time number of reflections to follow.

    Returns:
        The shaded RGB color.
    """
    color = vec3(0.0, 0.0, 0.0)
    rec = intersect_scene(origin, direction)
    if rec.hit == 1:
        brightness = surface_brightness(rec.normal, direction)
        surface = get_sphere_color(rec.sphere_index)
        if ti.static(bounces > 0):
            reflected = trace_ray(rec.point, reflect(direction, rec.normal), bounces - 1)
            surface = tm.clamp(surface + reflected, 0.0, 1.0)
        color = surface * brightness
    return color


@ti.func
def _screen_coordinate(index: ti.i32, size: ti.i32) -> real:
    """Map a pixel index to [0, 1], both edges inclusive."""
    coordinate = ti.cast(0.5, real)
    if size > 1:
        coordinate = ti.cast(index, real) / ti.cast(size - 1, real)
    return coordinate


# =============================================================================
# Kernels
# =============================================================================


@ti.kernel
def _render_kernel(
    pixels: ti.types.ndarray(dtype=ti.f64, ndim=3),
    width: ti.i32,
    height: ti.i32,
    bounces: ti.template(),
):
    """Shade every pixel of a (height, width, 3) array."""
    for i, j in ti.ndrange(width, height):
        ray = get_screen_ray(
            _camera_origin[None],
            _screen_forward[None],
            _screen_half_right[None],
            _screen_half_up[None],
            _screen_coordinate(i, width),
            _screen_coordinate(j, height),
        )
        color = trace_ray(ray.origin, ray.direction, bounces)
        for c in ti.static(range(3)):
            pixels[j, i, c] = color[c]


@ti.kernel
def _trace_probe(bounces: ti.template()):
    _probe_result[None] = trace_ray(_probe_origin[None], _probe_direction[None], bounces)


# =============================================================================
# Public Rendering API
# =============================================================================


def render_into(image: ImageBuffer, bounces: int) -> None:
    """Render the uploaded scene and camera into ``image`` in place.

    Args:
        image: The target buffer; its dimensions set the pixel grid.
        bounces: Number of reflections to follow per ray.

    Raises:
        ValueError: If ``bounces`` is outside [0, MAX_BOUNCES].
    """
    _check_bounces(bounces)
    _render_kernel(image.pixels, image.width, image.height, bounces)


def trace_sample(ray: Ray, bounces: int) -> Color:
    """Shade a single ray against the uploaded scene.

    This is a Python-callable function for testing and debugging. For full
    images use render_into(), which processes all pixels in parallel.

    Raises:
        ValueError: If ``bounces`` is outside [0, MAX_BOUNCES].
    """
    _check_bounces(bounces)
    _probe_origin[None] = list(ray.position.as_tuple())
    _probe_direction[None] = list(ray.direction.as_tuple())
    _trace_probe(bounces)
    result = _probe_result[None]
    return Color(float(result[0]), float(result[1]), float(result[2]))
