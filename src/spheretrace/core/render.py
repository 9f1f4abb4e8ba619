"""Render loop: camera, tracer and image buffer composed over every pixel.

Two backends produce the same image:

- ``"python"`` walks the pixels sequentially (columns outer, rows inner)
  with the reference tracer. It needs no Taichi runtime.
- ``"taichi"`` uploads the scene and camera and shades all pixels in one
  parallel kernel. ``ti.init()`` must have been called (with
  ``default_fp=ti.f64``), see ``spheretrace.config.init_taichi``.

Pixel column ``i`` maps to screen ``x = i / (width - 1)`` and row ``j`` to
``y = j / (height - 1)``, so both image edges are sampled; a dimension of 1
samples the screen center.

Example:
    >>> from spheretrace.core.render import render
    >>> from spheretrace.scene.demo import create_demo_scene
    >>> spheres, camera = create_demo_scene()
    >>> image = render(spheres, camera, 80, 60, bounces=3)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Literal

from spheretrace.camera.pinhole import Camera
from spheretrace.core.image import ImageBuffer
from spheretrace.core.tracer import trace
from spheretrace.geometry.sphere import Sphere

logger = logging.getLogger(__name__)

Backend = Literal["python", "taichi"]

BACKENDS: tuple[str, ...] = ("python", "taichi")

# Callback receives (pixels_done, pixels_total)
ProgressCallback = Callable[[int, int], None]


def pixel_to_screen(index: int, size: int) -> float:
    """Map a pixel index in [0, size) to a screen coordinate in [0, 1]."""
    if size == 1:
        return 0.5
    return index / (size - 1)


def render(
    spheres: Sequence[Sphere],
    camera: Camera,
    width: int,
    height: int,
    bounces: int,
    *,
    backend: Backend = "python",
    callback: ProgressCallback | None = None,
) -> ImageBuffer:
    """Render a scene into a new image buffer.

    Args:
        spheres: The scene's spheres, in scan order.
        camera: The viewing camera.
        width: Image width in pixels (positive).
        height: Image height in pixels (positive).
        bounces: Reflections to follow per ray (non-negative).
        backend: ``"python"`` or ``"taichi"``.
        callback: Optional progress callback, called with
            (pixels_done, pixels_total) whenever the completed percentage
            changes. The taichi backend reports once, on completion.

    Returns:
        The populated image buffer.

    Raises:
        ValueError: If a dimension is not positive, ``bounces`` is negative,
            or ``backend`` is unknown.
    """
    if bounces < 0:
        raise ValueError(f"Bounce count must be non-negative, got {bounces}")
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend {backend!r}, expected one of {BACKENDS}")

    image = ImageBuffer(width, height)
    logger.info(
        "Rendering %d spheres at %dx%d with %d bounces (%s backend)",
        len(spheres),
        width,
        height,
        bounces,
        backend,
    )
    start_time = time.perf_counter()

    if backend == "taichi":
        _render_taichi(spheres, camera, image, bounces)
        if callback is not None:
            callback(width * height, width * height)
    else:
        _render_python(spheres, camera, image, bounces, callback)

    logger.info("Render finished in %.2fs", time.perf_counter() - start_time)
    return image


def _render_python(
    spheres: Sequence[Sphere],
    camera: Camera,
    image: ImageBuffer,
    bounces: int,
    callback: ProgressCallback | None,
) -> None:
    width, height = image.width, image.height
    pixels_total = width * height
    pixels_done = 0
    percent = 0
    for i in range(width):
        x = pixel_to_screen(i, width)
        for j in range(height):
            ray = camera.screen_ray(x, pixel_to_screen(j, height))
            image.set(i, j, trace(spheres, ray, bounces))

            pixels_done += 1
            new_percent = pixels_done * 100 // pixels_total
            if new_percent != percent:
                percent = new_percent
                logger.debug("%d%% done...", percent)
                if callback is not None:
                    callback(pixels_done, pixels_total)


def _render_taichi(
    spheres: Sequence[Sphere],
    camera: Camera,
    image: ImageBuffer,
    bounces: int,
) -> None:
    # Lazy imports: these modules declare Taichi fields
    from spheretrace.core.integrator import render_into, setup_camera
    from spheretrace.scene.intersection import load_spheres

    load_spheres(spheres)
    setup_camera(camera)
    render_into(image, bounces)
