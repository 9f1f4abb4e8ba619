"""Scene module: kernel-side sphere storage and the demo scene.

Components:
    intersection: Sphere fields and closest-hit queries for Taichi kernels
    demo: The demo room with three colored spheres

Note: intersection is NOT imported here because it declares Taichi fields.
Import it directly from spheretrace.scene.intersection after ti.init().
"""

from .demo import (
    DEMO_BOUNCES,
    DEMO_HEIGHT,
    DEMO_WIDTH,
    create_demo_camera,
    create_demo_scene,
    create_demo_spheres,
)

__all__ = [
    "create_demo_scene",
    "create_demo_spheres",
    "create_demo_camera",
    "DEMO_WIDTH",
    "DEMO_HEIGHT",
    "DEMO_BOUNCES",
]
