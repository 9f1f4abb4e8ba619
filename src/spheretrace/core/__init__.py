"""Core rendering module.

Components:
    vector: Vector and UnitVector arithmetic
    color: RGB color with saturating addition
    ray: Ray with advance/reflect, plus Taichi ray types
    image: Image buffer backed by a NumPy array
    tracer: Reference closest-hit search and recursive shading
    render: Render loop over every pixel (python or taichi backend)
    integrator: Parallel Taichi shading kernel

Note: tracer, render and integrator are NOT imported here. tracer and render
depend on the geometry and camera packages, which import this package
(circular imports); integrator declares Taichi fields. Import them directly
from spheretrace.core.<module> when needed.
"""

from .color import Color
from .image import ImageBuffer
from .ray import KernelRay, Ray, advance, ray_at, real, reflect_at, vec3
from .vector import (
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    UnitVector,
    Vector,
    cross,
    dot,
    length,
    normalize,
    reflect,
)

__all__ = [
    "Vector",
    "UnitVector",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    "dot",
    "cross",
    "length",
    "normalize",
    "reflect",
    "Color",
    "Ray",
    "advance",
    "reflect_at",
    "KernelRay",
    "ray_at",
    "real",
    "vec3",
    "ImageBuffer",
]
