"""Pinhole camera mapping screen coordinates to world-space rays.

A virtual screen lies one unit in front of the camera along ``forward`` and
is centered on the forward axis. Its width follows from the horizontal
field of view (``2 * tan(fovx / 2)``) and its height from the aspect ratio.

Screen coordinates are normalized:
    x in [0, 1]: left to right across the image
    y in [0, 1]: top to bottom across the image

The right direction is ``forward x up``; ``forward`` and ``up`` must be unit
length and perpendicular (not checked).

Example:
    >>> from spheretrace.camera.pinhole import Camera
    >>> from spheretrace.core.vector import Vector, UNIT_Y, UNIT_Z
    >>> camera = Camera.from_degrees(Vector.zero(), -UNIT_Z, UNIT_Y, 4.0 / 3.0, 90.0)
    >>> camera.screen_ray(0.5, 0.5).direction
    UnitVector(x=0.0, y=0.0, z=-1.0)
"""

import math
from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

from spheretrace.core.ray import KernelRay, Ray, real, vec3
from spheretrace.core.vector import UnitVector, Vector


@dataclass(frozen=True)
class Camera:
    """Configuration for a pinhole camera.

    Attributes:
        position: Camera position in world space.
        forward: View direction (unit length).
        up: Up direction (unit length, perpendicular to forward).
        aspect_ratio: Width divided by height of the output image.
        fovx: Horizontal field of view in radians.
    """

    position: Vector
    forward: UnitVector
    up: UnitVector
    aspect_ratio: float
    fovx: float

    @classmethod
    def from_degrees(
        cls,
        position: Vector,
        forward: UnitVector,
        up: UnitVector,
        aspect_ratio: float,
        fovx_degrees: float,
    ) -> "Camera":
        """Create a camera with the field of view given in degrees."""
        return cls(position, forward, up, aspect_ratio, math.radians(fovx_degrees))

    @property
    def right(self) -> Vector:
        return self.forward.vector.cross(self.up.vector)

    def screen_ray(self, x: float, y: float) -> Ray:
        """Generate the ray through normalized screen coordinates (x, y).

        Args:
            x: Horizontal coordinate in [0, 1] (0 = left edge).
            y: Vertical coordinate in [0, 1] (0 = top edge).

        Returns:
            A ray from the camera position through the screen point.

        Raises:
            ValueError: If x or y is outside [0, 1].
        """
        if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
            raise ValueError(f"Screen coordinates must be in [0, 1], got ({x}, {y})")

        geometry = ScreenGeometry.from_camera(self)
        x_unit = 2.0 * x - 1.0
        y_unit = -(2.0 * y - 1.0)
        point_on_screen = (
            self.position
            + self.forward.vector
            + geometry.half_right * x_unit
            + geometry.half_up * y_unit
        )
        return Ray(self.position, (point_on_screen - self.position).normalized())


def screen_ray(camera: Camera, x: float, y: float) -> Ray:
    return camera.screen_ray(x, y)


@dataclass(frozen=True)
class ScreenGeometry:
    """Precomputed screen plane of a camera.

    Attributes:
        origin: Camera position.
        forward: Vector from the camera to the screen center.
        half_right: Vector from the screen center to the middle of its right edge.
        half_up: Vector from the screen center to the middle of its top edge.
    """

    origin: Vector
    forward: Vector
    half_right: Vector
    half_up: Vector

    @classmethod
    def from_camera(cls, camera: Camera) -> "ScreenGeometry":
        screen_width = 2.0 * math.tan(camera.fovx / 2.0)
        screen_height = screen_width / camera.aspect_ratio
        return cls(
            origin=camera.position,
            forward=camera.forward.vector,
            half_right=camera.right * (screen_width / 2.0),
            half_up=camera.up.vector * (screen_height / 2.0),
        )


@ti.func
def get_screen_ray(
    origin: vec3,
    forward: vec3,
    half_right: vec3,
    half_up: vec3,
    x: real,
    y: real,
) -> KernelRay:
    """Generate a screen ray inside a Taichi kernel.

    Takes the fields of a ``ScreenGeometry`` and the same normalized
    coordinates as ``Camera.screen_ray``. Coordinates are not checked.
    """
    x_unit = 2.0 * x - 1.0
    y_unit = -(2.0 * y - 1.0)
    point_on_screen = origin + forward + x_unit * half_right + y_unit * half_up
    return KernelRay(origin=origin, direction=tm.normalize(point_on_screen - origin))
