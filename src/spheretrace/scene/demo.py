"""Demo scene: three colored spheres inside a room of white wall spheres.

The room is built from six spheres of radius 10000 whose near surfaces act
as floor, ceiling, side walls, back wall and a wall behind the camera:

- floor at y = -5, ceiling at y = 5
- left wall at x = -10, right wall at x = 10
- back wall at z = -15, wall behind the camera at z = 5

The camera sits at the origin looking down -z with +y up, a 4:3 aspect
ratio and a 90 degree horizontal field of view.

Example:
    >>> from spheretrace.core.render import render
    >>> from spheretrace.scene.demo import create_demo_scene, DEMO_WIDTH, DEMO_HEIGHT
    >>> spheres, camera = create_demo_scene()
    >>> image = render(spheres, camera, DEMO_WIDTH, DEMO_HEIGHT, bounces=3)
"""

from spheretrace.camera.pinhole import Camera
from spheretrace.core.color import Color
from spheretrace.core.vector import UNIT_Y, UNIT_Z, Vector
from spheretrace.geometry.sphere import Sphere

DEMO_WIDTH = 800
DEMO_HEIGHT = 600
DEMO_BOUNCES = 3

WALL_RADIUS = 10000.0


def create_demo_spheres() -> list[Sphere]:
    """Create the demo scene's spheres (3 colored + 6 walls)."""
    white = Color.white()
    return [
        Sphere(Vector(0.0, 0.0, -5.0), 1.0, Color.red()),
        Sphere(Vector(-3.0, 1.0, -5.0), 1.0, Color.green()),
        Sphere(Vector(5.0, 1.0, -10.0), 1.0, Color.blue()),
        # Floor and ceiling
        Sphere(Vector(0.0, -WALL_RADIUS - 5.0, 0.0), WALL_RADIUS, white),
        Sphere(Vector(0.0, WALL_RADIUS + 5.0, 0.0), WALL_RADIUS, white),
        # Left and right walls
        Sphere(Vector(-WALL_RADIUS - 10.0, 0.0, 0.0), WALL_RADIUS, white),
        Sphere(Vector(WALL_RADIUS + 10.0, 0.0, 0.0), WALL_RADIUS, white),
        # Back wall and the wall behind the camera
        Sphere(Vector(0.0, 0.0, -WALL_RADIUS - 15.0), WALL_RADIUS, white),
        Sphere(Vector(0.0, 0.0, WALL_RADIUS + 5.0), WALL_RADIUS, white),
    ]


def create_demo_camera(aspect_ratio: float = DEMO_WIDTH / DEMO_HEIGHT) -> Camera:
    """Create the demo camera.

    Args:
        aspect_ratio: Width divided by height of the output image.
    """
    return Camera.from_degrees(
        position=Vector.zero(),
        forward=-UNIT_Z,
        up=UNIT_Y,
        aspect_ratio=aspect_ratio,
        fovx_degrees=90.0,
    )


def create_demo_scene(
    width: int = DEMO_WIDTH,
    height: int = DEMO_HEIGHT,
) -> tuple[list[Sphere], Camera]:
    """Create the demo spheres and a camera matching the image size.

    Returns:
        Tuple of (spheres, camera).
    """
    return create_demo_spheres(), create_demo_camera(width / height)
