"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera with a unit-distance virtual screen

Screen coordinates are normalized:
    x in [0, 1]: left to right across the image
    y in [0, 1]: top to bottom across the image
"""

from .pinhole import Camera, ScreenGeometry, get_screen_ray, screen_ray

__all__ = [
    "Camera",
    "ScreenGeometry",
    "screen_ray",
    "get_screen_ray",
]
