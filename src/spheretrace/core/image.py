"""Fixed-size RGB image buffer.

The buffer owns a NumPy array of shape (height, width, 3) with dtype
float64; row ``y`` and column ``x`` address pixel ``(x, y)``, which is the
row-major layout the serializer reads. The array is exposed through
``pixels`` so that render kernels can fill it in place.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from spheretrace.core.color import Color


class ImageBuffer:
    """A width x height grid of colors, initially black.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black image.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> npt.NDArray[np.float64]:
        """The backing array, shape (height, width, 3)."""
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        # NumPy would silently wrap negative indices
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of range for {self._width}x{self._height} image"
            )

    def set(self, x: int, y: int, color: Color) -> None:
        """Store ``color`` at pixel (x, y).

        Raises:
            IndexError: If (x, y) lies outside the image.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = color.as_tuple()

    def get(self, x: int, y: int) -> Color:
        """Read the color at pixel (x, y).

        Raises:
            IndexError: If (x, y) lies outside the image.
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_uint8(self) -> npt.NDArray[np.uint8]:
        """Quantize to 8-bit channels, truncating ``channel * 255``."""
        quantized = np.floor(self._pixels * 255.0)
        return np.clip(quantized, 0.0, 255.0).astype(np.uint8)

    def __repr__(self) -> str:
        return f"ImageBuffer(width={self._width}, height={self._height})"
