"""Unit tests for the image buffer."""

import numpy as np
import pytest


class TestImageBuffer:
    """Tests for ImageBuffer."""

    def test_starts_black(self):
        from spheretrace.core.color import Color
        from spheretrace.core.image import ImageBuffer

        image = ImageBuffer(4, 3)
        assert image.width == 4
        assert image.height == 3
        assert image.pixels.shape == (3, 4, 3)
        assert image.get(3, 2) == Color.black()

    def test_set_and_get(self):
        from spheretrace.core.color import Color
        from spheretrace.core.image import ImageBuffer

        image = ImageBuffer(4, 3)
        image.set(1, 2, Color(0.25, 0.5, 0.75))
        assert image.get(1, 2) == Color(0.25, 0.5, 0.75)
        # Pixel (x, y) lives at row y, column x
        np.testing.assert_array_equal(image.pixels[2, 1], [0.25, 0.5, 0.75])
        assert image.get(2, 1) == Color.black()

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
    def test_rejects_non_positive_dimensions(self, width, height):
        from spheretrace.core.image import ImageBuffer

        with pytest.raises(ValueError, match="positive"):
            ImageBuffer(width, height)

    @pytest.mark.parametrize("x, y", [(4, 0), (0, 3), (-1, 0), (0, -1)])
    def test_rejects_out_of_range_pixels(self, x, y):
        from spheretrace.core.color import Color
        from spheretrace.core.image import ImageBuffer

        image = ImageBuffer(4, 3)
        with pytest.raises(IndexError):
            image.set(x, y, Color.white())
        with pytest.raises(IndexError):
            image.get(x, y)

    def test_to_uint8_truncates(self):
        """Test quantization floors channel * 255 instead of rounding."""
        from spheretrace.core.color import Color
        from spheretrace.core.image import ImageBuffer

        image = ImageBuffer(2, 1)
        image.set(0, 0, Color(1.0, 0.5, 0.999))
        image.set(1, 0, Color(0.0, 0.7071067811865476, 0.003))
        quantized = image.to_uint8()
        assert quantized.dtype == np.uint8
        assert quantized[0, 0].tolist() == [255, 127, 254]
        assert quantized[0, 1].tolist() == [0, 180, 0]

    def test_repr(self):
        from spheretrace.core.image import ImageBuffer

        assert repr(ImageBuffer(2, 3)) == "ImageBuffer(width=2, height=3)"
