"""Image export: plain-text PPM (P3) and PNG.

P3 layout, byte for byte:

    P3
    <width> <height>
    255
    R G B R G B ... R G B \\n        (one line per image row)

Every ``R G B`` triplet is followed by a single space, including the last
one on a row. Channels are ``floor(channel * 255)``, truncated rather than
rounded.

Example:
    >>> import sys
    >>> from spheretrace.preview.export import write_ppm
    >>> write_ppm(image, sys.stdout.buffer)
"""

from __future__ import annotations

import io
from typing import BinaryIO

from PIL import Image as PILImage

from spheretrace.core.image import ImageBuffer

MAX_CHANNEL_VALUE = 255


def ppm_header(width: int, height: int) -> str:
    return f"P3\n{width} {height}\n{MAX_CHANNEL_VALUE}\n"


def write_ppm(image: ImageBuffer, sink: BinaryIO) -> None:
    """Serialize an image as P3 text into a binary sink.

    The sink is flushed before returning. Write and flush errors propagate
    to the caller unchanged.

    Args:
        image: The rendered image.
        sink: A writable binary file object (file, ``sys.stdout.buffer``,
            ``io.BytesIO``).
    """
    quantized = image.to_uint8()

    sink.write(ppm_header(image.width, image.height).encode("ascii"))
    for row in quantized:
        line = "".join(f"{r} {g} {b} " for r, g, b in row.tolist())
        sink.write(line.encode("ascii") + b"\n")
    sink.flush()


def to_ppm_bytes(image: ImageBuffer) -> bytes:
    """Return the P3 serialization of ``image`` as bytes."""
    buffer = io.BytesIO()
    write_ppm(image, buffer)
    return buffer.getvalue()


def save_png(image: ImageBuffer, filepath: str) -> None:
    """Save the image as an 8-bit PNG file.

    Channels are quantized the same way as in the P3 output, with no gamma
    correction applied.

    Args:
        image: The rendered image.
        filepath: Output file path (should end in .png).
    """
    pil_image = PILImage.fromarray(image.to_uint8())
    pil_image.save(filepath)
