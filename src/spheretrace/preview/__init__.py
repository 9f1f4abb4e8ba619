"""Preview module for image output.

Components:
    export: Plain-text PPM (P3) serialization and PNG export

Example:
    >>> from spheretrace.preview import write_ppm
    >>> with open("out.ppm", "wb") as sink:
    ...     write_ppm(image, sink)
"""

from .export import ppm_header, save_png, to_ppm_bytes, write_ppm

__all__ = [
    "write_ppm",
    "to_ppm_bytes",
    "ppm_header",
    "save_png",
]
