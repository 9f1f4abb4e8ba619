"""Render configuration and Taichi runtime selection.

``RenderConfig`` collects the knobs of a render (image size, bounce limit,
backend) and validates them up front. Defaults reproduce the demo render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import taichi as ti

from spheretrace.core.render import BACKENDS, Backend
from spheretrace.scene.demo import DEMO_BOUNCES, DEMO_HEIGHT, DEMO_WIDTH

logger = logging.getLogger(__name__)

ARCHES = ("cpu", "gpu")


@dataclass
class RenderConfig:
    """Configuration for a single render.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        bounces: Number of reflections followed per ray.
        backend: ``"taichi"`` (parallel kernel) or ``"python"`` (reference loop).
        arch: Taichi architecture, ``"cpu"`` or ``"gpu"``.
    """

    width: int = DEMO_WIDTH
    height: int = DEMO_HEIGHT
    bounces: int = DEMO_BOUNCES
    backend: Backend = "taichi"
    arch: str = "cpu"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.bounces < 0:
            raise ValueError(f"Bounce count must be non-negative, got {self.bounces}")
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}, expected one of {BACKENDS}")
        if self.arch not in ARCHES:
            raise ValueError(f"Unknown arch {self.arch!r}, expected one of {ARCHES}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def init_taichi(arch: str = "cpu") -> None:
    """Initialize the Taichi runtime in double precision.

    Args:
        arch: ``"cpu"``, or ``"gpu"`` to try the GPU and fall back to the
            CPU when it is unavailable.
    """
    if arch == "gpu":
        try:
            ti.init(arch=ti.gpu, default_fp=ti.f64)
            logger.info("Using GPU backend")
            return
        except Exception:
            logger.warning("GPU backend unavailable, falling back to CPU")
    ti.init(arch=ti.cpu, default_fp=ti.f64)
    logger.info("Using CPU backend")
