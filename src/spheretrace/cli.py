"""Command-line entry point: render the demo scene to a file or stdout.

Usage:
    spheretrace OUTPUT [options]

OUTPUT is a file path, or ``-`` to write the image to standard output.

Options:
    --width WIDTH       Image width in pixels (default: 800)
    --height HEIGHT     Image height in pixels (default: 600)
    --bounces BOUNCES   Reflections followed per ray (default: 3)
    --backend BACKEND   "taichi" (parallel, default) or "python" (reference)
    --arch ARCH         Taichi architecture, "cpu" (default) or "gpu"
    --format FORMAT     "ppm" (default) or "png"
    --log-level LEVEL   Logging level on stderr (default: WARNING)

Example:
    spheretrace out.ppm --width 400 --height 300
    spheretrace - > out.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from spheretrace.config import ARCHES, RenderConfig, init_taichi
from spheretrace.core.image import ImageBuffer
from spheretrace.core.render import BACKENDS, render
from spheretrace.logging_config import setup_logging
from spheretrace.preview.export import save_png, write_ppm
from spheretrace.scene.demo import DEMO_BOUNCES, DEMO_HEIGHT, DEMO_WIDTH, create_demo_scene

STDOUT_NAME = "-"

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="spheretrace",
        description="Render the demo sphere scene as a PPM (P3) or PNG image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "output",
        help="Output file path (may be - for stdout)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEMO_WIDTH,
        help=f"Image width in pixels (default: {DEMO_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEMO_HEIGHT,
        help=f"Image height in pixels (default: {DEMO_HEIGHT})",
    )
    parser.add_argument(
        "--bounces",
        type=int,
        default=DEMO_BOUNCES,
        help=f"Reflections followed per ray (default: {DEMO_BOUNCES})",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="taichi",
        help="Render backend (default: taichi)",
    )
    parser.add_argument(
        "--arch",
        choices=ARCHES,
        default="cpu",
        help="Taichi architecture (default: cpu)",
    )
    parser.add_argument(
        "--format",
        choices=("ppm", "png"),
        default="ppm",
        help="Output image format (default: ppm)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level on stderr (default: WARNING)",
    )
    return parser.parse_args(argv)


def write_output(image: ImageBuffer, output: str, image_format: str) -> None:
    """Write the image to a file path or, for ``-``, to stdout.

    Raises:
        ValueError: If PNG output is requested on stdout.
        OSError: If the output cannot be opened or written.
    """
    if image_format == "png":
        if output == STDOUT_NAME:
            raise ValueError("PNG output cannot be written to stdout")
        save_png(image, output)
    elif output == STDOUT_NAME:
        write_ppm(image, sys.stdout.buffer)
    else:
        with open(output, "wb") as sink:
            write_ppm(image, sink)
    logger.info("Wrote %s image to %s", image_format.upper(), output)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        config = RenderConfig(
            width=args.width,
            height=args.height,
            bounces=args.bounces,
            backend=args.backend,
            arch=args.arch,
        )
        if config.backend == "taichi":
            init_taichi(config.arch)

        spheres, camera = create_demo_scene(config.width, config.height)
        image = render(
            spheres,
            camera,
            config.width,
            config.height,
            config.bounces,
            backend=config.backend,
        )
        write_output(image, args.output, args.format)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
