"""Command-line entry point.

Usage:
  hexmirror                         # live mosaic from camera 0
  hexmirror --camera 1 --radius 48  # other camera, smaller hexagons
  hexmirror --no-mirror --boot      # unmirrored, with start-up animation
  hexmirror --image in.jpg -o out.png
  hexmirror --print-grid 320 240    # dump the grid layout as JSON
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from hexmirror.config import Settings, build_settings
from hexmirror.engine.grid import make_grid
from hexmirror.errors import HexMirrorError
from hexmirror.models.grid_report import GridReport
from hexmirror.video.loop import render_image, run_frame_loop
from hexmirror.video.session import open_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexmirror",
        description="Mirrored hexagon mosaic of a live camera feed",
    )
    parser.add_argument("--camera", type=int, dest="camera_index", help="Capture device index")
    parser.add_argument("--radius", type=int, help="Hexagon radius in pixels")
    parser.add_argument(
        "--no-mirror",
        action="store_const",
        const=False,
        dest="mirror",
        help="Draw hexagons at their sampled positions instead of mirrored",
    )
    parser.add_argument(
        "--boot",
        action="store_const",
        const=True,
        dest="boot_animation",
        help="Play the start-up ring animation before going live",
    )
    parser.add_argument("--image", help="Render a still image instead of the camera feed")
    parser.add_argument("-o", "--output", help="Output file for --image")
    parser.add_argument(
        "--print-grid",
        nargs=2,
        type=int,
        metavar=("CX", "CY"),
        help="Print the grid centred on (CX, CY) as JSON and exit",
    )
    parser.add_argument("--log-level", dest="hexmirror_log_level", help="debug, info, warning, ...")
    return parser


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.hexmirror_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.image and not args.output:
        parser.error("--image requires -o/--output")

    try:
        settings = build_settings(
            camera_index=args.camera_index,
            radius=args.radius,
            mirror=args.mirror,
            boot_animation=args.boot_animation,
            hexmirror_log_level=args.hexmirror_log_level,
        )
        _configure_logging(settings)

        if args.print_grid:
            cx, cy = args.print_grid
            grid = make_grid(cx, cy, settings.radius)
            report = GridReport.from_grid(grid, settings.radius)
            print(report.model_dump_json(indent=2))
            return 0

        if args.image:
            render_image(args.image, args.output, settings)
            return 0

        with open_session(settings.camera_index, settings.window_name) as session:
            frames = run_frame_loop(session, settings)
        logger.info("Done: %d frames", frames)
        return 0
    except HexMirrorError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
