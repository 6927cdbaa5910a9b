"""Compositor — paints the hexagon mosaic into a frame in place."""

from __future__ import annotations

from collections.abc import Sequence

import cv2
import numpy as np
from numpy.typing import NDArray

from hexmirror.models.primitives import GREY, Color, Point
from hexmirror.utils.geometry import hexagon_vertices


def clear(frame: NDArray[np.uint8], color: Color = GREY) -> None:
    """Fill the whole frame with ``color``."""
    height, width = frame.shape[:2]
    cv2.rectangle(frame, (0, 0), (width, height), color.as_scalar(), thickness=cv2.FILLED)


def draw_hexagon(frame: NDArray[np.uint8], center: Point, radius: int, color: Color) -> None:
    cv2.fillConvexPoly(frame, hexagon_vertices(center, radius), color.as_scalar(), lineType=cv2.LINE_8)


def composite(
    frame: NDArray[np.uint8],
    positions: Sequence[Point],
    colors: Sequence[Color],
    radius: int,
    background: Color = GREY,
) -> None:
    """Clear ``frame`` and draw one filled hexagon per (position, color) pair.

    Hexagons are drawn in index order. The frame is mutated; nothing is
    returned.
    """
    if len(positions) != len(colors):
        raise ValueError(
            f"positions and colors must align: {len(positions)} != {len(colors)}"
        )
    clear(frame, background)
    for pt, color in zip(positions, colors):
        draw_hexagon(frame, pt, radius, color)
