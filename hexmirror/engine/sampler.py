"""Per-point color sampling with a black focal point and soft fallback."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from hexmirror.models.primitives import BLACK, Color, ColorSampleSet, Grid, Point


def read_pixel(frame: NDArray[np.uint8], point: Point | tuple[int, int]) -> Color | None:
    """Color at ``point`` or ``None`` if it cannot be read.

    Negative coordinates are treated as out of bounds (numpy would otherwise
    index from the far edge). Single-channel frames are replicated into the
    three color channels. Alpha is always zero.
    """
    x, y = point
    if frame.ndim < 2:
        return None
    height, width = frame.shape[:2]
    if not (0 <= x < width and 0 <= y < height):
        return None

    pixel = frame[y, x]
    if frame.ndim == 2:
        v = float(pixel)
        return Color(v, v, v, 0.0)
    if pixel.shape[0] < 3:
        return None
    return Color(float(pixel[0]), float(pixel[1]), float(pixel[2]), 0.0)


def sample_colors(
    frame: NDArray[np.uint8],
    grid: Grid,
    fallback: Color = BLACK,
) -> ColorSampleSet:
    """Index-aligned colors for ``grid``.

    Index 0 (the focal point) is always black: nothing is lit there. Points
    that cannot be read fall back to ``fallback`` instead of aborting the
    frame.
    """
    colors: ColorSampleSet = []
    for i, pt in enumerate(grid):
        if i == 0:
            colors.append(BLACK)
            continue
        sampled = read_pixel(frame, pt)
        colors.append(fallback if sampled is None else sampled)
    return colors
