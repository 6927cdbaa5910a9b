"""Leaf-node hexagon geometry. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from hexmirror.models.primitives import Point

# sin(60°) and sin(30°) to the precision of the reference layout. The same
# truncated offsets are reused by every ring, so these must not change.
_SIN_60 = 0.866
_SIN_30 = 0.5


def hex_offsets(radius: int) -> tuple[int, int]:
    """Return ``(c, s)``: horizontal and vertical half-offsets of a hexagon.

    Both are truncated toward zero (``int()``), never rounded. Rings are built
    by chained addition of these values, so any other rounding drifts the
    outer ring away from the reference layout.
    """
    c = int(_SIN_60 * radius)
    s = int(_SIN_30 * radius)
    return c, s


def hex_pitch(radius: int) -> float:
    """Center-to-center distance between diagonal neighbours."""
    c, s = hex_offsets(radius)
    return math.hypot(c, radius + s)


def hexagon_vertices(center: Point | tuple[int, int], radius: int) -> NDArray[np.int32]:
    """Six vertices of a pointy-top hexagon, clockwise from the lower right.

    The order yields a convex polygon suitable for ``cv2.fillConvexPoly``;
    reordering it produces a self-intersecting outline.
    """
    x, y = center
    c, s = hex_offsets(radius)
    return np.array(
        [
            (x + c, y + s),
            (x, y + radius),
            (x - c, y + s),
            (x - c, y - s),
            (x, y - radius),
            (x + c, y - s),
        ],
        dtype=np.int32,
    )
