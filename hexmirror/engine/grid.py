"""Grid generator — 37 hexagon centers in three rings around a focal point.

Every ring point is accumulated from its predecessor using a fixed table of
six step vectors; nothing is recomputed from the absolute center. Ring k:

1. Anchor: one step outward from the previous ring's anchor
   (up-right from the focal point for k=1, up-left afterwards).
2. Walk right k-1 times (the anchor already covers the top edge's first
   slot), then each remaining direction k times, for 6k points total.
"""

from __future__ import annotations

from hexmirror.models.primitives import RING_COUNT, Grid, Point
from hexmirror.utils.geometry import hex_offsets

# Direction names in walk order (clockwise, starting along the top edge).
UP_RIGHT = "up_right"
RIGHT = "right"
DOWN_RIGHT = "down_right"
DOWN_LEFT = "down_left"
LEFT = "left"
UP_LEFT = "up_left"

WALK_ORDER = (RIGHT, DOWN_RIGHT, DOWN_LEFT, LEFT, UP_LEFT, UP_RIGHT)


def step_vectors(radius: int) -> dict[str, tuple[int, int]]:
    """One-hex-pitch displacement for each of the six neighbour directions."""
    c, s = hex_offsets(radius)
    h = radius + s
    return {
        UP_RIGHT: (c, -h),
        RIGHT: (2 * c, 0),
        DOWN_RIGHT: (c, h),
        DOWN_LEFT: (-c, h),
        LEFT: (-2 * c, 0),
        UP_LEFT: (-c, -h),
    }


def _step(p: Point, v: tuple[int, int]) -> Point:
    return Point(p.x + v[0], p.y + v[1])


def ring_walk(anchor: Point, ring: int, steps: dict[str, tuple[int, int]]) -> Grid:
    """Walk ring ``ring`` starting at ``anchor``; returns its 6*ring points."""
    points = [anchor]
    current = anchor
    for i, direction in enumerate(WALK_ORDER):
        repeats = ring - 1 if i == 0 else ring
        for _ in range(repeats):
            current = _step(current, steps[direction])
            points.append(current)
    return points


def make_grid(cx: int, cy: int, radius: int) -> Grid:
    """Generate the 37-point hexagonal grid centred on ``(cx, cy)``.

    Precondition: ``radius > 0``. Not validated here; non-positive radii give
    coincident or inverted points (see ``Settings`` for the guard).

    Returns:
        Points in ring order: index 0 focal, 1–6 inner, 7–18 middle,
        19–36 outer.
    """
    steps = step_vectors(radius)
    focal = Point(int(cx), int(cy))
    grid: Grid = [focal]

    anchor = _step(focal, steps[UP_RIGHT])
    for ring in range(1, RING_COUNT + 1):
        if ring > 1:
            anchor = _step(anchor, steps[UP_LEFT])
        grid.extend(ring_walk(anchor, ring, steps))

    return grid
