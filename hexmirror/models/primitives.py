"""Value types shared by every stage of the per-frame pipeline."""

from __future__ import annotations

from typing import NamedTuple

# ── Grid structure ──

GRID_SIZE = 37
RING_COUNT = 3

# Ring k occupies indices [3k(k-1) + 1, 3k(k+1) + 1); ring 0 is the focal point.
_RING_BOUNDS = ((0, 1), (1, 7), (7, 19), (19, 37))


class Point(NamedTuple):
    """Integer pixel coordinate. Compares equal to a plain ``(x, y)`` tuple."""

    x: int
    y: int


class Color(NamedTuple):
    """Four channel values in the frame's native order (BGR for OpenCV)."""

    c0: float
    c1: float
    c2: float
    alpha: float = 0.0

    def as_scalar(self) -> tuple[float, float, float, float]:
        """Tuple form accepted by OpenCV drawing calls."""
        return (float(self.c0), float(self.c1), float(self.c2), float(self.alpha))


BLACK = Color(0.0, 0.0, 0.0, 0.0)
GREY = Color(192.0, 192.0, 192.0, 0.0)

Grid = list[Point]
ColorSampleSet = list[Color]


def ring_of(index: int) -> int:
    """Ring number (0 = focal, 1 = inner, 2 = middle, 3 = outer) of a grid index."""
    for ring, (start, stop) in enumerate(_RING_BOUNDS):
        if start <= index < stop:
            return ring
    raise IndexError(f"grid index {index} outside 0..{GRID_SIZE - 1}")


def ring_slice(ring: int) -> slice:
    """Slice selecting the members of ``ring`` from a Grid or Color Sample Set."""
    if not 0 <= ring <= RING_COUNT:
        raise ValueError(f"ring must be in 0..{RING_COUNT}, got {ring}")
    start, stop = _RING_BOUNDS[ring]
    return slice(start, stop)
