"""Horizontal reflection of grid points."""

from __future__ import annotations

from collections.abc import Iterable

from hexmirror.models.primitives import Point


def mirror_points(points: Iterable[Point | tuple[int, int]], axis: int) -> list[Point]:
    """Reflect each point across ``x = axis``. Applying it twice is a no-op."""
    return [Point(axis - x, y) for x, y in points]
