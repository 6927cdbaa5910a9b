"""Serializable description of a generated grid, for ``--print-grid``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hexmirror.models.primitives import Grid, ring_of
from hexmirror.utils.geometry import hex_offsets, hex_pitch


class GridPoint(BaseModel):
    index: int
    ring: int
    x: int
    y: int


class GridReport(BaseModel):
    center: tuple[int, int]
    radius: int
    c: int = Field(..., description="Truncated horizontal half-offset (0.866 * radius)")
    s: int = Field(..., description="Truncated vertical offset (0.5 * radius)")
    pitch: float
    points: list[GridPoint] = Field(default_factory=list)

    @classmethod
    def from_grid(cls, grid: Grid, radius: int) -> GridReport:
        c, s = hex_offsets(radius)
        return cls(
            center=(grid[0].x, grid[0].y),
            radius=radius,
            c=c,
            s=s,
            pitch=round(hex_pitch(radius), 3),
            points=[GridPoint(index=i, ring=ring_of(i), x=p.x, y=p.y) for i, p in enumerate(grid)],
        )
