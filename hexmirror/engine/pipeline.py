"""Per-frame orchestrator — grid, sample, mirror, composite."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from hexmirror.engine.compositor import composite
from hexmirror.engine.grid import make_grid
from hexmirror.engine.mirror import mirror_points
from hexmirror.engine.sampler import sample_colors
from hexmirror.models.primitives import GREY, Color, ColorSampleSet, Grid

logger = logging.getLogger(__name__)


@dataclass
class FrameResult:
    """What was drawn for one frame. Discarded after the iteration."""

    grid: Grid = field(default_factory=list)
    colors: ColorSampleSet = field(default_factory=list)
    # Where the hexagons were drawn (mirrored grid, or the grid itself)
    positions: Grid = field(default_factory=list)
    elapsed_ms: float = 0.0


class MosaicRenderer:
    """Turns a captured frame into the hexagon mosaic, in place."""

    def __init__(
        self,
        radius: int,
        mirror: bool = True,
        background: Color = GREY,
    ) -> None:
        self.radius = radius
        self.mirror = mirror
        self.background = background

    def layout(self, width: int, height: int) -> Grid:
        """Grid centred on the frame."""
        return make_grid(width // 2, height // 2, self.radius)

    def positions_for(self, grid: Grid, width: int) -> Grid:
        # Axis x = width: the frame's own left/right flip for a centred grid
        return mirror_points(grid, width) if self.mirror else list(grid)

    def draw(self, frame: NDArray[np.uint8], colors: ColorSampleSet) -> Grid:
        """Composite ``colors`` at the standard positions without sampling."""
        height, width = frame.shape[:2]
        positions = self.positions_for(self.layout(width, height), width)
        composite(frame, positions, colors, self.radius, self.background)
        return positions

    def render(self, frame: NDArray[np.uint8]) -> FrameResult:
        """Sample ``frame`` on the grid and overwrite it with the mosaic."""
        t0 = time.perf_counter()
        height, width = frame.shape[:2]
        if width == 0 or height == 0:
            raise ValueError(f"cannot render an empty frame ({width}x{height})")

        grid = self.layout(width, height)
        colors = sample_colors(frame, grid)
        positions = self.positions_for(grid, width)
        composite(frame, positions, colors, self.radius, self.background)

        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("Rendered %dx%d frame in %.1fms", width, height, elapsed)
        return FrameResult(grid=grid, colors=colors, positions=positions, elapsed_ms=elapsed)
