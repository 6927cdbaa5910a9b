"""HexMirror mosaic engine."""

from hexmirror.engine.grid import make_grid
from hexmirror.engine.sampler import sample_colors
from hexmirror.engine.mirror import mirror_points
from hexmirror.engine.compositor import composite
from hexmirror.engine.pipeline import FrameResult, MosaicRenderer

__all__ = [
    "make_grid",
    "sample_colors",
    "mirror_points",
    "composite",
    "FrameResult",
    "MosaicRenderer",
]
