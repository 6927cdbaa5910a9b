"""Start-up animation: three seed gradients chase around their rings, then fade.

Each ring gets a four-step gradient in one channel (inner: channel 2,
middle: channel 1, outer: channel 0, i.e. red/green/blue for BGR frames).
The rings rotate one position per frame for a full outer-ring revolution and
then every channel is halved until the mosaic is dark.
"""

from __future__ import annotations

from collections.abc import Iterator

from hexmirror.models.primitives import (
    BLACK,
    GRID_SIZE,
    RING_COUNT,
    Color,
    ColorSampleSet,
    ring_slice,
)

ROTATION_FRAMES = 18
FADE_FRAMES = 8

_GRADIENT = (255.0, 63.0, 15.0, 7.0)
# Channel lit on each ring, by ring number
_RING_CHANNEL = {1: 2, 2: 1, 3: 0}


def _gradient_color(channel: int, level: float) -> Color:
    values = [0.0, 0.0, 0.0]
    values[channel] = level
    return Color(values[0], values[1], values[2], 0.0)


def seed_colors() -> ColorSampleSet:
    """Initial sample set: a short gradient at the start of each ring."""
    colors = [BLACK] * GRID_SIZE
    for ring in range(1, RING_COUNT + 1):
        start = ring_slice(ring).start
        for offset, level in enumerate(_GRADIENT):
            colors[start + offset] = _gradient_color(_RING_CHANNEL[ring], level)
    return colors


def rotate_rings(colors: ColorSampleSet) -> ColorSampleSet:
    """Shift every ring one position toward lower index; index 0 is untouched."""
    rotated = list(colors)
    for ring in range(1, RING_COUNT + 1):
        members = colors[ring_slice(ring)]
        rotated[ring_slice(ring)] = members[1:] + members[:1]
    return rotated


def halve(colors: ColorSampleSet) -> ColorSampleSet:
    """Halve every channel, truncating like an integer shift."""
    return [
        Color(float(int(c.c0) >> 1), float(int(c.c1) >> 1), float(int(c.c2) >> 1), 0.0)
        for c in colors
    ]


def boot_frames() -> Iterator[ColorSampleSet]:
    """Yield the full animation, one Color Sample Set per displayed frame."""
    colors = seed_colors()
    for _ in range(ROTATION_FRAMES):
        yield colors
        colors = rotate_rings(colors)
    for _ in range(FADE_FRAMES):
        colors = halve(colors)
        yield colors
