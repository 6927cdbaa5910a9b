"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from hexmirror.config import Settings


# Reference layout used throughout: c = 55, s = 32, h = 96
REF_CENTER = (100, 100)
REF_RADIUS = 64

# Small radius whose whole grid fits comfortably inside FRAME_W x FRAME_H
SMALL_RADIUS = 10

FRAME_W = 200
FRAME_H = 160


def solid_frame(color: tuple[int, int, int], width: int = FRAME_W, height: int = FRAME_H) -> np.ndarray:
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:, :] = color
    return frame


def split_frame(left: tuple[int, int, int], right: tuple[int, int, int]) -> np.ndarray:
    """Left half one color, right half another."""
    frame = solid_frame(left)
    frame[:, FRAME_W // 2 :] = right
    return frame


class FakeCapture:
    """Capture source replaying a fixed list of reads. ``None`` = empty read."""

    def __init__(self, frames: list[np.ndarray | None]) -> None:
        self.frames = list(frames)
        self.reads = 0
        self.released = False

    def read(self):
        self.reads += 1
        if not self.frames:
            return False, None
        frame = self.frames.pop(0)
        return frame is not None, frame

    def release(self) -> None:
        self.released = True


class FakeDisplay:
    """Display sink recording shown frames; returns keys from a script."""

    def __init__(self, keys: list[int] | None = None) -> None:
        self.keys = list(keys or [])
        self.shown: list[np.ndarray] = []
        self.timeouts: list[int] = []
        self.closed = False

    def show(self, frame: np.ndarray) -> None:
        self.shown.append(frame.copy())

    def poll_key(self, timeout_ms: int) -> int:
        self.timeouts.append(timeout_ms)
        return self.keys.pop(0) if self.keys else -1

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        radius=SMALL_RADIUS,
        mirror=True,
        wait_key_ms=5,
        empty_frame_backoff_s=0.01,
        max_empty_frames=3,
        boot_animation=False,
    )


@pytest.fixture
def black_frame() -> np.ndarray:
    return solid_frame((0, 0, 0))
