"""Tests for the sampler."""

import numpy as np

from hexmirror.engine.grid import make_grid
from hexmirror.engine.sampler import read_pixel, sample_colors
from hexmirror.models.primitives import BLACK, GREY, GRID_SIZE, Color, Point
from tests.conftest import FRAME_H, FRAME_W, REF_CENTER, REF_RADIUS, SMALL_RADIUS, solid_frame


def test_reference_sample():
    frame = np.zeros((240, 320, 3), dtype=np.uint8)
    frame[4, 155] = (10, 20, 30)
    grid = make_grid(*REF_CENTER, REF_RADIUS)

    colors = sample_colors(frame, grid)

    assert len(colors) == GRID_SIZE
    assert colors[1] == Color(10, 20, 30, 0)


def test_focal_sample_is_always_black():
    frame = solid_frame((200, 100, 50))
    grid = make_grid(FRAME_W // 2, FRAME_H // 2, SMALL_RADIUS)
    colors = sample_colors(frame, grid)
    assert colors[0] == BLACK
    assert all(c == Color(200, 100, 50, 0) for c in colors[1:])


def test_out_of_bounds_falls_back():
    frame = solid_frame((9, 9, 9))
    # Most of the reference grid lies above/left of a 200x160 frame at this center
    grid = make_grid(0, 0, REF_RADIUS)
    colors = sample_colors(frame, grid)
    for pt, color in zip(grid[1:], colors[1:]):
        inside = 0 <= pt.x < FRAME_W and 0 <= pt.y < FRAME_H
        assert color == (Color(9, 9, 9, 0) if inside else BLACK)


def test_custom_fallback():
    frame = solid_frame((1, 2, 3), width=4, height=4)
    colors = sample_colors(frame, make_grid(1000, 1000, 20), fallback=GREY)
    assert colors[0] == BLACK
    assert all(c == GREY for c in colors[1:])


def test_sampling_is_deterministic():
    rng = np.random.default_rng(7)
    frame = rng.integers(0, 256, size=(FRAME_H, FRAME_W, 3), dtype=np.uint8)
    grid = make_grid(FRAME_W // 2, FRAME_H // 2, SMALL_RADIUS)
    assert sample_colors(frame, grid) == sample_colors(frame, grid)


def test_sampling_does_not_mutate_frame():
    frame = solid_frame((5, 6, 7))
    before = frame.copy()
    sample_colors(frame, make_grid(100, 80, SMALL_RADIUS))
    assert np.array_equal(frame, before)


def test_read_pixel_negative_coordinates():
    frame = solid_frame((50, 50, 50))
    assert read_pixel(frame, Point(-1, 10)) is None
    assert read_pixel(frame, Point(10, -1)) is None


def test_read_pixel_past_edge():
    frame = solid_frame((50, 50, 50))
    assert read_pixel(frame, Point(FRAME_W, 0)) is None
    assert read_pixel(frame, Point(0, FRAME_H)) is None
    assert read_pixel(frame, Point(FRAME_W - 1, FRAME_H - 1)) == Color(50, 50, 50, 0)


def test_read_pixel_grayscale():
    frame = np.full((10, 10), 77, dtype=np.uint8)
    assert read_pixel(frame, (3, 3)) == Color(77, 77, 77, 0)


def test_read_pixel_two_channel_frame_is_unreadable():
    frame = np.zeros((10, 10, 2), dtype=np.uint8)
    assert read_pixel(frame, (3, 3)) is None


def test_read_pixel_bgra_drops_alpha():
    frame = np.zeros((10, 10, 4), dtype=np.uint8)
    frame[2, 3] = (1, 2, 3, 255)
    assert read_pixel(frame, (3, 2)) == Color(1, 2, 3, 0)
