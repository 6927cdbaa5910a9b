"""Frame loop: capture, render the mosaic, display, until a key is pressed."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

import cv2
import numpy as np
from numpy.typing import NDArray

from hexmirror.config import Settings
from hexmirror.engine.boot import boot_frames
from hexmirror.engine.pipeline import MosaicRenderer
from hexmirror.errors import CaptureError, DisplayError
from hexmirror.models.primitives import Color
from hexmirror.video.session import NO_KEY, CaptureSource, VideoSession

logger = logging.getLogger(__name__)


def renderer_from_settings(settings: Settings) -> MosaicRenderer:
    return MosaicRenderer(
        radius=settings.radius,
        mirror=settings.mirror,
        background=Color(*settings.background),
    )


def _is_empty(frame: NDArray[np.uint8] | None) -> bool:
    return frame is None or frame.ndim < 2 or frame.shape[0] == 0 or frame.shape[1] == 0


def next_frame(
    capture: CaptureSource,
    backoff_s: float,
    max_empty: int,
    sleep: Callable[[float], None] = time.sleep,
) -> NDArray[np.uint8]:
    """Block until the capture source yields a non-empty frame.

    An empty read means "no frame yet": back off and retry.

    Raises:
        CaptureError: after ``max_empty`` consecutive empty reads.
    """
    for attempt in range(1, max_empty + 1):
        ok, frame = capture.read()
        if ok and not _is_empty(frame):
            return frame
        logger.debug("Empty frame (%d/%d), backing off %.3fs", attempt, max_empty, backoff_s)
        sleep(backoff_s)
    raise CaptureError(f"No frame after {max_empty} attempts")


def play_boot_animation(
    session: VideoSession,
    renderer: MosaicRenderer,
    shape: tuple[int, ...],
    settings: Settings,
) -> bool:
    """Show the start-up animation. Returns False if a key interrupted it."""
    logger.info("Playing boot animation")
    for colors in boot_frames():
        canvas = np.zeros(shape, dtype=np.uint8)
        renderer.draw(canvas, colors)
        session.display.show(canvas)
        if session.display.poll_key(settings.wait_key_ms) != NO_KEY:
            return False
    return True


def run_frame_loop(
    session: VideoSession,
    settings: Settings,
    sleep: Callable[[float], None] = time.sleep,
    max_frames: int | None = None,
) -> int:
    """Run until a key is pressed (or ``max_frames`` frames were shown).

    Returns:
        The number of live frames rendered.
    """
    renderer = renderer_from_settings(settings)
    frames = 0
    booted = not settings.boot_animation

    while max_frames is None or frames < max_frames:
        frame = next_frame(
            session.capture,
            settings.empty_frame_backoff_s,
            settings.max_empty_frames,
            sleep=sleep,
        )

        if not booted:
            booted = True
            if not play_boot_animation(session, renderer, frame.shape, settings):
                break

        renderer.render(frame)
        session.display.show(frame)
        frames += 1

        if session.display.poll_key(settings.wait_key_ms) != NO_KEY:
            logger.info("Key pressed, stopping after %d frames", frames)
            break

    return frames


def render_image(input_path: str | Path, output_path: str | Path, settings: Settings) -> None:
    """Render the mosaic of a still image to a file."""
    frame = cv2.imread(str(input_path), cv2.IMREAD_COLOR)
    if frame is None or _is_empty(frame):
        raise CaptureError(f"Unable to read image {input_path}")

    result = renderer_from_settings(settings).render(frame)
    logger.info("Rendered %s in %.1fms", input_path, result.elapsed_ms)

    try:
        written = cv2.imwrite(str(output_path), frame)
    except cv2.error as e:
        raise DisplayError(f"Unable to write image {output_path}: {e}") from e
    if not written:
        raise DisplayError(f"Unable to write image {output_path}")
