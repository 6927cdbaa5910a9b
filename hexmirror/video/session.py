"""Capture/display session — the only stateful resource in the program.

``open_session`` acquires the camera and the window together and guarantees
both are released on every exit path, including exceptions raised by the
frame loop.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Protocol

import cv2
import numpy as np
from numpy.typing import NDArray

from hexmirror.errors import CaptureError, DisplayError

logger = logging.getLogger(__name__)

# cv2.waitKey result when no key was pressed
NO_KEY = -1


class CaptureSource(Protocol):
    def read(self) -> tuple[bool, NDArray[np.uint8] | None]: ...

    def release(self) -> None: ...


class DisplaySink(Protocol):
    def show(self, frame: NDArray[np.uint8]) -> None: ...

    def poll_key(self, timeout_ms: int) -> int: ...

    def close(self) -> None: ...


class OpenCVCamera:
    """``cv2.VideoCapture`` adapter that turns OpenCV failures into CaptureError."""

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self._cap = cv2.VideoCapture(index)
        if not self._cap.isOpened():
            self._cap.release()
            raise CaptureError(f"Unable to open camera {index}")

    def read(self) -> tuple[bool, NDArray[np.uint8] | None]:
        try:
            return self._cap.read()
        except cv2.error as e:
            raise CaptureError(f"Camera {self.index} read failed: {e}") from e

    def release(self) -> None:
        self._cap.release()


class OpenCVWindow:
    """HighGUI window used as the display sink."""

    def __init__(self, name: str) -> None:
        self.name = name
        try:
            cv2.namedWindow(name, cv2.WINDOW_AUTOSIZE)
        except cv2.error as e:
            raise DisplayError(f"Unable to create window {name!r}: {e}") from e

    def show(self, frame: NDArray[np.uint8]) -> None:
        try:
            cv2.imshow(self.name, frame)
        except cv2.error as e:
            raise DisplayError(f"imshow failed: {e}") from e

    def poll_key(self, timeout_ms: int) -> int:
        try:
            return cv2.waitKey(timeout_ms)
        except cv2.error as e:
            raise DisplayError(f"waitKey failed: {e}") from e

    def close(self) -> None:
        cv2.destroyWindow(self.name)


@dataclass
class VideoSession:
    capture: CaptureSource
    display: DisplaySink

    def close(self) -> None:
        """Release the capture device, then the window, even if the first fails."""
        try:
            self.capture.release()
        finally:
            self.display.close()


@contextmanager
def open_session(camera_index: int, window_name: str) -> Iterator[VideoSession]:
    """Open the camera and window for the duration of the ``with`` block."""
    capture = OpenCVCamera(camera_index)
    try:
        display = OpenCVWindow(window_name)
    except DisplayError:
        capture.release()
        raise

    session = VideoSession(capture=capture, display=display)
    logger.info("Session opened: camera %d, window %r", camera_index, window_name)
    try:
        yield session
    finally:
        session.close()
        logger.info("Session closed")
