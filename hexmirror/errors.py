"""Exception hierarchy.

Only fatal conditions are modeled as exceptions. Per-point sampling misses
are ordinary ``None`` values handled inside the sampler.
"""

from __future__ import annotations


class HexMirrorError(Exception):
    """Base class for all errors raised by hexmirror."""


class ConfigurationError(HexMirrorError):
    """Settings failed validation (e.g. non-positive radius)."""


class CaptureError(HexMirrorError):
    """The capture source could not be opened or stopped producing frames."""


class DisplayError(HexMirrorError):
    """The display sink (window or output file) rejected a frame."""
