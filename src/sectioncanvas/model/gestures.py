"""
Gesture samples and the origin-anchored pinch math.

Samples are what the input source hands to the controller: already
normalized (viewport coordinates, absolute scale / offset), so the
controller never touches raw platform events except to suppress their
default handling.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from sectioncanvas.model.transform import Position, TransformState


def noop() -> None:
    pass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in viewport coordinates."""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass(frozen=True)
class GestureMemo:
    """
    Conditions captured on the first sample of a pinch.

    Neither field is refreshed mid-gesture: every sample is anchored
    relative to the configuration the gesture started from.
    """
    bounds: Rect
    initial: TransformState


@dataclass(frozen=True)
class PinchSample:
    """One pinch update: gesture center in viewport coordinates and the requested absolute scale."""
    origin: tuple[float, float]
    scale: float
    prevent_default: Callable[[], None] = field(default=noop, compare=False)


@dataclass(frozen=True)
class WheelSample:
    """One wheel update: absolute position to pan to."""
    offset: tuple[float, float]
    prevent_default: Callable[[], None] = field(default=noop, compare=False)


def anchored_position(memo: GestureMemo, origin: tuple[float, float], new_scale: float) -> Position:
    """
    Position that keeps the content point under `origin` visually fixed.

    The displacement from the container's center to the pinch origin is
    brought back to content units with the starting scale, then shifted by
    the scale change:

        disp = (center - origin) / initial.scale
        position = initial.position - disp * (new_scale - initial.scale)

    Args:
        memo: Conditions at gesture start.
        origin: Pinch center (x, y) in viewport coordinates.
        new_scale: Requested absolute scale for this sample.

    Returns:
        The new Position.
    """
    center = np.asarray(memo.bounds.center, dtype=np.float64)
    displacement = (center - np.asarray(origin, dtype=np.float64)) / memo.initial.scale
    scale_delta = new_scale - memo.initial.scale
    return Position.from_array(memo.initial.position.as_array() - displacement * scale_delta)
