"""
Layout Geometry
===============
Pure functions deriving the initial fit and the zoom range of the section
strip from the canvas configuration and a viewport sample.

The viewport is passed in explicitly every time: the display surface may
have been resized since the last call, so nothing here caches it.
"""
from __future__ import annotations

from dataclasses import dataclass

from sectioncanvas.config import CanvasConfiguration, MAX_ZOOM
from sectioncanvas.model.transform import Position


@dataclass(frozen=True)
class Viewport:
    """Visible area of the canvas in device pixels."""
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must have a positive size, got {self.width} x {self.height}.")


@dataclass(frozen=True)
class ZoomBounds:
    """Legal scale range. `max` is always 1.0; `min` may exceed it."""
    min: float
    max: float = MAX_ZOOM

    def clamp(self, scale: float) -> float:
        """
        Clamp `scale` into [min, max].

        When the content is narrower than the viewport at 100 % (min > max)
        the usable range collapses to the single point `max`.
        """
        if self.min > self.max:
            return self.max
        return max(self.min, min(self.max, scale))


def compute_total_extent(config: CanvasConfiguration) -> tuple[float, float]:
    """Return (total_width, total_height) of the content including paddings."""
    return config.total_width, config.total_height


def compute_initial_scale(viewport: Viewport, config: CanvasConfiguration) -> float:
    """
    Scale at which one section plus its vertical padding exactly fills the
    viewport height. Can be below or above 1 depending on the screen.
    """
    return viewport.height / (config.section_height + config.padding_around * 2)


def compute_initial_position(scale: float, config: CanvasConfiguration) -> Position:
    """
    Offset that keeps the content top-left anchored after scaling.

    The renderer scales about the container's center, which shrinks (or
    grows) the box symmetrically. Subtracting this offset from the top-left
    moves the scaled box back so its corner sits at the origin.

    Args:
        scale: The scale the content is rendered at.
        config: Canvas configuration.

    Returns:
        Position to store in the TransformState.
    """
    total_width, total_height = compute_total_extent(config)
    scaled_width = total_width * scale
    scaled_height = total_height * scale
    return Position(
        x=(total_width - scaled_width) / 2,
        y=(total_height - scaled_height) / 2,
    )


def compute_zoom_bounds(viewport: Viewport, config: CanvasConfiguration) -> ZoomBounds:
    """
    Zoom range for gestures.

    `min` is the scale at which the full content width fills the viewport
    width; `max` is 100 %. The bounds are returned as computed even when
    min > max; use ZoomBounds.clamp to apply them.
    """
    total_width, _ = compute_total_extent(config)
    return ZoomBounds(
        min=viewport.width / total_width,
        max=MAX_ZOOM,
    )
