"""
Configuration & Constants
=========================
This module serves as the central registry for the canvas layout and global
constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (section sizes, paddings, colours,
   gesture tuning) from being scattered throughout the code.
2. Validation: The canvas configuration is checked once, at startup, so the
   geometry code never has to guard against division by zero.

Exports:
    CanvasConfiguration: Immutable description of the section strip.
    DEFAULT_CANVAS: The configuration used by the application.
"""
from __future__ import annotations

from dataclasses import dataclass

# Application identity
ORG_ID = "sectioncanvas"
APP_ID = "section-canvas"
VISIBLE_APP_NAME = "Section Canvas"

# Stable section keys, rendered left to right.
SECTION_KEYS: tuple[str, ...] = ("a1x", "b2y", "c3z", "d4w")

# 100 % zoom = one content pixel per device pixel
MAX_ZOOM: float = 1.0

# Styling
CANVAS_BACKGROUND = "#FAF8F6"
SECTION_FILL = "#FFFFFF"
SECTION_BORDER = "#E0E0E0"
SECTION_RADIUS = 8.0
HUD_BACKGROUND = "rgba(187, 247, 208, 115)"

# Input tuning
GESTURE_END_DELAY_MS = 150  # no explicit end for wheel devices
PINCH_WHEEL_RATIO = 100.0  # ctrl+wheel delta (px) per e-fold of scale
WHEEL_PIXELS_PER_NOTCH = 100.0  # one 120-unit wheel notch


@dataclass(frozen=True)
class CanvasConfiguration:
    """
    Fixed-size sections arranged in a single horizontal row.

    All values are in content pixels (1 content pixel == 1 device pixel at
    scale 1.0).
    """
    section_width: float = 1660.0
    section_height: float = 1024.0
    padding_around: float = 100.0
    padding_between: float = 100.0
    section_count: int = len(SECTION_KEYS)

    def __post_init__(self) -> None:
        if self.section_width <= 0 or self.section_height <= 0:
            raise ValueError(
                f"Section size must be positive, got {self.section_width} x {self.section_height}."
            )
        if self.padding_around < 0 or self.padding_between < 0:
            raise ValueError("Paddings must not be negative.")
        if self.section_count < 1:
            raise ValueError(f"At least one section is required, got {self.section_count}.")

    @property
    def total_width(self) -> float:
        return (
            self.section_width * self.section_count
            + self.padding_around * 2
            + self.padding_between * (self.section_count - 1)
        )

    @property
    def total_height(self) -> float:
        return self.section_height + self.padding_around * 2


DEFAULT_CANVAS = CanvasConfiguration()
