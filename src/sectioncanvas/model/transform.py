"""
Transform values shared by the geometry, the store and the controller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np


@dataclass(frozen=True)
class Position:
    """Translation of the content container, subtracted from its top-left."""
    x: float = 0.0
    y: float = 0.0

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Position:
        x, y = np.asarray(arr, dtype=np.float64).reshape(2)
        return cls(float(x), float(y))


@dataclass(frozen=True)
class TransformState:
    """
    Uniform scale plus translation applied to the content container.

    The scale is applied about the container's own center; the position is
    applied to its top-left corner as (-x, -y). Instances are replaced on
    every update, never mutated.
    """
    scale: float = 1.0
    position: Position = field(default_factory=Position)

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise ValueError(f"Scale must be a finite positive number, got {self.scale}.")

    def with_position(self, position: Position) -> TransformState:
        return TransformState(scale=self.scale, position=position)
