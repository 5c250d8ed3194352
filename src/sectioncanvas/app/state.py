from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from sectioncanvas.config import CanvasConfiguration
from sectioncanvas.model.geometry import Viewport, compute_initial_position, compute_initial_scale
from sectioncanvas.model.transform import TransformState

logger = logging.getLogger(__name__)


class TransformStore(QObject):
    """
    Single source of truth for the canvas transform.

    Written only by `initialize` (at mount) and `replace` (gesture updates);
    every write emits `transform_changed` so the renderer can redraw.
    """
    transform_changed = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state = TransformState()

    @property
    def state(self) -> TransformState:
        return self._state

    def initialize(self, viewport: Viewport, config: CanvasConfiguration) -> TransformState:
        """Fit one section's height into the viewport and anchor the content top-left."""
        scale = compute_initial_scale(viewport, config)
        state = TransformState(scale=scale, position=compute_initial_position(scale, config))
        logger.info(
            f"Initial transform for {viewport.width:g}x{viewport.height:g} viewport: "
            f"scale={state.scale:.4f}, position=({state.position.x:.2f}, {state.position.y:.2f})"
        )
        self.replace(state)
        return state

    def replace(self, state: TransformState) -> None:
        """Overwrite the current state. No merging, no partial updates."""
        self._state = state
        logger.debug(f"Transform replaced: {state}")
        self.transform_changed.emit(self._state)
