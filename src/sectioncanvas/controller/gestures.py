"""
Gesture Controller
==================
Turns pinch and wheel samples into TransformState replacements.

Why is this file needed?
------------------------
1. Anchoring: A pinch must zoom around the point between the user's fingers,
   not around the canvas corner. The controller keeps the conditions from the
   start of the gesture (GestureMemo) and anchors every sample to them.
2. State machine: The memo lives only while a pinch is active. It is created
   on the first sample, reused unchanged for the rest of the gesture and
   dropped on end or cancellation.
3. Configuration: The input source asks the controller for the pinch scale
   bounds and the pan/zoom starting values at the start of each gesture.

Classes:
    GesturePhase: IDLE / ACTIVE.
    TransformHolder: Protocol satisfied by app.state.TransformStore.
    GestureController: One instance per canvas.
"""
from __future__ import annotations

from enum import Enum
import logging
from typing import Callable, Protocol

from sectioncanvas.config import CanvasConfiguration
from sectioncanvas.model.geometry import Viewport, ZoomBounds, compute_zoom_bounds
from sectioncanvas.model.gestures import GestureMemo, PinchSample, Rect, WheelSample, anchored_position
from sectioncanvas.model.transform import Position, TransformState

logger = logging.getLogger(__name__)


class TransformHolder(Protocol):
    """What the controller needs from the application's transform store."""
    @property
    def state(self) -> TransformState: ...
    def replace(self, state: TransformState) -> None: ...


class GesturePhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"


class GestureController:
    def __init__(
        self,
        store: TransformHolder,
        config: CanvasConfiguration,
        viewport_provider: Callable[[], Viewport],
        bounds_provider: Callable[[], Rect],
    ) -> None:
        self.store = store
        self.config = config
        self._viewport_provider = viewport_provider
        self._bounds_provider = bounds_provider
        self._memo: GestureMemo | None = None

    @property
    def phase(self) -> GesturePhase:
        return GesturePhase.IDLE if self._memo is None else GesturePhase.ACTIVE

    @property
    def memo(self) -> GestureMemo | None:
        return self._memo

    # ------------------------------------------------------------------------------
    # Gesture configuration (computed fresh at gesture start)
    # ------------------------------------------------------------------------------

    def pinch_scale_bounds(self) -> ZoomBounds:
        return compute_zoom_bounds(self._viewport_provider(), self.config)

    def pinch_from(self) -> float:
        return self.store.state.scale

    def wheel_from(self) -> Position:
        return self.store.state.position

    # ------------------------------------------------------------------------------
    # Pinch
    # ------------------------------------------------------------------------------

    def handle_pinch(self, sample: PinchSample) -> TransformState:
        """Apply one pinch sample, anchored at the sample's origin."""
        sample.prevent_default()

        if self._memo is None:
            self._memo = GestureMemo(bounds=self._bounds_provider(), initial=self.store.state)
            logger.debug(
                f"Pinch started at ({sample.origin[0]:.1f}, {sample.origin[1]:.1f}) "
                f"from scale {self._memo.initial.scale:.4f}"
            )

        state = TransformState(
            scale=sample.scale,
            position=anchored_position(self._memo, sample.origin, sample.scale),
        )
        self.store.replace(state)
        return state

    def end_pinch(self) -> None:
        """All contact points lifted: forget the memo, keep the state."""
        if self._memo is not None:
            logger.debug(f"Pinch ended at scale {self.store.state.scale:.4f}")
        self._memo = None

    def cancel_pinch(self) -> None:
        """Drop the memo without a final update; the last applied sample stands."""
        if self._memo is not None:
            logger.debug("Pinch cancelled")
        self._memo = None

    # ------------------------------------------------------------------------------
    # Wheel
    # ------------------------------------------------------------------------------

    def handle_wheel(self, sample: WheelSample) -> TransformState:
        """Pan to the sample's absolute offset. The scale is left untouched."""
        sample.prevent_default()

        x, y = sample.offset
        state = self.store.state.with_position(Position(float(x), float(y)))
        self.store.replace(state)
        return state
