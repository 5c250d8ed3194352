"""
Gesture Input Source
====================
Event filter translating raw Qt input into PinchSample / WheelSample.

Why is this file needed?
------------------------
1. Normalization: Touch pinches (QPinchGesture), trackpad pinches
   (QNativeGestureEvent), ctrl+wheel pinches and plain wheel scrolling all
   report differently. This class turns them into absolute samples in
   viewport coordinates so the GestureController never sees Qt events.
2. Accumulation: Pinch scale is tracked from the scale at gesture start and
   clamped into the ZoomBounds computed at that moment. Wheel offsets are
   absolute: `from + accumulated delta`, with `from` rebased once at the
   start of each wheel gesture.
3. Gesture end: Wheel devices report no end, so a single-shot timer closes
   the gesture after GESTURE_END_DELAY_MS of silence.

Every event handled here is consumed so Qt's default scrolling never runs.
"""
from __future__ import annotations

import logging
import math
from typing import Callable

import numpy as np
from PySide6.QtCore import QEvent, QObject, QTimer, Qt
from PySide6.QtGui import QNativeGestureEvent, QWheelEvent
from PySide6.QtWidgets import QGestureEvent, QWidget

from sectioncanvas.config import GESTURE_END_DELAY_MS, PINCH_WHEEL_RATIO, WHEEL_PIXELS_PER_NOTCH
from sectioncanvas.controller.gestures import GestureController
from sectioncanvas.model.geometry import ZoomBounds
from sectioncanvas.model.gestures import PinchSample, WheelSample, noop
from sectioncanvas.model.transform import Position

logger = logging.getLogger(__name__)


class GestureInputSource(QObject):
    def __init__(self, controller: GestureController, target: QWidget, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._target = target

        # pinch
        self._pinching = False
        self._pinch_bounds: ZoomBounds | None = None
        self._pinch_from: float = 1.0
        self._pinch_scale: float = 1.0
        self._wheel_pinch = False

        # wheel
        self._wheel_from: Position | None = None
        self._wheel_delta = np.zeros(2, dtype=np.float64)

        self._idle_timer = QTimer(self)
        self._idle_timer.setSingleShot(True)
        self._idle_timer.setInterval(GESTURE_END_DELAY_MS)
        self._idle_timer.timeout.connect(self._on_wheel_idle)

        target.installEventFilter(self)

    # ------------------------------------------------------------------------------
    # Pinch
    # ------------------------------------------------------------------------------

    @property
    def is_pinching(self) -> bool:
        return self._pinching

    def pinch_begin(self) -> None:
        """
        Capture the scale bounds and the starting scale for a new pinch.

        Any gesture still open (a ctrl+wheel pinch waiting for its idle
        timeout, or a wheel pan) is closed first, so the new pinch always
        gets a fresh memo and no stale timer can end it.
        """
        self._idle_timer.stop()
        if self._pinching:
            self.controller.end_pinch()
        self._wheel_pinch = False
        self.wheel_end()

        self._pinching = True
        self._pinch_bounds = self.controller.pinch_scale_bounds()
        self._pinch_from = self.controller.pinch_from()
        self._pinch_scale = self._pinch_from

    def pinch_zoom_by(
        self,
        origin: tuple[float, float],
        factor: float,
        prevent_default: Callable[[], None] = noop,
    ) -> None:
        """Incremental pinch: multiply the running scale by `factor`."""
        if not self._pinching:
            self.pinch_begin()
        self._pinch_scale = self._pinch_bounds.clamp(self._pinch_scale * factor)
        self.controller.handle_pinch(PinchSample(origin=origin, scale=self._pinch_scale, prevent_default=prevent_default))

    def pinch_zoom_to_total(
        self,
        origin: tuple[float, float],
        total_factor: float,
        prevent_default: Callable[[], None] = noop,
    ) -> None:
        """Cumulative pinch: scale is `total_factor` times the scale at gesture start."""
        if not self._pinching:
            self.pinch_begin()
        self._pinch_scale = self._pinch_bounds.clamp(self._pinch_from * total_factor)
        self.controller.handle_pinch(PinchSample(origin=origin, scale=self._pinch_scale, prevent_default=prevent_default))

    def pinch_end(self) -> None:
        self._pinching = False
        self._wheel_pinch = False
        self.controller.end_pinch()

    def pinch_cancel(self) -> None:
        self._pinching = False
        self._wheel_pinch = False
        self.controller.cancel_pinch()

    # ------------------------------------------------------------------------------
    # Wheel
    # ------------------------------------------------------------------------------

    def wheel_pan(self, dx: float, dy: float, prevent_default: Callable[[], None] = noop) -> None:
        """Accumulate a wheel delta and pan to `from + accumulated delta`."""
        if self._wheel_from is None:
            self._wheel_from = self.controller.wheel_from()
            self._wheel_delta[:] = 0.0
            logger.debug(f"Wheel pan started from ({self._wheel_from.x:.2f}, {self._wheel_from.y:.2f})")

        self._wheel_delta += (dx, dy)
        x, y = self._wheel_from.as_array() + self._wheel_delta
        self.controller.handle_wheel(WheelSample(offset=(float(x), float(y)), prevent_default=prevent_default))

    def wheel_end(self) -> None:
        self._wheel_from = None
        self._wheel_delta[:] = 0.0

    def _on_wheel_idle(self) -> None:
        if self._wheel_pinch:
            self.pinch_end()
        self.wheel_end()

    # ------------------------------------------------------------------------------
    # Qt event translation
    # ------------------------------------------------------------------------------

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        etype = event.type()
        if etype == QEvent.Type.Wheel:
            return self._on_wheel(event)
        if etype == QEvent.Type.NativeGesture:
            return self._on_native_gesture(event)
        if etype == QEvent.Type.Gesture:
            return self._on_gesture(event)
        if etype in (QEvent.Type.WindowDeactivate, QEvent.Type.FocusOut):
            if self._pinching:
                self.pinch_cancel()
            return False
        return super().eventFilter(watched, event)

    @staticmethod
    def _wheel_delta_px(event: QWheelEvent) -> tuple[float, float]:
        """Scroll distance in pixels, positive = content moves up/left."""
        pixel = event.pixelDelta()
        if not pixel.isNull():
            return -float(pixel.x()), -float(pixel.y())
        angle = event.angleDelta()
        return (
            -angle.x() / 120.0 * WHEEL_PIXELS_PER_NOTCH,
            -angle.y() / 120.0 * WHEEL_PIXELS_PER_NOTCH,
        )

    def _on_wheel(self, event: QWheelEvent) -> bool:
        dx, dy = self._wheel_delta_px(event)
        pos = event.position()

        if event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            if not self._wheel_pinch:
                self.pinch_begin()
                self._wheel_pinch = True
            self.pinch_zoom_by((pos.x(), pos.y()), math.exp(-dy / PINCH_WHEEL_RATIO), event.accept)
        else:
            if self._wheel_pinch:
                self.pinch_end()
            self.wheel_pan(dx, dy, event.accept)

        self._idle_timer.start()
        return True

    def _on_native_gesture(self, event: QNativeGestureEvent) -> bool:
        gtype = event.gestureType()
        if gtype == Qt.NativeGestureType.BeginNativeGesture:
            event.accept()
            self.pinch_begin()
            return True
        if gtype == Qt.NativeGestureType.ZoomNativeGesture:
            pos = event.position()
            self.pinch_zoom_by((pos.x(), pos.y()), 1.0 + event.value(), event.accept)
            return True
        if gtype == Qt.NativeGestureType.EndNativeGesture:
            event.accept()
            self.pinch_end()
            return True
        return False

    def _on_gesture(self, event: QGestureEvent) -> bool:
        pinch = event.gesture(Qt.GestureType.PinchGesture)
        if pinch is None:
            return False

        state = pinch.state()
        if state == Qt.GestureState.GestureStarted:
            self.pinch_begin()
        if state in (Qt.GestureState.GestureStarted, Qt.GestureState.GestureUpdated):
            center = self._target.mapFromGlobal(pinch.centerPoint())
            self.pinch_zoom_to_total(
                (center.x(), center.y()),
                pinch.totalScaleFactor(),
                lambda: event.accept(pinch),
            )
        elif state == Qt.GestureState.GestureFinished:
            event.accept(pinch)
            self.pinch_end()
        elif state == Qt.GestureState.GestureCanceled:
            event.accept(pinch)
            self.pinch_cancel()
        return True
