from __future__ import annotations

from PySide6.QtCore import QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QResizeEvent
from PySide6.QtWidgets import (
    QFrame, QGraphicsPathItem, QGraphicsRectItem, QGraphicsScene, QGraphicsView, QLabel, QWidget
)

from sectioncanvas.config import (
    CanvasConfiguration, SECTION_KEYS, CANVAS_BACKGROUND, SECTION_FILL, SECTION_BORDER, SECTION_RADIUS,
    HUD_BACKGROUND
)
from sectioncanvas.model.geometry import Viewport, compute_total_extent
from sectioncanvas.model.gestures import Rect
from sectioncanvas.model.transform import TransformState

# -------------------------------------------------------------------------------
# Canvas widget
# -------------------------------------------------------------------------------

class SectionCanvas(QGraphicsView):
    """
    Renders the section strip with the current TransformState:
      - scene rectangle pinned to the viewport (scene px == viewport px),
      - content container scaled about its own center,
      - container top-left placed at (-position.x, -position.y),
      - small HUD with the current scale and position.

    Raw input is not handled here; a GestureInputSource is installed on
    `viewport()` as an event filter.
    """
    viewport_resized = Signal(object)

    def __init__(self, config: CanvasConfiguration, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.config = config

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._configure_view()

        self.container: QGraphicsRectItem | None = None
        self.sections: dict[str, QGraphicsPathItem] = {}
        self._build_content()

        self.hud = QLabel(self)
        self.hud.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.hud.setStyleSheet(f"background: {HUD_BACKGROUND}; padding: 2px 4px; font-size: 11px;")
        self.hud.move(0, 0)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def apply_transform(self, state: TransformState) -> None:
        """Render `state`: uniform scale about the center, translation of -position."""
        self.container.setScale(state.scale)
        self.container.setPos(-state.position.x, -state.position.y)
        self.hud.setText(
            f"Scale: {state.scale:.2f}\n"
            f"Position: {state.position.x:.2f}, {state.position.y:.2f}"
        )
        self.hud.adjustSize()

    def viewport_size(self) -> Viewport:
        """Fresh sample of the visible area, never smaller than 1x1."""
        w = int(self.viewport().width())
        h = int(self.viewport().height())
        return Viewport(width=max(1, w), height=max(1, h))

    def content_bounds(self) -> Rect:
        """Bounding rectangle of the content container in viewport coordinates."""
        r = self.container.sceneBoundingRect()
        return Rect(x=r.x(), y=r.y(), width=r.width(), height=r.height())

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _configure_view(self) -> None:
        """No scrolling, no anchoring: the transform is driven by the store only."""
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setBackgroundBrush(QBrush(QColor(CANVAS_BACKGROUND)))
        self.setRenderHint(QPainter.RenderHint.Antialiasing)

        vp = self.viewport()
        vp.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents)
        vp.grabGesture(Qt.GestureType.PinchGesture)

        self._pin_scene_rect()

    def _pin_scene_rect(self) -> None:
        size = self.viewport_size()
        self._scene.setSceneRect(QRectF(0.0, 0.0, size.width, size.height))

    def _build_content(self) -> None:
        """Container sized to the total extent with one rounded rectangle per section."""
        cfg = self.config
        total_width, total_height = compute_total_extent(cfg)

        container = QGraphicsRectItem(0.0, 0.0, total_width, total_height)
        container.setPen(QPen(Qt.PenStyle.NoPen))
        container.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        container.setTransformOriginPoint(total_width / 2, total_height / 2)
        self._scene.addItem(container)
        self.container = container

        border = QPen(QColor(SECTION_BORDER))
        border.setWidthF(1.0)
        fill = QBrush(QColor(SECTION_FILL))

        for i in range(cfg.section_count):
            key = SECTION_KEYS[i] if i < len(SECTION_KEYS) else f"section-{i}"
            x = cfg.padding_around + i * (cfg.section_width + cfg.padding_between)
            path = QPainterPath()
            path.addRoundedRect(
                QRectF(x, cfg.padding_around, cfg.section_width, cfg.section_height),
                SECTION_RADIUS, SECTION_RADIUS
            )
            item = QGraphicsPathItem(path, container)
            item.setPen(border)
            item.setBrush(fill)
            item.setData(0, key)
            self.sections[key] = item

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._pin_scene_rect()
        self.viewport_resized.emit(self.viewport_size())
