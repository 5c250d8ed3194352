from __future__ import annotations

import logging

from PySide6.QtWidgets import QMainWindow, QWidget

from sectioncanvas.app.state import TransformStore
from sectioncanvas.app.ui.canvas import SectionCanvas
from sectioncanvas.app.ui.input_source import GestureInputSource
from sectioncanvas.config import CanvasConfiguration, DEFAULT_CANVAS, VISIBLE_APP_NAME
from sectioncanvas.controller.gestures import GestureController
from sectioncanvas.model.geometry import Viewport

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Wires the pieces together:
    input source -> controller -> store -> (transform_changed) -> canvas.
    """
    def __init__(self, config: CanvasConfiguration = DEFAULT_CANVAS, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        self.config = config
        self.store = TransformStore(self)

        self.canvas = SectionCanvas(config, self)
        self.setCentralWidget(self.canvas)

        self.controller = GestureController(
            store=self.store,
            config=config,
            viewport_provider=self.canvas.viewport_size,
            bounds_provider=self.canvas.content_bounds,
        )
        self.input_source = GestureInputSource(self.controller, self.canvas.viewport(), parent=self)

        self.store.transform_changed.connect(self.canvas.apply_transform)
        self.canvas.apply_transform(self.store.state)

        # Initial fit happens once, when the canvas first gets its real size
        self._mounted = False
        self.canvas.viewport_resized.connect(self.mount)

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def mount(self, viewport: Viewport) -> None:
        """Compute the initial transform from the first real viewport size; later calls are ignored."""
        if self._mounted:
            return
        if viewport.width <= 1 or viewport.height <= 1:
            return
        self._mounted = True
        self.store.initialize(viewport, self.config)
