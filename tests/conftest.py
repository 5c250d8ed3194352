"""
Pytest configuration and shared fixtures for the section canvas tests.

Qt runs on the offscreen platform so the widget tests need no display.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from sectioncanvas.app.state import TransformStore
from sectioncanvas.config import CanvasConfiguration
from sectioncanvas.model.geometry import Viewport
from sectioncanvas.model.gestures import Rect


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def config():
    """The four-section strip used by the application."""
    return CanvasConfiguration(
        section_width=1660,
        section_height=1024,
        padding_around=100,
        padding_between=100,
        section_count=4,
    )


@pytest.fixture
def viewport():
    return Viewport(width=1600, height=800)


@pytest.fixture
def store(qapp):
    return TransformStore()


@pytest.fixture
def unit_bounds():
    """Content container at the origin, 1000 x 500."""
    return Rect(x=0, y=0, width=1000, height=500)
