"""
Run with: python -m sectioncanvas.app
"""
from __future__ import annotations

import logging
import sys

from sectioncanvas.app.application import create_app
from sectioncanvas.app.ui.main_window import MainWindow
from sectioncanvas.logging_config import level_from_env, setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=level_from_env(logging.INFO))

    app = create_app()
    win = MainWindow()
    win.show()
    logger.info("Section canvas started.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
