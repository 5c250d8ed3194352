"""Run with: python -m sectioncanvas"""
import sys

from sectioncanvas.app.main import main

if __name__ == "__main__":
    sys.exit(main())
