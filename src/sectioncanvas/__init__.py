"""Pannable, zoomable viewport for a horizontal strip of fixed-size sections."""
__version__ = "0.1.0"
