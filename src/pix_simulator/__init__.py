"""Pix transfer confirmation simulator."""

__version__ = "0.1.0"
