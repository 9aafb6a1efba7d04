"""Spatial text layout reconstruction from PDF content streams."""

__version__ = "0.1.0"
