"""Geometry, cubic Bezier curves, glyph classification, distance fields and quad indices."""

__version__ = "0.1.0"