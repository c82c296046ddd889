"""Axial hexagonal coordinates with rotations, lines, ranges, rings and chunk resolutions."""

__version__ = "0.21.0"
__all__ = ["hex", "transform", "resolution", "ranges", "rings"]