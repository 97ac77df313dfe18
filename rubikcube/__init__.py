"""Rubik's cube state model, phase-one coordinates, a lookup table and a depth-limited search."""

__version__ = "0.1.0"
__all__ = ["__version__"]