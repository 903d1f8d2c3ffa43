"""
Core Models Package

Immutable data models shared by the graphics backend, the layout
functions and the preview renderer. All models are frozen dataclasses,
so layout code can pass them around freely without copying.
"""

from .geometry import ORIGIN, BoundingBox, Point2D
from .scene import Primitive, Scene

__all__ = [
    "ORIGIN",
    "BoundingBox",
    "Point2D",
    "Primitive",
    "Scene",
]
