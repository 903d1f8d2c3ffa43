"""
Module: graphics

Purpose:
    Graphics capability interface consumed by the layout functions,
    plus the bundled implementation for Scene values.

Key Classes:
    - GraphicsBackend: Abstract capability interface
    - SceneBackend: Implementation over core.models.Scene

Key Functions:
    - default_backend(): Shared SceneBackend
    - resolve_backend(): Optional backend -> concrete backend

Used By:
    - diagram_grid.layout: Every layout operation
"""

from .backend import GraphicsBackend
from .scene_backend import SceneBackend, default_backend, resolve_backend

__all__ = [
    "GraphicsBackend",
    "SceneBackend",
    "default_backend",
    "resolve_backend",
]
