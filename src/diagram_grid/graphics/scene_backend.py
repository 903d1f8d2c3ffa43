"""
Module: graphics.scene_backend

Purpose:
    GraphicsBackend implementation for the bundled immutable Scene type.

Key Classes:
    - SceneBackend: Capability implementation over Scene

Key Functions:
    - default_backend(): Shared SceneBackend instance
    - resolve_backend(): Fall back to the default when None is given

Concatenation Rules:
    hcat/vcat keep the first non-empty scene where it is and move each
    following scene along the axis so that its envelope starts where the
    previous one ended. The other axis is left alone (scenes stay
    aligned on their local origins). Empty scenes are skipped.

Dependencies:
    - core.models: Scene, Point2D
    - graphics.backend: GraphicsBackend

Used By:
    - layout: Default backend for every layout operation
"""

from __future__ import annotations

from typing import Optional, Sequence

from diagram_grid.core.models import Point2D, Scene

from .backend import GraphicsBackend


class SceneBackend(GraphicsBackend[Scene]):
    """Backend whose diagrams are Scene values."""

    def width(self, diagram: Scene) -> float:
        return diagram.width

    def height(self, diagram: Scene) -> float:
        return diagram.height

    def center(self, diagram: Scene) -> Point2D:
        return diagram.center

    def rect(self, width: float, height: float) -> Scene:
        return Scene.rect(width, height)

    def empty(self) -> Scene:
        return Scene.empty()

    def phantom(self, diagram: Scene) -> Scene:
        return diagram.as_phantom()

    def move_origin_to(self, point: Point2D, diagram: Scene) -> Scene:
        return diagram.move_origin_to(point)

    def overlay(self, back: Scene, front: Scene) -> Scene:
        return front.atop(back)

    def hcat(self, diagrams: Sequence[Scene]) -> Scene:
        return _concat(diagrams, horizontal=True)

    def vcat(self, diagrams: Sequence[Scene]) -> Scene:
        return _concat(diagrams, horizontal=False)


def _concat(diagrams: Sequence[Scene], *, horizontal: bool) -> Scene:
    """Abut scenes along one axis (see module docstring)."""
    primitives = []
    cursor: Optional[float] = None

    for diagram in diagrams:
        envelope = diagram.envelope
        if envelope is None:
            continue

        if cursor is None:
            placed = diagram
        elif horizontal:
            placed = diagram.translated(Point2D(cursor - envelope.left, 0.0))
        else:
            placed = diagram.translated(Point2D(0.0, cursor - envelope.top))

        placed_envelope = placed.envelope
        cursor = placed_envelope.right if horizontal else placed_envelope.bottom
        primitives.extend(placed.primitives)

    return Scene(tuple(primitives))


_DEFAULT_BACKEND = SceneBackend()


def default_backend() -> SceneBackend:
    """Shared backend used when callers do not pass one."""
    return _DEFAULT_BACKEND


def resolve_backend(backend: Optional[GraphicsBackend] = None) -> GraphicsBackend:
    """Return ``backend``, or the default SceneBackend when it is None."""
    return backend if backend is not None else _DEFAULT_BACKEND
