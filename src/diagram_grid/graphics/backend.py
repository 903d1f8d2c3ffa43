"""
Module: graphics.backend

Purpose:
    Abstract capability interface the layout functions are written
    against. Any scene type can be laid out in a grid once a backend
    for it implements measuring, placeholder construction and
    composition.

Key Classes:
    - GraphicsBackend: Abstract base class, generic over the diagram type

Dependencies:
    - core.models.geometry: Point2D

Used By:
    - graphics.scene_backend: Bundled implementation for Scene
    - layout.bounding / layout.arranger: All layout operations
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

from diagram_grid.core.models import Point2D

D = TypeVar("D")


class GraphicsBackend(ABC, Generic[D]):
    """
    Measuring and composition operations over diagrams of type ``D``.

    Diagrams are treated as immutable values: every operation returns
    a new diagram and never modifies its arguments.
    """

    # ─────────────────────────────────────────────────────────────────────────
    # Measuring
    # ─────────────────────────────────────────────────────────────────────────

    @abstractmethod
    def width(self, diagram: D) -> float:
        """Horizontal extent of the diagram's envelope."""

    @abstractmethod
    def height(self, diagram: D) -> float:
        """Vertical extent of the diagram's envelope."""

    @abstractmethod
    def center(self, diagram: D) -> Point2D:
        """Center of the diagram's envelope, in its local coordinates."""

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    @abstractmethod
    def rect(self, width: float, height: float) -> D:
        """Axis-aligned rectangle centered on the local origin."""

    def square(self, side: float) -> D:
        """Axis-aligned square centered on the local origin."""
        return self.rect(side, side)

    @abstractmethod
    def empty(self) -> D:
        """Zero-size diagram that renders nothing."""

    @abstractmethod
    def phantom(self, diagram: D) -> D:
        """Copy that keeps its envelope but renders nothing."""

    # ─────────────────────────────────────────────────────────────────────────
    # Composition
    # ─────────────────────────────────────────────────────────────────────────

    @abstractmethod
    def move_origin_to(self, point: Point2D, diagram: D) -> D:
        """Copy of ``diagram`` whose local origin sits at ``point``."""

    @abstractmethod
    def overlay(self, back: D, front: D) -> D:
        """``front`` drawn over ``back``, neither translated."""

    @abstractmethod
    def hcat(self, diagrams: Sequence[D]) -> D:
        """Place diagrams left-to-right, envelopes abutting."""

    @abstractmethod
    def vcat(self, diagrams: Sequence[D]) -> D:
        """Place diagrams top-to-bottom, envelopes abutting."""
