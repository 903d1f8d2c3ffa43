"""
Module: scene

Purpose:
    Provides the Primitive and Scene dataclasses - the immutable scene
    value the bundled graphics backend composes. A scene is a flat,
    ordered tuple of axis-aligned rectangles in local coordinates;
    later primitives are drawn over earlier ones.

Key Classes:
    - Primitive: One rectangle with visibility, fill and label
    - Scene: Ordered primitives plus derived envelope/width/height/center

Dependencies:
    - dataclasses (std)
    - core.models.geometry: Point2D, BoundingBox

Used By:
    - graphics.scene_backend: SceneBackend operations
    - output.preview: Rasterizing visible primitives
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .geometry import ORIGIN, BoundingBox, Point2D


@dataclass(frozen=True, slots=True)
class Primitive:
    """
    Axis-aligned rectangle inside a scene.

    Phantom primitives (``visible=False``) take part in the envelope
    but are never drawn.

    Attributes:
        box: Extent in the owning scene's local coordinates
        visible: False for phantom (layout-only) primitives
        fill: Fill colour understood by PIL (None = renderer default)
        label: Optional identifier, useful for locating items in a layout
    """

    box: BoundingBox
    visible: bool = True
    fill: Optional[str] = None
    label: Optional[str] = None

    def translated(self, offset: Point2D) -> Primitive:
        """Return a copy moved by ``offset``."""
        return replace(self, box=self.box.translated(offset))


@dataclass(frozen=True)
class Scene:
    """
    Immutable composite of primitives.

    The envelope is the union of every primitive's box, phantom ones
    included. An empty scene has no envelope: width and height are 0
    and its center is the local origin.

    Example:
        >>> scene = Scene.rect(4, 2, label="a")
        >>> scene.width, scene.height, scene.center
        (4.0, 2.0, Point2D(x=0.0, y=0.0))
    """

    primitives: tuple[Primitive, ...] = ()

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Scene:
        """Scene with no content and no envelope."""
        return cls()

    @classmethod
    def rect(
        cls,
        width: float,
        height: float,
        *,
        fill: Optional[str] = None,
        label: Optional[str] = None,
    ) -> Scene:
        """Visible rectangle of the given size centered on the origin."""
        box = BoundingBox.centered(ORIGIN, width, height)
        return cls((Primitive(box=box, fill=fill, label=label),))

    # ─────────────────────────────────────────────────────────────────────────
    # Measurements
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def envelope(self) -> Optional[BoundingBox]:
        """Bounding box of all primitives, or None for an empty scene."""
        return BoundingBox.union_all(p.box for p in self.primitives)

    @property
    def is_empty(self) -> bool:
        return not self.primitives

    @property
    def width(self) -> float:
        envelope = self.envelope
        return envelope.width if envelope is not None else 0.0

    @property
    def height(self) -> float:
        envelope = self.envelope
        return envelope.height if envelope is not None else 0.0

    @property
    def center(self) -> Point2D:
        envelope = self.envelope
        return envelope.center if envelope is not None else ORIGIN

    @property
    def visible_primitives(self) -> tuple[Primitive, ...]:
        """Primitives that a renderer should draw, in drawing order."""
        return tuple(p for p in self.primitives if p.visible)

    def find(self, label: str) -> Primitive:
        """
        Get the first visible primitive carrying ``label``.

        Raises:
            KeyError: If no visible primitive has that label
        """
        for primitive in self.visible_primitives:
            if primitive.label == label:
                return primitive
        raise KeyError(label)

    # ─────────────────────────────────────────────────────────────────────────
    # Transformations (all return new scenes)
    # ─────────────────────────────────────────────────────────────────────────

    def translated(self, offset: Point2D) -> Scene:
        if offset == ORIGIN:
            return self
        return Scene(tuple(p.translated(offset) for p in self.primitives))

    def move_origin_to(self, point: Point2D) -> Scene:
        """
        Move the local origin to ``point``.

        Content keeps its absolute place, so in the new local frame
        everything shifts by ``-point``.
        """
        return self.translated(-point)

    def as_phantom(self) -> Scene:
        """Same envelope, nothing drawn."""
        return Scene(tuple(replace(p, visible=False) for p in self.primitives))

    def atop(self, back: Scene) -> Scene:
        """This scene drawn over ``back``; neither is moved."""
        return Scene(back.primitives + self.primitives)
