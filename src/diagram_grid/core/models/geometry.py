"""
Module: geometry

Purpose:
    Provides the Point2D and BoundingBox dataclasses - the plain 2D
    geometry every scene and layout calculation is expressed in.

Key Classes:
    - Point2D: Immutable (x, y) point / offset
    - BoundingBox: Immutable axis-aligned box with derived width/height/center

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.models.scene: Primitive and Scene envelopes
    - graphics.backend: center() return type
    - output.preview: Pixel mapping

Coordinate System:
    y grows downwards (screen convention), so "top" is the minimum y
    and vertical concatenation stacks towards increasing y.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True, slots=True)
class Point2D:
    """
    A point (or offset) in the plane.

    Example:
        >>> Point2D(1.0, 2.0) + Point2D(0.5, 0.5)
        Point2D(x=1.5, y=2.5)
    """

    x: float
    y: float

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point2D:
        return Point2D(-self.x, -self.y)


ORIGIN = Point2D(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """
    Axis-aligned box given by its edges.

    Attributes:
        left: Minimum x
        top: Minimum y
        right: Maximum x
        bottom: Maximum y

    Invariants:
        - right >= left
        - bottom >= top
        (zero-size boxes are allowed; they still have a position)

    Example:
        >>> box = BoundingBox.centered(Point2D(0, 0), 4, 2)
        >>> box.left, box.top, box.width, box.height
        (-2.0, -1.0, 4.0, 2.0)
    """

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        """Validate edges on construction."""
        if self.right < self.left:
            raise ValueError(f"right must be >= left: {self.right} < {self.left}")
        if self.bottom < self.top:
            raise ValueError(f"bottom must be >= top: {self.bottom} < {self.top}")

    @classmethod
    def centered(cls, center: Point2D, width: float, height: float) -> BoundingBox:
        """Build a box of the given size centered on ``center``."""
        if width < 0 or height < 0:
            raise ValueError(f"Box size must be non-negative: {width}x{height}")
        half_w = width / 2
        half_h = height / 2
        return cls(
            left=center.x - half_w,
            top=center.y - half_h,
            right=center.x + half_w,
            bottom=center.y + half_h,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point2D:
        """Geometric center of the box."""
        return Point2D((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def translated(self, offset: Point2D) -> BoundingBox:
        """Return a copy moved by ``offset``."""
        return BoundingBox(
            left=self.left + offset.x,
            top=self.top + offset.y,
            right=self.right + offset.x,
            bottom=self.bottom + offset.y,
        )

    def union(self, other: BoundingBox) -> BoundingBox:
        """Smallest box containing both boxes."""
        return BoundingBox(
            left=min(self.left, other.left),
            top=min(self.top, other.top),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    @staticmethod
    def union_all(boxes: Iterable[BoundingBox]) -> Optional[BoundingBox]:
        """
        Smallest box containing every box in ``boxes``.

        Returns:
            The enclosing box, or None when ``boxes`` is empty
        """
        result: Optional[BoundingBox] = None
        for box in boxes:
            result = box if result is None else result.union(box)
        return result
