"""
Module: layout.bounding

Purpose:
    Give every diagram in a list the same bounding box by placing an
    invisible (phantom) placeholder under each one. The placeholder is
    sized to enclose the largest diagram, so after normalization all
    diagrams measure the same.

Key Functions:
    - same_bounding_square(): Shared square, centered on each diagram
    - same_bounding_rect(): Shared rectangle, centered on a common point

Algorithm (rect):
    widest  = diagram with the largest width
    tallest = diagram with the largest height
    ref     = (center(widest).x, center(tallest).y)
    each d  -> phantom(rect(width(widest), height(tallest))) under
               d with its origin moved to ref

    Every diagram is moved to the same reference point, not to its own
    center, so all cells share one coordinate frame.

Tie-break:
    When several diagrams share the largest dimension, the first one in
    list order is used.

Dependencies:
    - graphics: GraphicsBackend, resolve_backend

Used By:
    - layout.arranger: grid_animal()
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, TypeVar

from diagram_grid.core.models import Point2D
from diagram_grid.graphics import GraphicsBackend, resolve_backend

from .errors import LayoutPreconditionError

logger = logging.getLogger(__name__)

D = TypeVar("D")


def same_bounding_square(
    diagrams: Sequence[D],
    *,
    backend: Optional[GraphicsBackend[D]] = None,
) -> List[D]:
    """
    Make all diagrams have the same bounding square, one that bounds them all.

    Each diagram's origin is moved to its own center and a phantom square
    with side ``max(width, height)`` of the biggest diagram is placed
    underneath, centered on that origin.

    Args:
        diagrams: Non-empty list of diagrams
        backend: Graphics backend (default: SceneBackend)

    Returns:
        New list, same order, every item a square of identical size

    Raises:
        LayoutPreconditionError: If diagrams is empty
    """
    if not diagrams:
        raise LayoutPreconditionError("same_bounding_square requires at least one diagram")

    backend = resolve_backend(backend)

    def max_dim(diagram: D) -> float:
        return max(backend.width(diagram), backend.height(diagram))

    side = max(max_dim(d) for d in diagrams)
    pad_square = backend.phantom(backend.square(side))

    logger.debug(f"Normalizing {len(diagrams)} diagrams to {side}x{side} square")

    return [
        backend.overlay(pad_square, backend.move_origin_to(backend.center(d), d))
        for d in diagrams
    ]


def same_bounding_rect(
    diagrams: Sequence[D],
    *,
    backend: Optional[GraphicsBackend[D]] = None,
) -> List[D]:
    """
    Make all diagrams have the same bounding rect, one that bounds them all.

    Args:
        diagrams: Non-empty list of diagrams
        backend: Graphics backend (default: SceneBackend)

    Returns:
        New list, same order. Every item is ``max width`` x ``max height``
        as long as it lies inside that rect placed at the shared reference
        point; an item offset from the reference sticks out and its
        envelope grows accordingly.

    Raises:
        LayoutPreconditionError: If diagrams is empty

    Example:
        >>> cells = same_bounding_rect([Scene.rect(10, 5), Scene.rect(4, 20)])
        >>> [(c.width, c.height) for c in cells]
        [(10.0, 20.0), (10.0, 20.0)]
    """
    if not diagrams:
        raise LayoutPreconditionError("same_bounding_rect requires at least one diagram")

    backend = resolve_backend(backend)

    widest = max(diagrams, key=backend.width)
    tallest = max(diagrams, key=backend.height)
    reference = Point2D(backend.center(widest).x, backend.center(tallest).y)

    cell_width = backend.width(widest)
    cell_height = backend.height(tallest)
    pad_rect = backend.phantom(backend.rect(cell_width, cell_height))

    logger.debug(
        f"Normalizing {len(diagrams)} diagrams to {cell_width}x{cell_height} "
        f"cells around ({reference.x}, {reference.y})"
    )

    return [
        backend.overlay(pad_rect, backend.move_origin_to(reference, d))
        for d in diagrams
    ]
