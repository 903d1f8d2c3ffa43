"""
Module: layout.dimensions

Purpose:
    Decide grid dimensions and build grids from coordinate generators.

Key Functions:
    - int_sqrt(): Nearest-integer square root (automatic column count)
    - grid_shape(): Resolve a GridShape for an item count
    - grid_with(): Build a grid by calling f(x, y) for every cell

Rounding:
    int_sqrt() uses Python's round(), i.e. round-half-to-even. The
    square root of an integer is never exactly halfway between two
    integers, so the mode does not change results in practice.

Dependencies:
    - layout.arranger: grid_cat() (imported lazily, it imports this module)
    - layout.models: GridShape

Used By:
    - layout.arranger: Automatic column count
    - diagram_grid.controller: arrange()
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Tuple, TypeVar

from diagram_grid.graphics import GraphicsBackend

from .errors import LayoutPreconditionError
from .models import GridShape

logger = logging.getLogger(__name__)

D = TypeVar("D")


def int_sqrt(count: int) -> int:
    """
    Column count for ``count`` items: the nearest integer square root.

    Never returns less than 1, so an empty list still resolves to a
    valid (empty) grid.

    Raises:
        LayoutPreconditionError: If count is negative

    Example:
        >>> int_sqrt(10)
        3
        >>> int_sqrt(8)
        3
    """
    if count < 0:
        raise LayoutPreconditionError(f"item count must be non-negative: {count}")
    return max(1, round(math.sqrt(count)))


def grid_shape(item_count: int, columns: Optional[int] = None) -> GridShape:
    """
    Resolve the grid shape for ``item_count`` items.

    Args:
        item_count: Number of diagrams
        columns: Explicit column count, or None for int_sqrt(item_count)

    Returns:
        GridShape with rows and padding derived

    Raises:
        LayoutPreconditionError: If columns < 1 or item_count < 0
    """
    if columns is None:
        columns = int_sqrt(item_count)
    elif columns < 1:
        raise LayoutPreconditionError(f"columns must be positive: {columns}")
    if item_count < 0:
        raise LayoutPreconditionError(f"item count must be non-negative: {item_count}")
    return GridShape(item_count=item_count, columns=columns)


def grid_with(
    generator: Callable[[int, int], D],
    dimensions: Tuple[int, int],
    *,
    backend: Optional[GraphicsBackend[D]] = None,
) -> D:
    """
    Generate a grid of diagrams from a function of cell coordinates.

    ``generator(x, y)`` is called row by row (y outer, x inner, both
    zero-indexed), and the resulting flat list is laid out with
    ``grid_cat`` using ``columns`` columns. Zero rows give the empty
    diagram, as grid_cat does for an empty list.

    Args:
        generator: Function of (column, row) returning a diagram
        dimensions: (columns, rows)
        backend: Graphics backend (default: SceneBackend)

    Returns:
        Composite diagram

    Raises:
        LayoutPreconditionError: If columns < 1 or rows < 0

    Example:
        >>> board = grid_with(lambda x, y: Scene.rect(1, 1), (8, 8))
        >>> board.width, board.height
        (8.0, 8.0)
    """
    from .arranger import grid_cat

    columns, rows = dimensions
    if columns < 1:
        raise LayoutPreconditionError(f"columns must be positive: {columns}")
    if rows < 0:
        raise LayoutPreconditionError(f"rows must be non-negative: {rows}")

    diagrams = [generator(x, y) for y in range(rows) for x in range(columns)]
    logger.debug(f"Generated {len(diagrams)} diagrams for {columns}x{rows} grid")
    return grid_cat(diagrams, columns, backend=backend)
