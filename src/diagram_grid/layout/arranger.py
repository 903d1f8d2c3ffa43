"""
Module: layout.arranger

Purpose:
    Put lists of diagrams into grid layouts.

Key Functions:
    - grid_cat(): Left-to-right, top-to-bottom
    - grid_snake(): Alternate rows run right-to-left
    - grid_animal(): Shared implementation with a pluggable row function
    - chunks_of(), every_other(): List helpers

Algorithm:
    1. Pad the list with empty diagrams to a multiple of the columns
    2. same_bounding_rect() over the whole padded list (uniform cells)
    3. Split into rows of ``columns``
    4. Apply the row function to the list of rows
    5. hcat each row, vcat the rows

Dependencies:
    - graphics: GraphicsBackend, resolve_backend
    - layout.bounding, layout.padding, layout.dimensions

Used By:
    - layout.dimensions: grid_with()
    - diagram_grid.controller: arrange()
"""

from __future__ import annotations

import logging
from itertools import cycle
from typing import Callable, List, Optional, Sequence, TypeVar

from diagram_grid.graphics import GraphicsBackend, resolve_backend

from .bounding import same_bounding_rect
from .dimensions import grid_shape
from .padding import pad_list

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")

RowFunction = Callable[[List[List[D]]], List[List[D]]]


def chunks_of(size: int, items: Sequence[T]) -> List[List[T]]:
    """
    Split ``items`` into consecutive groups of ``size``.

    The last group is shorter when len(items) is not a multiple of size.

    Example:
        >>> chunks_of(2, [1, 2, 3, 4, 5])
        [[1, 2], [3, 4], [5]]
    """
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def every_other(func: Callable[[T], T], items: Sequence[T]) -> List[T]:
    """
    Apply ``func`` to the items at odd indices, leaving the rest alone.

    Example:
        >>> every_other(lambda n: -n, [1, 2, 3, 4])
        [1, -2, 3, -4]
    """
    return [f(item) for f, item in zip(cycle((_identity, func)), items)]


def reverse_alternate_rows(rows: List[List[T]]) -> List[List[T]]:
    """Reverse rows 1, 3, 5, ... (row 0 keeps its order)."""
    return every_other(lambda row: row[::-1], rows)


def grid_animal(
    row_function: RowFunction,
    columns: int,
    diagrams: Sequence[D],
    *,
    backend: Optional[GraphicsBackend[D]] = None,
) -> D:
    """
    Lay out diagrams in a grid, transforming the rows before concatenation.

    Generalization of grid_cat() and grid_snake().

    Args:
        row_function: Applied to the list of rows (each a list of cells)
        columns: Number of columns (must be >= 1)
        diagrams: Diagrams in row-major order
        backend: Graphics backend (default: SceneBackend)

    Returns:
        Composite diagram; an empty diagram when ``diagrams`` is empty

    Raises:
        LayoutPreconditionError: If columns < 1
    """
    backend = resolve_backend(backend)
    shape = grid_shape(len(diagrams), columns)

    if not diagrams:
        logger.debug("No diagrams to arrange, returning empty diagram")
        return backend.empty()

    logger.debug(
        f"Arranging {shape.item_count} diagrams in {shape.columns}x{shape.rows} grid "
        f"({shape.padding} filler cells)"
    )

    padded = pad_list(shape.columns, backend.empty(), diagrams)
    cells = same_bounding_rect(padded, backend=backend)
    rows = row_function(chunks_of(shape.columns, cells))
    return backend.vcat([backend.hcat(row) for row in rows])


def grid_cat(
    diagrams: Sequence[D],
    columns: Optional[int] = None,
    *,
    backend: Optional[GraphicsBackend[D]] = None,
) -> D:
    """
    Put a list of diagrams in a grid, left-to-right, top-to-bottom.

    Args:
        diagrams: Diagrams in row-major order
        columns: Number of columns; None makes the grid as close to
            square as possible (nearest integer square root)
        backend: Graphics backend (default: SceneBackend)

    Returns:
        Composite diagram

    Example:
        >>> grid = grid_cat([Scene.rect(1, 1)] * 10)
        >>> grid.width, grid.height
        (3.0, 4.0)
    """
    shape = grid_shape(len(diagrams), columns)
    return grid_animal(_identity, shape.columns, diagrams, backend=backend)


def grid_snake(
    diagrams: Sequence[D],
    columns: Optional[int] = None,
    *,
    backend: Optional[GraphicsBackend[D]] = None,
) -> D:
    """
    Put a list of diagrams in a grid, alternating left-to-right and right-to-left.

    Useful for comparing sequences of diagrams.

    Args:
        diagrams: Diagrams in traversal order
        columns: Number of columns; None makes the grid as close to
            square as possible
        backend: Graphics backend (default: SceneBackend)

    Returns:
        Composite diagram
    """
    shape = grid_shape(len(diagrams), columns)
    return grid_animal(reverse_alternate_rows, shape.columns, diagrams, backend=backend)


def _identity(value: T) -> T:
    return value
