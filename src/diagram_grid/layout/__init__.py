"""
Module: layout

Purpose:
    Grid layout for lists of diagrams: bounding-box normalization,
    padding, row chunking and concatenation.

Key Functions:
    - grid_cat(): Left-to-right, top-to-bottom grid
    - grid_snake(): Grid with alternating row direction
    - grid_with(): Grid generated from f(x, y)
    - same_bounding_rect() / same_bounding_square(): Uniform cell size
    - pad_list(): Fill the last row

Key Classes:
    - GridConfig: Configuration for arrange()
    - GridShape: Resolved grid dimensions
    - LayoutPreconditionError: Invalid layout input

Dependencies:
    - diagram_grid.graphics: GraphicsBackend

Used By:
    - diagram_grid.controller: arrange()
"""

from .config import GridConfig
from .errors import LayoutPreconditionError
from .models import GridShape
from .bounding import same_bounding_rect, same_bounding_square
from .padding import pad_list
from .dimensions import grid_shape, grid_with, int_sqrt
from .arranger import (
    chunks_of,
    every_other,
    grid_animal,
    grid_cat,
    grid_snake,
    reverse_alternate_rows,
)

__all__ = [
    # Config / models
    "GridConfig",
    "GridShape",
    "LayoutPreconditionError",
    # Normalization
    "same_bounding_rect",
    "same_bounding_square",
    "pad_list",
    # Dimensions
    "int_sqrt",
    "grid_shape",
    "grid_with",
    # Arrangement
    "chunks_of",
    "every_other",
    "reverse_alternate_rows",
    "grid_animal",
    "grid_cat",
    "grid_snake",
]
