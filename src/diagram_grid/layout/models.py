"""
Module: layout.models

Purpose:
    Data model describing the shape of a grid before it is built.

Key Classes:
    - GridShape: Item count and column count with derived rows/padding

Dependencies:
    - dataclasses (std)

Used By:
    - layout.dimensions: grid_shape()
    - layout.arranger: Debug logging
    - diagram_grid.controller: Column resolution
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridShape:
    """
    Resolved grid dimensions (immutable).

    Attributes:
        item_count: Number of diagrams to place
        columns: Number of columns

    Example:
        >>> shape = GridShape(item_count=10, columns=3)
        >>> shape.rows, shape.cell_count, shape.padding
        (4, 12, 2)
    """

    item_count: int
    columns: int

    def __post_init__(self) -> None:
        """Validate shape on construction."""
        if self.item_count < 0:
            raise ValueError(f"item_count must be non-negative: {self.item_count}")
        if self.columns < 1:
            raise ValueError(f"columns must be positive: {self.columns}")

    @property
    def rows(self) -> int:
        """Number of rows (ceiling of item_count / columns)."""
        return -(-self.item_count // self.columns)

    @property
    def cell_count(self) -> int:
        """Number of cells once the last row is padded."""
        return self.rows * self.columns

    @property
    def padding(self) -> int:
        """Number of filler cells appended to the last row."""
        return self.cell_count - self.item_count
