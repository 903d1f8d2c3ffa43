"""
Module: controller

Purpose:
    Single entry point that lays out diagrams according to a GridConfig.
    Resolve shape → pick row order → arrange.

Key Functions:
    - arrange(): Lay out diagrams as configured

Dependencies:
    - layout: GridConfig, grid_cat, grid_snake, grid_shape
    - graphics: GraphicsBackend

Used By:
    - scripts/generate_examples.py
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

from .graphics import GraphicsBackend
from .layout import GridConfig, grid_cat, grid_shape, grid_snake

logger = logging.getLogger(__name__)

D = TypeVar("D")


def arrange(
    diagrams: Sequence[D],
    config: Optional[GridConfig] = None,
    *,
    backend: Optional[GraphicsBackend[D]] = None,
) -> D:
    """
    Lay out ``diagrams`` in a grid as described by ``config``.

    Args:
        diagrams: Diagrams in row-major (or snake) order
        config: Grid configuration (default: GridConfig())
        backend: Graphics backend (default: SceneBackend)

    Returns:
        Composite diagram

    Raises:
        LayoutPreconditionError: If the layout input is invalid

    Example:
        >>> grid = arrange(items, GridConfig(columns=4, snake=True))
    """
    if config is None:
        config = GridConfig()

    shape = grid_shape(len(diagrams), config.columns)
    order = "snake" if config.snake else "row-major"
    source = "automatic" if config.auto_columns else "fixed"

    logger.info(
        f"Arranging {shape.item_count} diagrams in {shape.columns}x{shape.rows} "
        f"{order} grid ({source} columns)"
    )

    layout = grid_snake if config.snake else grid_cat
    return layout(diagrams, shape.columns, backend=backend)
