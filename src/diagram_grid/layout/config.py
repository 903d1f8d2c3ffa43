"""
Module: layout.config

Purpose:
    Configuration for grid arrangement.

Key Classes:
    - GridConfig: Immutable grid configuration

Dependencies:
    - dataclasses (std)

Used By:
    - diagram_grid.controller: arrange()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for grid arrangement (immutable).

    Attributes:
        columns: Number of columns, or None to pick the nearest
            integer square root of the item count
        snake: If True, every second row runs right-to-left

    Example:
        >>> config = GridConfig(columns=4, snake=True)
        >>> config.auto_columns
        False
    """

    columns: Optional[int] = None
    snake: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.columns is not None and self.columns < 1:
            raise ValueError(f"columns must be positive: {self.columns}")

    @property
    def auto_columns(self) -> bool:
        """True when the column count is derived from the item count."""
        return self.columns is None
