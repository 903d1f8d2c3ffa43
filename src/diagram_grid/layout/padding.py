"""
Module: layout.padding

Purpose:
    Extend a list to a multiple of the column count so the last grid
    row is full.

Key Functions:
    - pad_list(): Append filler items

Used By:
    - layout.arranger: grid_animal()
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from .errors import LayoutPreconditionError

T = TypeVar("T")


def pad_list(columns: int, filler: T, items: Sequence[T]) -> List[T]:
    """
    Append copies of ``filler`` until the length is a multiple of ``columns``.

    Args:
        columns: Row length to pad to (must be >= 1)
        filler: Item appended to fill the last row
        items: Items to pad (not modified)

    Returns:
        New list of length ``ceil(len(items) / columns) * columns``

    Raises:
        LayoutPreconditionError: If columns < 1

    Example:
        >>> pad_list(3, 0, [1, 2, 3, 4])
        [1, 2, 3, 4, 0, 0]
    """
    if columns < 1:
        raise LayoutPreconditionError(f"columns must be positive: {columns}")

    missing = -len(items) % columns
    return list(items) + [filler] * missing
