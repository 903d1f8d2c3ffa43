"""
Module: layout.errors

Purpose:
    Exception raised when a layout function is called with input it
    cannot lay out (empty normalizer input, non-positive grid sizes).

Used By:
    - layout.bounding, layout.padding, layout.arranger, layout.dimensions
"""


class LayoutPreconditionError(ValueError):
    """Layout called with invalid input."""
    pass
