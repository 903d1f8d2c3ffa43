"""Top-level package for diagram_grid.

Grid layout for lists of 2D diagrams.

Provides subpackages:
- diagram_grid.core – immutable geometry and scene models
- diagram_grid.graphics – graphics capability interface and Scene backend
- diagram_grid.layout – bounding normalization, padding and grid arrangement
- diagram_grid.output – PIL preview rendering
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or fall back to 0.0.0."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("diagram-grid")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .controller import arrange  # noqa: E402
from .layout import (  # noqa: E402
    GridConfig,
    LayoutPreconditionError,
    grid_cat,
    grid_snake,
    grid_with,
    same_bounding_rect,
    same_bounding_square,
)

__all__: list[str] = [
    "__version__",
    "arrange",
    "GridConfig",
    "LayoutPreconditionError",
    "grid_cat",
    "grid_snake",
    "grid_with",
    "same_bounding_rect",
    "same_bounding_square",
]
