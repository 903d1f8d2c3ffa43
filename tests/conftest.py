import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import diagram_grid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from diagram_grid.core.models import Point2D, Scene
from diagram_grid.graphics import SceneBackend


# Common test fixtures
@pytest.fixture
def backend():
    """Fresh SceneBackend."""
    return SceneBackend()


@pytest.fixture
def make_item():
    """Factory for labelled rectangles, optionally centered away from the origin."""
    def _create(width: float, height: float, label: str, center: Point2D = Point2D(0.0, 0.0)):
        return Scene.rect(width, height, label=label).translated(center)
    return _create


@pytest.fixture
def lettered_items(make_item):
    """Six unit squares labelled A-F."""
    return [make_item(1, 1, letter) for letter in "ABCDEF"]
