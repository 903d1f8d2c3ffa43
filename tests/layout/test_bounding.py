"""
Tests for layout.bounding

Test Coverage:
- same_bounding_rect(): uniform size, shared reference point, order
- same_bounding_square(): uniform square, per-diagram centering
- Empty input precondition
- Backend independence (non-Scene backend)
"""

import pytest

from diagram_grid.core.models import ORIGIN, BoundingBox, Point2D, Scene
from diagram_grid.graphics import GraphicsBackend
from diagram_grid.layout import (
    LayoutPreconditionError,
    same_bounding_rect,
    same_bounding_square,
)


def _phantom_boxes(scene: Scene):
    return [p.box for p in scene.primitives if not p.visible]


class BoxBackend(GraphicsBackend[BoundingBox]):
    """Minimal backend whose diagrams are bare bounding boxes."""

    def width(self, diagram):
        return diagram.width

    def height(self, diagram):
        return diagram.height

    def center(self, diagram):
        return diagram.center

    def rect(self, width, height):
        return BoundingBox.centered(ORIGIN, width, height)

    def empty(self):
        return BoundingBox(0, 0, 0, 0)

    def phantom(self, diagram):
        return diagram

    def move_origin_to(self, point, diagram):
        return diagram.translated(-point)

    def overlay(self, back, front):
        return back.union(front)

    def hcat(self, diagrams):
        raise NotImplementedError

    def vcat(self, diagrams):
        raise NotImplementedError


class TestSameBoundingRect:
    """Tests for same_bounding_rect()."""

    def test_when_two_shapes_then_both_max_width_and_height(self, make_item):
        """w10h5 and w4h20 both become 10 x 20."""
        # Arrange
        items = [make_item(10, 5, "wide"), make_item(4, 20, "tall")]

        # Act
        cells = same_bounding_rect(items)

        # Assert
        assert [(c.width, c.height) for c in cells] == [(10, 20), (10, 20)]

    def test_when_varied_sizes_then_all_cells_identical(self, make_item):
        # Arrange
        sizes = [(3, 7), (9, 1), (2, 2), (5, 5), (1, 8)]
        items = [make_item(w, h, str(i)) for i, (w, h) in enumerate(sizes)]

        # Act
        cells = same_bounding_rect(items)

        # Assert
        for cell in cells:
            assert cell.width == pytest.approx(9)
            assert cell.height == pytest.approx(8)

    def test_when_normalized_then_order_and_visibility_preserved(self, make_item):
        items = [make_item(2, 1, "a"), make_item(1, 3, "b"), make_item(4, 4, "c")]

        cells = same_bounding_rect(items)

        assert [[p.label for p in c.visible_primitives] for c in cells] == [["a"], ["b"], ["c"]]

    def test_when_centers_differ_then_reference_from_widest_and_tallest(self, make_item):
        """Cells are centered on (x of widest, y of tallest), not on each diagram."""
        # Arrange
        widest = make_item(10, 2, "widest", center=Point2D(5, 0))
        tallest = make_item(2, 10, "tallest", center=Point2D(0, 7))
        other = make_item(1, 1, "other", center=Point2D(-4, 3))

        # Act
        cells = same_bounding_rect([widest, tallest, other])

        # Assert: reference point (5, 7) becomes every cell's origin
        assert cells[0].find("widest").box.center == Point2D(0, -7)
        assert cells[1].find("tallest").box.center == Point2D(-5, 0)
        assert cells[2].find("other").box.center == Point2D(-9, -4)
        for cell in cells:
            assert _phantom_boxes(cell) == [BoundingBox.centered(ORIGIN, 10, 10)]

    def test_when_diagram_off_reference_then_cell_grows_past_max(self, make_item):
        """An item that does not fit the rect at the reference point sticks out."""
        # Arrange
        widest = make_item(10, 2, "widest", center=Point2D(5, 0))
        tallest = make_item(2, 10, "tallest", center=Point2D(0, 7))
        other = make_item(1, 1, "other", center=Point2D(-4, 3))

        # Act
        cells = same_bounding_rect([widest, tallest, other])

        # Assert
        sizes = [(c.width, c.height) for c in cells]
        assert sizes == [
            pytest.approx((10, 13)),
            pytest.approx((11, 10)),
            pytest.approx((14.5, 10)),
        ]

    def test_when_tie_for_widest_then_first_wins(self, make_item):
        # Arrange
        first = make_item(6, 1, "first", center=Point2D(1, 0))
        second = make_item(6, 1, "second", center=Point2D(100, 0))

        # Act
        cells = same_bounding_rect([first, second])

        # Assert: reference x is taken from the first widest diagram
        assert cells[0].find("first").box.center.x == pytest.approx(0)

    def test_when_empty_diagram_padded_then_full_cell(self, backend, make_item):
        cells = same_bounding_rect([make_item(3, 2, "a"), backend.empty()])

        assert cells[1].width == 3
        assert cells[1].height == 2
        assert cells[1].visible_primitives == ()

    def test_when_normalized_then_input_unchanged(self, make_item):
        items = [make_item(2, 1, "a"), make_item(1, 3, "b")]
        before = list(items)

        same_bounding_rect(items)

        assert items == before

    def test_when_empty_list_then_raises_precondition_error(self):
        with pytest.raises(LayoutPreconditionError, match="at least one diagram"):
            same_bounding_rect([])


class TestSameBoundingSquare:
    """Tests for same_bounding_square()."""

    def test_when_varied_sizes_then_all_squares_of_max_dimension(self, make_item):
        # Arrange
        items = [make_item(3, 7, "a"), make_item(9, 1, "b"), make_item(2, 2, "c")]

        # Act
        cells = same_bounding_square(items)

        # Assert
        for cell in cells:
            assert cell.width == pytest.approx(9)
            assert cell.height == pytest.approx(9)

    def test_when_offset_diagram_then_centered_on_itself(self, make_item):
        """Each diagram's own center becomes its origin."""
        # Arrange
        items = [make_item(4, 2, "a", center=Point2D(10, -3)), make_item(1, 6, "b")]

        # Act
        cells = same_bounding_square(items)

        # Assert
        assert cells[0].find("a").box.center == ORIGIN
        assert cells[0].center == ORIGIN
        assert _phantom_boxes(cells[0]) == [BoundingBox.centered(ORIGIN, 6, 6)]

    def test_when_empty_list_then_raises_precondition_error(self):
        with pytest.raises(LayoutPreconditionError):
            same_bounding_square([])


class TestCustomBackend:
    """Normalization only relies on the capability interface."""

    def test_same_bounding_rect_when_box_backend_then_uniform_boxes(self):
        # Arrange
        backend = BoxBackend()
        boxes = [BoundingBox.centered(ORIGIN, 10, 5), BoundingBox.centered(ORIGIN, 4, 20)]

        # Act
        cells = same_bounding_rect(boxes, backend=backend)

        # Assert
        assert cells == [BoundingBox(-5, -10, 5, 10), BoundingBox(-5, -10, 5, 10)]

    def test_same_bounding_square_when_box_backend_then_square_boxes(self):
        backend = BoxBackend()
        boxes = [BoundingBox.centered(Point2D(3, 3), 2, 8)]

        cells = same_bounding_square(boxes, backend=backend)

        assert cells == [BoundingBox(-4, -4, 4, 4)]
