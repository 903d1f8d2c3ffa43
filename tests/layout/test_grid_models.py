"""
Unit tests for layout config and models.
"""

import pytest

from diagram_grid.layout import GridConfig, GridShape


class TestGridConfig:
    """Tests for GridConfig dataclass."""

    def test_init_when_defaults_then_auto_columns_row_major(self):
        # Act
        config = GridConfig()

        # Assert
        assert config.columns is None
        assert config.auto_columns
        assert not config.snake

    def test_init_when_columns_given_then_not_auto(self):
        config = GridConfig(columns=4, snake=True)

        assert not config.auto_columns
        assert config.snake

    @pytest.mark.parametrize("columns", [0, -3])
    def test_init_when_columns_not_positive_then_raises_error(self, columns):
        with pytest.raises(ValueError, match="columns must be positive"):
            GridConfig(columns=columns)


class TestGridShape:
    """Tests for GridShape dataclass."""

    def test_rows_when_partial_last_row_then_rounded_up(self):
        shape = GridShape(item_count=10, columns=3)

        assert shape.rows == 4
        assert shape.cell_count == 12
        assert shape.padding == 2

    def test_rows_when_exact_multiple_then_no_padding(self):
        shape = GridShape(item_count=6, columns=3)

        assert shape.rows == 2
        assert shape.padding == 0

    def test_rows_when_no_items_then_zero(self):
        shape = GridShape(item_count=0, columns=3)

        assert shape.rows == 0
        assert shape.padding == 0

    def test_init_when_columns_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="columns must be positive"):
            GridShape(item_count=5, columns=0)

    def test_init_when_negative_items_then_raises_error(self):
        with pytest.raises(ValueError, match="item_count must be non-negative"):
            GridShape(item_count=-1, columns=2)
