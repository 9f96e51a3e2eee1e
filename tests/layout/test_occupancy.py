"""
Unit tests for the occupancy grid.
"""

import pytest

from panel_grid.layout import CellPosition, OccupancyError, OccupancyGrid


class TestOccupancyGrid:
    """Tests for OccupancyGrid."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_then_all_free(self):
        grid = OccupancyGrid(columns=4, rows=3)
        assert grid.occupied_count == 0
        assert grid.free_count == 12
        assert grid.to_text() == "....\n....\n...."

    @pytest.mark.parametrize("columns, rows", [(0, 3), (3, 0), (-1, 2)])
    def test_init_when_empty_dimension_then_raises_error(self, columns, rows):
        with pytest.raises(ValueError):
            OccupancyGrid(columns=columns, rows=rows)

    # ─────────────────────────────────────────────────────────────────────────
    # is_available Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_is_available_when_empty_grid_then_true(self):
        grid = OccupancyGrid(4, 3)
        assert grid.is_available(0, 0, 4, 3) is True

    @pytest.mark.parametrize(
        "col, row, col_span, row_span",
        [
            (-1, 0, 1, 1),
            (0, -1, 1, 1),
            (3, 0, 2, 1),   # overhangs right edge
            (0, 2, 1, 2),   # overhangs bottom edge
            (4, 0, 1, 1),
        ],
    )
    def test_is_available_when_out_of_bounds_then_false(self, col, row, col_span, row_span):
        grid = OccupancyGrid(4, 3)
        assert grid.is_available(col, row, col_span, row_span) is False

    def test_is_available_when_partly_occupied_then_false(self):
        grid = OccupancyGrid(4, 3)
        grid.occupy(1, 1, 1, 1)

        assert grid.is_available(0, 0, 2, 2) is False
        assert grid.is_available(2, 1, 2, 2) is True

    def test_is_available_when_called_then_does_not_mutate(self):
        grid = OccupancyGrid(2, 2)
        grid.is_available(0, 0, 2, 2)
        assert grid.occupied_count == 0

    # ─────────────────────────────────────────────────────────────────────────
    # occupy Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_occupy_when_region_free_then_marks_every_cell(self):
        grid = OccupancyGrid(4, 3)
        grid.occupy(1, 0, 2, 2)

        assert grid.to_text() == ".##.\n.##.\n...."
        assert grid.is_occupied(1, 0) and grid.is_occupied(2, 1)
        assert not grid.is_occupied(0, 0)

    def test_occupy_when_out_of_bounds_then_raises_error(self):
        grid = OccupancyGrid(2, 2)
        with pytest.raises(OccupancyError, match="outside 2x2 grid"):
            grid.occupy(1, 1, 2, 1)
        assert grid.occupied_count == 0

    def test_occupy_when_already_occupied_then_raises_error(self):
        grid = OccupancyGrid(3, 3)
        grid.occupy(1, 1, 1, 1)

        with pytest.raises(OccupancyError, match="already occupied"):
            grid.occupy(0, 0, 2, 2)
        # Nothing from the rejected request was written
        assert grid.occupied_count == 1

    def test_is_occupied_when_outside_grid_then_raises_index_error(self):
        with pytest.raises(IndexError):
            OccupancyGrid(2, 2).is_occupied(2, 0)

    # ─────────────────────────────────────────────────────────────────────────
    # find_first_available Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_find_first_available_when_empty_then_origin(self):
        assert OccupancyGrid(4, 3).find_first_available(2, 2) == CellPosition(0, 0)

    def test_find_first_available_when_scanning_then_row_major(self):
        """Columns are scanned before moving to the next row."""
        grid = OccupancyGrid(3, 2)
        grid.occupy(0, 0, 1, 1)

        assert grid.find_first_available(1, 1) == CellPosition(1, 0)

        grid.occupy(1, 0, 2, 1)
        assert grid.find_first_available(1, 1) == CellPosition(0, 1)

    def test_find_first_available_when_wide_span_blocked_then_next_row(self):
        grid = OccupancyGrid(4, 3)
        grid.occupy(1, 0, 1, 1)
        grid.occupy(3, 0, 1, 1)

        # Row 0 has no two adjacent free cells
        assert grid.find_first_available(2, 1) == CellPosition(0, 1)

    def test_find_first_available_when_full_then_none(self):
        grid = OccupancyGrid(2, 2)
        grid.occupy(0, 0, 2, 2)
        assert grid.find_first_available(1, 1) is None

    def test_find_first_available_when_span_larger_than_grid_then_none(self):
        assert OccupancyGrid(1, 4).find_first_available(2, 1) is None
        assert OccupancyGrid(4, 1).find_first_available(1, 2) is None

    def test_repr_when_occupied_then_shows_counts(self):
        grid = OccupancyGrid(2, 4)
        grid.occupy(0, 0, 2, 2)
        assert repr(grid) == "OccupancyGrid(2x4, occupied=4)"
