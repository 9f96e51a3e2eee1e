"""
Module: layout.occupancy

Purpose:
    Per-pass occupancy tracking for grid cells.
    A rows x columns boolean matrix (False = free) that prevents panels
    from colliding. Built empty at the start of a layout pass and thrown
    away when the pass ends.

Key Classes:
    - OccupancyGrid: Mutable occupancy matrix
    - OccupancyError: Raised on invalid occupy() requests

Scan Order:
    find_first_available() scans row-major from the top-left cell:
    rows outer (top to bottom), columns inner (left to right).
    Equal-priority panels without a preferred position are therefore
    placed in reading order.

Dependencies:
    - layout.models: CellPosition

Used By:
    - layout.planner: Placement
"""

from __future__ import annotations

from typing import List, Optional

from .models import CellPosition


class OccupancyError(Exception):
    """Region passed to occupy() is out of bounds or already taken."""
    pass


class OccupancyGrid:
    """
    Mutable occupancy matrix for one layout pass.

    Attributes:
        columns: Grid width in cells
        rows: Grid height in cells

    Example:
        >>> grid = OccupancyGrid(columns=4, rows=3)
        >>> grid.occupy(0, 0, 2, 2)
        >>> grid.is_available(1, 1, 1, 1)
        False
        >>> grid.find_first_available(2, 1)
        CellPosition(col=2, row=0)
    """

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 1:
            raise ValueError(f"columns must be >= 1: {columns}")
        if rows < 1:
            raise ValueError(f"rows must be >= 1: {rows}")
        self.columns = columns
        self.rows = rows
        self._cells: List[List[bool]] = [[False] * columns for _ in range(rows)]

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def in_bounds(self, col: int, row: int, col_span: int, row_span: int) -> bool:
        """Check that the region lies inside [0, columns) x [0, rows)."""
        return (
            col >= 0
            and row >= 0
            and col + col_span <= self.columns
            and row + row_span <= self.rows
        )

    def is_available(self, col: int, row: int, col_span: int, row_span: int) -> bool:
        """
        Check whether a region is inside the grid and entirely free.

        Args:
            col: Left column of the region
            row: Top row of the region
            col_span: Number of columns covered
            row_span: Number of rows covered

        Returns:
            False if the region leaves the grid or touches an occupied cell
        """
        if not self.in_bounds(col, row, col_span, row_span):
            return False

        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                if self._cells[r][c]:
                    return False
        return True

    def is_occupied(self, col: int, row: int) -> bool:
        """Check a single cell. Raises IndexError outside the grid."""
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            raise IndexError(f"Cell ({col}, {row}) outside {self.columns}x{self.rows} grid")
        return self._cells[row][col]

    @property
    def occupied_count(self) -> int:
        """Number of occupied cells."""
        return sum(sum(1 for cell in line if cell) for line in self._cells)

    @property
    def free_count(self) -> int:
        """Number of free cells."""
        return self.columns * self.rows - self.occupied_count

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def occupy(self, col: int, row: int, col_span: int, row_span: int) -> None:
        """
        Mark every cell of a region as occupied.

        Callers are expected to check is_available() first; the grid is
        left unchanged when this raises.

        Raises:
            OccupancyError: If the region is out of bounds or overlaps
                an occupied cell
        """
        if not self.in_bounds(col, row, col_span, row_span):
            raise OccupancyError(
                f"Region ({col}, {row}) span {col_span}x{row_span} "
                f"is outside {self.columns}x{self.rows} grid"
            )
        if not self.is_available(col, row, col_span, row_span):
            raise OccupancyError(
                f"Region ({col}, {row}) span {col_span}x{row_span} is already occupied"
            )

        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                self._cells[r][c] = True

    # ─────────────────────────────────────────────────────────────────────────
    # Search
    # ─────────────────────────────────────────────────────────────────────────

    def find_first_available(self, col_span: int, row_span: int) -> Optional[CellPosition]:
        """
        Find the first free region of the given span.

        Scans row-major from the top-left corner.

        Returns:
            Anchor cell of the first free region, or None if nothing fits
        """
        for r in range(self.rows - row_span + 1):
            for c in range(self.columns - col_span + 1):
                if self.is_available(c, r, col_span, row_span):
                    return CellPosition(col=c, row=r)
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Debug
    # ─────────────────────────────────────────────────────────────────────────

    def to_text(self) -> str:
        """Render the matrix as lines of '#' (occupied) and '.' (free)."""
        return "\n".join(
            "".join("#" if cell else "." for cell in line) for line in self._cells
        )

    def __repr__(self) -> str:
        return (
            f"OccupancyGrid({self.columns}x{self.rows}, "
            f"occupied={self.occupied_count})"
        )
