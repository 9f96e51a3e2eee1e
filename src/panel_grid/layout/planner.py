"""
Module: layout.planner

Purpose:
    Place panels onto the responsive grid without overlap.
    Greedy best-effort packing: no backtracking, no swaps.

Key Functions:
    - plan_layout(): Main entry point, returns id -> pixel rectangle
    - plan_cells(): Same placement, returns id -> anchor cell

Algorithm:
    1. Stable sort panels by priority (highest first)
    2. Build a fresh OccupancyGrid for this pass
    3. For each panel, use its preferred cell if still free,
       otherwise the first free region in row-major order
    4. Panels with no free region anywhere are skipped (no error)

Dependencies:
    - layout.config: GridConfig
    - layout.models: PanelLayout, CellPosition, GridPosition
    - layout.occupancy: OccupancyGrid
    - layout.geometry: span_rect

Used By:
    - controller: Viewport pipeline
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .config import GridConfig
from .geometry import span_rect
from .models import CellPosition, GridPosition, PanelLayout
from .occupancy import OccupancyGrid

logger = logging.getLogger(__name__)


def plan_cells(
    panels: Sequence[PanelLayout],
    config: GridConfig,
) -> Dict[str, CellPosition]:
    """
    Choose an anchor cell for each panel that fits.

    Args:
        panels: Panel descriptors (read only)
        config: Grid configuration

    Returns:
        Mapping of panel id to anchor cell, in placement order.
        Panels that could not be placed have no entry.

    Raises:
        ValueError: If two panels share an id
    """
    _check_unique_ids(panels)

    # Python's sort is stable, including with reverse=True
    ordered = sorted(panels, key=lambda panel: panel.priority, reverse=True)

    occupancy = OccupancyGrid(config.columns, config.rows)
    cells: Dict[str, CellPosition] = {}

    for panel in ordered:
        span = panel.span
        cell = _preferred_cell(panel, occupancy)

        if cell is None:
            cell = occupancy.find_first_available(span.cols, span.rows)

        if cell is None:
            logger.info(
                f"No room for panel '{panel.id}' ({panel.size.value}) "
                f"on {config.columns}x{config.rows} grid, skipping"
            )
            continue

        occupancy.occupy(cell.col, cell.row, span.cols, span.rows)
        cells[panel.id] = cell
        logger.debug(f"Placed '{panel.id}' ({panel.size.value}) at ({cell.col}, {cell.row})")

    logger.debug(f"Occupancy after pass:\n{occupancy.to_text()}")
    logger.info(f"Placed {len(cells)} of {len(panels)} panels")

    return cells


def plan_layout(
    panels: Sequence[PanelLayout],
    config: GridConfig,
    viewport_width: float,
    viewport_height: float,
) -> Dict[str, GridPosition]:
    """
    Compute pixel rectangles for a set of panels.

    Each call is independent: the occupancy grid is built and discarded
    inside the call, so repeated or concurrent calls do not interact.

    Args:
        panels: Panel descriptors, in caller order (used as tie-break)
        config: Grid configuration, usually from derive_config()
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels

    Returns:
        Mapping of panel id to rectangle. Panels that do not fit are
        absent from the mapping.

    Example:
        >>> config = derive_config(1920, 1080)
        >>> positions = plan_layout(get_preset("default"), config, 1920, 1080)
        >>> positions["vision"]
        GridPosition(x=32.0, y=180.0, width=449.0, height=260.0)
    """
    sizes = {panel.id: panel.size for panel in panels}
    cells = plan_cells(panels, config)

    return {
        panel_id: span_rect(
            cell.col,
            cell.row,
            sizes[panel_id],
            config,
            viewport_width,
            viewport_height,
        )
        for panel_id, cell in cells.items()
    }


def _preferred_cell(panel: PanelLayout, occupancy: OccupancyGrid) -> Optional[CellPosition]:
    """Return the panel's preferred cell if it is set and still free."""
    preferred = panel.preferred_position
    if preferred is None:
        return None

    span = panel.span
    if occupancy.is_available(preferred.col, preferred.row, span.cols, span.rows):
        return preferred

    logger.debug(
        f"Preferred cell ({preferred.col}, {preferred.row}) unavailable "
        f"for '{panel.id}', falling back to first fit"
    )
    return None


def _check_unique_ids(panels: Sequence[PanelLayout]) -> None:
    """Reject panel sets that reuse an id."""
    seen: set[str] = set()
    duplicates: List[str] = []
    for panel in panels:
        if panel.id in seen and panel.id not in duplicates:
            duplicates.append(panel.id)
        seen.add(panel.id)

    if duplicates:
        raise ValueError(f"Duplicate panel ids in layout pass: {duplicates}")
