"""
Module: layout.geometry

Purpose:
    Convert grid coordinates to pixel rectangles.
    The usable viewport area (viewport minus padding) is divided into
    columns x rows equal cells separated by the configured gap.

Key Functions:
    - cell_size(): Width and height of one cell
    - cell_rect(): Pixel rectangle of a single cell
    - span_rect(): Pixel rectangle of a multi-cell span

Dependencies:
    - layout.config: GridConfig
    - layout.models: GridPosition, PanelSize

Used By:
    - layout.planner: Final panel rectangles
    - debug.visualizer: Grid cell outlines
"""

from __future__ import annotations

from typing import Tuple

from .config import GridConfig
from .models import GridPosition, PanelSize, span_of


def cell_size(
    config: GridConfig,
    viewport_width: float,
    viewport_height: float,
) -> Tuple[float, float]:
    """
    Compute the size of one grid cell.

    cell_width = (usable_width - (columns - 1) * gap) / columns,
    and the same for height with rows.

    Returns:
        (cell_width, cell_height) in pixels
    """
    usable_width = config.usable_width(viewport_width)
    usable_height = config.usable_height(viewport_height)

    cell_width = (usable_width - (config.columns - 1) * config.gap) / config.columns
    cell_height = (usable_height - (config.rows - 1) * config.gap) / config.rows
    return cell_width, cell_height


def cell_rect(
    col: int,
    row: int,
    config: GridConfig,
    viewport_width: float,
    viewport_height: float,
) -> GridPosition:
    """
    Compute the pixel rectangle of a single cell.

    Args:
        col: Column index (0-based)
        row: Row index (0-based)
        config: Grid configuration
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels

    Returns:
        Top-left anchored rectangle, offset by the padding

    Example:
        >>> config = derive_config(1920, 1080)
        >>> cell_rect(1, 0, config, 1920, 1080)
        GridPosition(x=501.0, y=180.0, width=449.0, height=260.0)
    """
    cell_width, cell_height = cell_size(config, viewport_width, viewport_height)

    return GridPosition(
        x=config.padding.left + col * (cell_width + config.gap),
        y=config.padding.top + row * (cell_height + config.gap),
        width=cell_width,
        height=cell_height,
    )


def span_rect(
    col: int,
    row: int,
    size: PanelSize,
    config: GridConfig,
    viewport_width: float,
    viewport_height: float,
) -> GridPosition:
    """
    Compute the pixel rectangle of a panel anchored at a cell.

    Gaps between the spanned cells are absorbed into the rectangle, so a
    2-column span is 2 * cell_width + 1 * gap wide.

    Args:
        col: Anchor column (top-left cell of the span)
        row: Anchor row
        size: Panel size tag
        config: Grid configuration
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels

    Returns:
        Rectangle covering every cell of the span
    """
    span = span_of(size)
    origin = cell_rect(col, row, config, viewport_width, viewport_height)

    return GridPosition(
        x=origin.x,
        y=origin.y,
        width=span.cols * origin.width + (span.cols - 1) * config.gap,
        height=span.rows * origin.height + (span.rows - 1) * config.gap,
    )
