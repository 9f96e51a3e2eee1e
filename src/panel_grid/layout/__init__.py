"""
Module: layout

Purpose:
    Automatic panel layout engine.
    Places rectangular panels onto a responsive grid without overlap,
    honouring priority and preferred cells.

Key Functions:
    - derive_config(): Grid configuration for a viewport
    - plan_layout(): Main entry point for layout
    - span_rect(): Pixel rectangle of a panel at a cell

Key Classes:
    - GridConfig: Grid configuration
    - PanelLayout: Panel descriptor
    - GridPosition: Pixel rectangle
    - OccupancyGrid: Per-pass occupancy matrix

Used By:
    - controller: Viewport pipeline
    - debug.visualizer: Layout previews
"""

from .config import BreakpointTier, GridConfig, Padding, breakpoint_tier, derive_config
from .models import CellPosition, GridPosition, PanelLayout, PanelSize, Span, span_of
from .geometry import cell_rect, cell_size, span_rect
from .occupancy import OccupancyError, OccupancyGrid
from .planner import plan_cells, plan_layout
from .presets import (
    PRESET_LAYOUTS,
    PresetValidationError,
    get_preset,
    load_presets,
    save_presets,
)

__all__ = [
    # Config
    "BreakpointTier",
    "GridConfig",
    "Padding",
    "breakpoint_tier",
    "derive_config",
    # Models
    "CellPosition",
    "GridPosition",
    "PanelLayout",
    "PanelSize",
    "Span",
    "span_of",
    # Geometry
    "cell_rect",
    "cell_size",
    "span_rect",
    # Occupancy
    "OccupancyError",
    "OccupancyGrid",
    # Planning
    "plan_cells",
    "plan_layout",
    # Presets
    "PRESET_LAYOUTS",
    "PresetValidationError",
    "get_preset",
    "load_presets",
    "save_presets",
]
