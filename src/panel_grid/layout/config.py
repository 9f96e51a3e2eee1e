"""
Module: layout.config

Purpose:
    Responsive grid configuration. Maps the current viewport width onto
    one of three breakpoint tiers and returns the immutable grid
    configuration for that tier.

Key Functions:
    - breakpoint_tier(): Select the tier for a viewport width
    - derive_config(): Build the GridConfig for a viewport

Key Classes:
    - Padding: Pixel insets around the grid area
    - GridConfig: Immutable grid configuration
    - BreakpointTier: Narrow / medium / wide

Dependencies:
    - dataclasses (std)

Used By:
    - layout.geometry: Cell rectangles
    - layout.planner: Occupancy grid sizing
    - controller: Viewport pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# Tier boundaries (viewport width in px, exclusive upper bounds)
NARROW_MAX_WIDTH = 640
MEDIUM_MAX_WIDTH = 1024


class BreakpointTier(Enum):
    """Viewport width band selecting the grid dimensions."""

    NARROW = "narrow"
    MEDIUM = "medium"
    WIDE = "wide"


@dataclass(frozen=True)
class Padding:
    """
    Pixel insets from the viewport edges (immutable).

    Attributes:
        top: Inset from the top edge
        right: Inset from the right edge
        bottom: Inset from the bottom edge
        left: Inset from the left edge
    """

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    def __post_init__(self) -> None:
        """Validate padding on construction."""
        for name in ("top", "right", "bottom", "left"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"padding.{name} must be >= 0: {value}")

    @property
    def horizontal(self) -> float:
        """Combined left and right inset."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Combined top and bottom inset."""
        return self.top + self.bottom


@dataclass(frozen=True)
class GridConfig:
    """
    Grid configuration for one breakpoint tier (immutable).

    Recreated on every viewport change, never mutated.

    Attributes:
        columns: Number of grid columns (>= 1)
        rows: Number of grid rows (>= 1)
        gap: Pixel spacing between adjacent cells
        padding: Insets applied before the grid area begins

    Example:
        >>> config = GridConfig(columns=4, rows=3, gap=20)
        >>> config.cell_count
        12
    """

    columns: int
    rows: int
    gap: float = 0
    padding: Padding = field(default_factory=Padding)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.columns < 1:
            raise ValueError(f"columns must be >= 1: {self.columns}")
        if self.rows < 1:
            raise ValueError(f"rows must be >= 1: {self.rows}")
        if self.gap < 0:
            raise ValueError(f"gap must be >= 0: {self.gap}")

    @property
    def cell_count(self) -> int:
        """Total number of cells in the grid."""
        return self.columns * self.rows

    def usable_width(self, viewport_width: float) -> float:
        """Width available for cells (viewport minus horizontal padding)."""
        return viewport_width - self.padding.horizontal

    def usable_height(self, viewport_height: float) -> float:
        """Height available for cells (viewport minus vertical padding)."""
        return viewport_height - self.padding.vertical


# Hardcoded tier configurations
_TIER_CONFIGS = {
    BreakpointTier.NARROW: GridConfig(
        columns=2,
        rows=4,
        gap=8,
        padding=Padding(top=120, right=16, bottom=16, left=16),
    ),
    BreakpointTier.MEDIUM: GridConfig(
        columns=3,
        rows=3,
        gap=12,
        padding=Padding(top=150, right=24, bottom=24, left=24),
    ),
    BreakpointTier.WIDE: GridConfig(
        columns=4,
        rows=3,
        gap=20,
        padding=Padding(top=180, right=32, bottom=80, left=32),
    ),
}


def breakpoint_tier(viewport_width: float) -> BreakpointTier:
    """
    Select the breakpoint tier for a viewport width.

    The bands are contiguous: [0, 640) narrow, [640, 1024) medium,
    [1024, inf) wide.
    """
    if viewport_width < NARROW_MAX_WIDTH:
        return BreakpointTier.NARROW
    if viewport_width < MEDIUM_MAX_WIDTH:
        return BreakpointTier.MEDIUM
    return BreakpointTier.WIDE


def derive_config(viewport_width: float, viewport_height: float) -> GridConfig:
    """
    Build the grid configuration for the current viewport.

    Args:
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels. Accepted for symmetry
            with callers; tier selection currently depends on width only.

    Returns:
        GridConfig for the matching breakpoint tier

    Example:
        >>> derive_config(1920, 1080).columns
        4
    """
    return _TIER_CONFIGS[breakpoint_tier(viewport_width)]
