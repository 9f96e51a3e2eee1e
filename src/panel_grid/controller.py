"""
Module: controller

Purpose:
    Run a complete layout pass for a viewport.
    Viewport → Grid config → Placement → LayoutPass

Key Functions:
    - layout_for_viewport(): Layout an arbitrary panel set
    - layout_preset(): Layout a named preset

Key Classes:
    - LayoutPass: Result of one pass

Dependencies:
    - layout: derive_config, plan_layout, presets

Used By:
    - debug.visualizer: Layout previews
    - scripts/render_layout_preview.py
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .layout import (
    PRESET_LAYOUTS,
    BreakpointTier,
    GridConfig,
    GridPosition,
    PanelLayout,
    breakpoint_tier,
    derive_config,
    get_preset,
    plan_layout,
)
from .layout.presets import PresetTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutPass:
    """
    Result of one layout pass (immutable).

    Attributes:
        config: Grid configuration used for the pass
        tier: Breakpoint tier the viewport fell into
        positions: Panel id → rectangle for every placed panel
        skipped: Ids of panels that did not fit, in input order

    Example:
        >>> result = layout_preset("default", 1920, 1080)
        >>> sorted(result.positions)
        ['contact', 'info', 'services', 'vision']
        >>> result.skipped
        ()
    """

    config: GridConfig
    tier: BreakpointTier
    positions: Dict[str, GridPosition]
    skipped: Tuple[str, ...] = ()

    @property
    def placed_count(self) -> int:
        """Number of panels that received a rectangle."""
        return len(self.positions)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "tier": self.tier.value,
            "columns": self.config.columns,
            "rows": self.config.rows,
            "positions": {
                panel_id: rect.to_dict() for panel_id, rect in self.positions.items()
            },
            "skipped": list(self.skipped),
        }


def layout_for_viewport(
    panels: Sequence[PanelLayout],
    viewport_width: float,
    viewport_height: float,
) -> LayoutPass:
    """
    Lay out panels for the given viewport.

    Args:
        panels: Panel descriptors
        viewport_width: Viewport width in pixels (> 0)
        viewport_height: Viewport height in pixels (> 0)

    Only non-positive viewports are rejected. A viewport smaller than the
    tier's padding still lays out, but the rectangles come back with
    negative width or height (300x100 on the narrow tier gives cells
    -15px tall). Callers are expected to pass realistic sizes.

    Returns:
        LayoutPass with positions and skipped ids

    Raises:
        ValueError: If the viewport dimensions are not positive or
            panel ids repeat
    """
    if viewport_width <= 0 or viewport_height <= 0:
        raise ValueError(
            f"Viewport must be positive: {viewport_width}x{viewport_height}"
        )

    start_time = time.perf_counter()

    tier = breakpoint_tier(viewport_width)
    config = derive_config(viewport_width, viewport_height)
    positions = plan_layout(panels, config, viewport_width, viewport_height)
    skipped = tuple(panel.id for panel in panels if panel.id not in positions)

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(
        f"Layout pass {viewport_width}x{viewport_height} ({tier.value}): "
        f"{len(positions)} placed, {len(skipped)} skipped in {elapsed_ms:.2f}ms"
    )

    return LayoutPass(config=config, tier=tier, positions=positions, skipped=skipped)


def layout_preset(
    name: str,
    viewport_width: float,
    viewport_height: float,
    presets: Optional[PresetTable] = None,
) -> LayoutPass:
    """
    Lay out a named preset for the given viewport.

    Args:
        name: Preset name
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels
        presets: Preset table (built-in presets when None)

    Raises:
        KeyError: If the preset is unknown
    """
    table = PRESET_LAYOUTS if presets is None else presets
    return layout_for_viewport(get_preset(name, table), viewport_width, viewport_height)
