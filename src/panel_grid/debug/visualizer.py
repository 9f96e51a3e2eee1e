"""
Module: debug.visualizer

Purpose:
    Debug visualization for layout passes. Draws the grid cells and a
    labelled box for every placed panel so layouts can be inspected
    without a browser.

Key Functions:
    - visualize_layout(): Create a preview image for a layout pass
    - save_layout_preview(): Save the preview to disk

Dependencies:
    - PIL: Image drawing
    - layout.geometry: Cell rectangles
    - controller: LayoutPass

Used By:
    - scripts/render_layout_preview.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from ..controller import LayoutPass
from ..layout.geometry import cell_rect
from ..layout.models import GridPosition

logger = logging.getLogger(__name__)

# Visualization constants
BACKGROUND_COLOR = (24, 24, 32)
GRID_AREA_COLOR = (36, 36, 48)
CELL_OUTLINE_COLOR = (80, 80, 100)
PANEL_COLORS = [
    (0, 200, 255, 120),    # Cyan
    (255, 120, 0, 120),    # Orange
    (140, 255, 0, 120),    # Lime
    (255, 0, 160, 120),    # Magenta
    (255, 220, 0, 120),    # Yellow
    (160, 100, 255, 120),  # Violet
]

LABEL_BG_COLOR = (0, 0, 0, 200)      # Black background for labels
LABEL_TEXT_COLOR = (255, 255, 255)    # White text
BOX_LINE_WIDTH = 3
FONT_SIZE = 16


def visualize_layout(
    layout_pass: LayoutPass,
    viewport_width: float,
    viewport_height: float,
) -> Image.Image:
    """
    Create a preview image of a layout pass.

    Draws:
    - The padded grid area
    - Every grid cell outline
    - A semi-transparent box per placed panel, labelled with its id

    Args:
        layout_pass: Result of layout_for_viewport() or layout_preset()
        viewport_width: Viewport width used for the pass
        viewport_height: Viewport height used for the pass

    Returns:
        RGB image the size of the viewport

    Example:
        >>> result = layout_preset("showcase", 1280, 800)
        >>> img = visualize_layout(result, 1280, 800)
        >>> img.size
        (1280, 800)
    """
    size = (max(1, round(viewport_width)), max(1, round(viewport_height)))
    config = layout_pass.config

    canvas = Image.new("RGBA", size, BACKGROUND_COLOR + (255,))
    draw = ImageDraw.Draw(canvas)

    # Grid area inside the padding
    if config.usable_width(viewport_width) > 0 and config.usable_height(viewport_height) > 0:
        draw.rectangle(
            (
                config.padding.left,
                config.padding.top,
                viewport_width - config.padding.right,
                viewport_height - config.padding.bottom,
            ),
            fill=GRID_AREA_COLOR,
        )

    for row in range(config.rows):
        for col in range(config.columns):
            cell = cell_rect(col, row, config, viewport_width, viewport_height)
            if cell.width <= 0 or cell.height <= 0:
                continue
            draw.rectangle(_box(cell), outline=CELL_OUTLINE_COLOR, width=1)

    # Panels go on a separate layer for transparency
    overlay = Image.new("RGBA", size, (255, 255, 255, 0))
    overlay_draw = ImageDraw.Draw(overlay)

    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    for index, (panel_id, rect) in enumerate(layout_pass.positions.items()):
        if rect.width <= 0 or rect.height <= 0:
            logger.warning(f"Panel '{panel_id}' has no visible area, not drawn")
            continue
        color = PANEL_COLORS[index % len(PANEL_COLORS)]
        _draw_panel_box(overlay_draw, rect, panel_id, color, font)

    canvas = Image.alpha_composite(canvas, overlay)
    return canvas.convert("RGB")


def _box(rect: GridPosition) -> Tuple[float, float, float, float]:
    """Convert a rectangle to PIL (left, top, right, bottom) form."""
    return (rect.x, rect.y, rect.right, rect.bottom)


def _draw_panel_box(
    draw: ImageDraw.ImageDraw,
    rect: GridPosition,
    label_text: str,
    color: Tuple[int, int, int, int],
    font: ImageFont.FreeTypeFont,
) -> None:
    """
    Draw a single panel rectangle with its id in the top-left corner.

    Args:
        draw: ImageDraw object
        rect: Panel rectangle
        label_text: Text to display
        color: RGBA fill colour (outline uses the opaque variant)
        font: Font for label text
    """
    draw.rectangle(_box(rect), fill=color, outline=color[:3] + (255,), width=BOX_LINE_WIDTH)

    text_bbox = draw.textbbox((0, 0), label_text, font=font)
    text_width = text_bbox[2] - text_bbox[0]
    text_height = text_bbox[3] - text_bbox[1]

    label_x = rect.x + BOX_LINE_WIDTH + 2
    label_y = rect.y + BOX_LINE_WIDTH + 2
    draw.rectangle(
        (label_x, label_y, label_x + text_width + 4, label_y + text_height + 4),
        fill=LABEL_BG_COLOR,
    )
    draw.text(
        (label_x + 2, label_y + 2),
        label_text,
        fill=LABEL_TEXT_COLOR,
        font=font,
    )


def save_layout_preview(
    layout_pass: LayoutPass,
    viewport_width: float,
    viewport_height: float,
    output_path: Path,
) -> Path:
    """
    Create and save a layout preview as PNG.

    Args:
        layout_pass: Layout pass to draw
        viewport_width: Viewport width used for the pass
        viewport_height: Viewport height used for the pass
        output_path: Destination file (parent directories are created)

    Returns:
        Path to saved preview image
    """
    preview = visualize_layout(layout_pass, viewport_width, viewport_height)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    preview.save(output_path, "PNG")

    logger.info(
        f"Saved layout preview to {output_path}: "
        f"{layout_pass.placed_count} panels, {len(layout_pass.skipped)} skipped"
    )

    return output_path
