"""
Tests for layout preview rendering.
"""

from PIL import Image

from panel_grid.controller import LayoutPass, layout_preset
from panel_grid.debug import save_layout_preview, visualize_layout
from panel_grid.debug.visualizer import BACKGROUND_COLOR
from panel_grid.layout import GridPosition, derive_config
from panel_grid.layout.config import BreakpointTier


class TestVisualizeLayout:
    """Tests for visualize_layout()."""

    def test_visualize_when_desktop_then_viewport_sized_rgb(self):
        result = layout_preset("showcase", 1280, 800)

        img = visualize_layout(result, 1280, 800)

        assert img.size == (1280, 800)
        assert img.mode == "RGB"

    def test_visualize_when_panel_placed_then_pixels_change_inside_panel(self):
        result = layout_preset("default", 1920, 1080)
        img = visualize_layout(result, 1920, 1080)

        vision = result.positions["vision"]
        centre = (int(vision.x + vision.width / 2), int(vision.y + vision.height / 2))

        assert img.getpixel((5, 5)) == BACKGROUND_COLOR
        assert img.getpixel(centre) != BACKGROUND_COLOR

    def test_visualize_when_no_panels_then_grid_only(self):
        empty = LayoutPass(
            config=derive_config(800, 600),
            tier=BreakpointTier.MEDIUM,
            positions={},
        )

        img = visualize_layout(empty, 800, 600)

        assert img.size == (800, 600)

    def test_visualize_when_degenerate_rect_then_skipped(self):
        degenerate = LayoutPass(
            config=derive_config(800, 600),
            tier=BreakpointTier.MEDIUM,
            positions={"flat": GridPosition(10, 10, 0, 50)},
        )

        img = visualize_layout(degenerate, 800, 600)

        assert img.size == (800, 600)


class TestSaveLayoutPreview:
    """Tests for save_layout_preview()."""

    def test_save_when_called_then_writes_png(self, tmp_path):
        result = layout_preset("minimal", 375, 812)

        path = save_layout_preview(result, 375, 812, tmp_path / "out" / "preview.png")

        assert path.exists()
        with Image.open(path) as saved:
            assert saved.format == "PNG"
            assert saved.size == (375, 812)
