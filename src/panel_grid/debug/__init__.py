"""Debug helpers for inspecting layout passes."""

from .visualizer import save_layout_preview, visualize_layout

__all__ = ["save_layout_preview", "visualize_layout"]
