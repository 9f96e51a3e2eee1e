"""Top-level package for the panel grid layout engine.

Provides subpackages:
- panel_grid.layout – grid configuration, occupancy and placement
- panel_grid.debug – preview images for layout passes
"""

from .controller import LayoutPass, layout_for_viewport, layout_preset
from .layout import GridConfig, GridPosition, PanelLayout, PanelSize, derive_config, plan_layout


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("panel-grid")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "GridConfig",
    "GridPosition",
    "LayoutPass",
    "PanelLayout",
    "PanelSize",
    "derive_config",
    "layout_for_viewport",
    "layout_preset",
    "plan_layout",
    "__version__",
]
