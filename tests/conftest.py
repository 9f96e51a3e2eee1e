import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import panel_grid
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from panel_grid.layout import CellPosition, GridConfig, Padding, PanelLayout  # noqa: E402


# Common test fixtures
@pytest.fixture
def panel_factory():
    """Factory to create panel descriptors."""
    def _create(
        panel_id: str,
        size: str = "1x1",
        priority: float = 0,
        preferred: tuple[int, int] | None = None,
    ) -> PanelLayout:
        return PanelLayout(
            id=panel_id,
            size=size,
            priority=priority,
            preferred_position=CellPosition(*preferred) if preferred else None,
        )
    return _create


@pytest.fixture
def two_cell_config() -> GridConfig:
    """A 2x1 grid with room for exactly two 1x1 panels."""
    return GridConfig(columns=2, rows=1, gap=0, padding=Padding())
