"""
Module: layout.models

Purpose:
    Data models for panel layout.
    Immutable dataclasses describing panel requests, grid cells and the
    pixel rectangles produced by a layout pass.

Key Classes:
    - PanelSize: Closed set of panel size tags
    - Span: Column/row span of a panel
    - CellPosition: Grid cell coordinate
    - GridPosition: Pixel rectangle for a placed panel
    - PanelLayout: Panel descriptor supplied by callers

Key Functions:
    - span_of(): Convert a size tag to its span

Dependencies:
    - dataclasses (std)

Used By:
    - layout.geometry: Span rectangles
    - layout.planner: Placement
    - layout.presets: Preset tables
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class PanelSize(Enum):
    """
    Logical panel size tag.

    The first number is the column span, the second the row span.

    Example:
        >>> PanelSize("2x1").span
        Span(cols=2, rows=1)
    """

    ONE_BY_ONE = "1x1"
    ONE_BY_TWO = "1x2"
    TWO_BY_ONE = "2x1"
    TWO_BY_TWO = "2x2"

    @property
    def span(self) -> Span:
        """Column/row span for this size."""
        return span_of(self)

    @classmethod
    def parse(cls, value: Union[PanelSize, str]) -> PanelSize:
        """
        Accept a PanelSize or its string tag.

        Raises:
            ValueError: If the tag is not one of 1x1, 1x2, 2x1, 2x2
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown panel size {value!r} (expected one of: {valid})") from None


@dataclass(frozen=True)
class Span:
    """Number of columns and rows a panel covers."""

    cols: int
    rows: int


_SPANS = {
    PanelSize.ONE_BY_ONE: Span(cols=1, rows=1),
    PanelSize.ONE_BY_TWO: Span(cols=1, rows=2),
    PanelSize.TWO_BY_ONE: Span(cols=2, rows=1),
    PanelSize.TWO_BY_TWO: Span(cols=2, rows=2),
}


def span_of(size: PanelSize) -> Span:
    """Convert a panel size tag to its column/row span."""
    return _SPANS[size]


@dataclass(frozen=True)
class CellPosition:
    """
    Grid cell coordinate (zero-based).

    Attributes:
        col: Column index, counted from the left
        row: Row index, counted from the top
    """

    col: int
    row: int

    def to_dict(self) -> dict:
        return {"col": self.col, "row": self.row}

    @classmethod
    def from_dict(cls, data: dict) -> CellPosition:
        return cls(col=int(data["col"]), row=int(data["row"]))


@dataclass(frozen=True)
class GridPosition:
    """
    Pixel rectangle a panel should occupy.

    Produced fresh by each layout pass. Coordinates are relative to the
    viewport origin (top-left).

    Attributes:
        x: Left edge
        y: Top edge
        width: Rectangle width
        height: Rectangle height

    Example:
        >>> rect = GridPosition(x=32, y=180, width=449, height=260)
        >>> rect.right
        481
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (y + height)."""
        return self.y + self.height

    def intersects(self, other: GridPosition) -> bool:
        """
        Check if this rectangle overlaps another.

        Rectangles that only share an edge do NOT intersect.

        Args:
            other: Rectangle to test against

        Returns:
            True if the two rectangles share a positive area
        """
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> GridPosition:
        return cls(
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
        )


def _normalize_priority(value: Any) -> float:
    """
    Coerce a priority to a sortable number.

    Raises:
        ValueError: If the value is not a real number (bools included)
    """
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"priority must be a number: {value!r}")
    if math.isnan(value):
        return 0
    return value


@dataclass(frozen=True)
class PanelLayout:
    """
    Panel descriptor supplied by the caller (immutable).

    The layout engine only reads these, it never modifies them.

    Attributes:
        id: Panel identifier, unique within one layout pass
        size: Size tag (string tags are converted on construction)
        priority: Higher priority panels are placed first (default 0).
            None and NaN are treated as 0.
        preferred_position: Optional anchor cell, honoured if still free

    Example:
        >>> panel = PanelLayout("vision", "1x1", priority=10,
        ...                     preferred_position=CellPosition(0, 0))
        >>> panel.span
        Span(cols=1, rows=1)
    """

    id: str
    size: PanelSize
    priority: float = 0
    preferred_position: Optional[CellPosition] = None

    def __post_init__(self) -> None:
        """Validate and normalize on construction."""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"id must be a non-empty string: {self.id!r}")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "size", PanelSize.parse(self.size))
        object.__setattr__(self, "priority", _normalize_priority(self.priority))

    @property
    def span(self) -> Span:
        """Column/row span derived from the size tag."""
        return span_of(self.size)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict with id, size, priority and optionally preferred_position
        """
        d: dict[str, Any] = {
            "id": self.id,
            "size": self.size.value,
            "priority": self.priority,
        }
        if self.preferred_position is not None:
            d["preferred_position"] = self.preferred_position.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PanelLayout:
        """
        Deserialize from dictionary.

        Args:
            data: Dict with id, size, optionally priority, preferred_position

        Returns:
            PanelLayout instance
        """
        preferred = data.get("preferred_position")
        return cls(
            id=data["id"],
            size=PanelSize.parse(data["size"]),
            priority=data.get("priority", 0),
            preferred_position=CellPosition.from_dict(preferred) if preferred else None,
        )
