"""
Module: layout.presets

Purpose:
    Named preset panel sets for known screens, plus JSON loading and
    saving for caller-supplied preset tables. Presets are configuration
    data only; the planner treats them like any other panel sequence.

Key Functions:
    - get_preset(): Look up a built-in preset by name
    - validate_presets(): Structural checks on preset JSON
    - load_presets(): Read presets from a JSON file
    - save_presets(): Write presets to a JSON file

Key Classes:
    - PresetValidationError: Raised for malformed preset data

File Format:
    {
        "presets": {
            "<name>": [
                {"id": "vision", "size": "1x1", "priority": 10,
                 "preferred_position": {"col": 0, "row": 0}},
                ...
            ]
        }
    }

Dependencies:
    - json (std)
    - layout.models: PanelLayout, PanelSize, CellPosition

Used By:
    - controller: layout_preset()
    - scripts/render_layout_preview.py
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .models import CellPosition, PanelLayout, PanelSize

logger = logging.getLogger(__name__)

PresetTable = Mapping[str, Tuple[PanelLayout, ...]]


def _panel(panel_id: str, size: str, priority: int, col: int, row: int) -> PanelLayout:
    return PanelLayout(
        id=panel_id,
        size=PanelSize(size),
        priority=priority,
        preferred_position=CellPosition(col=col, row=row),
    )


# Corner positions assume the 4x3 wide grid; on smaller tiers the
# out-of-bounds preferences fall back to first fit.
PRESET_LAYOUTS: PresetTable = MappingProxyType({
    "default": (
        _panel("vision", "1x1", 10, 0, 0),    # top left
        _panel("info", "1x1", 9, 3, 0),       # top right
        _panel("services", "1x1", 8, 0, 2),   # bottom left
        _panel("contact", "1x1", 7, 3, 2),    # bottom right
    ),
    "minimal": (
        _panel("info", "1x1", 10, 0, 0),
        _panel("contact", "1x1", 9, 3, 2),
    ),
    "showcase": (
        _panel("vision", "2x2", 10, 2, 0),
        _panel("info", "1x1", 9, 0, 0),
        _panel("services", "1x2", 8, 0, 1),
        _panel("contact", "1x1", 7, 1, 0),
    ),
})


class PresetValidationError(Exception):
    """Raised when preset data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def get_preset(name: str, presets: PresetTable = PRESET_LAYOUTS) -> Tuple[PanelLayout, ...]:
    """
    Look up a preset by name.

    Args:
        name: Preset name, e.g. "default"
        presets: Table to search (built-in presets by default)

    Returns:
        Tuple of panel descriptors

    Raises:
        KeyError: If the preset does not exist
    """
    try:
        return presets[name]
    except KeyError:
        known = ", ".join(sorted(presets))
        raise KeyError(f"Unknown preset '{name}' (available: {known})") from None


def validate_presets(data: Any) -> None:
    """
    Validate preset data before deserialization.

    Collects every problem found rather than stopping at the first.

    Raises:
        PresetValidationError: If the data is malformed
    """
    if not isinstance(data, dict) or not isinstance(data.get("presets"), dict):
        raise PresetValidationError(
            "Preset data must be an object with a 'presets' object",
            path="presets",
        )

    errors: List[str] = []
    valid_sizes = {size.value for size in PanelSize}

    for name, panels in data["presets"].items():
        base = f"presets.{name}"
        if not isinstance(panels, list):
            errors.append(f"{base}: expected a list of panels")
            continue

        seen_ids = set()
        for index, panel in enumerate(panels):
            path = f"{base}[{index}]"
            if not isinstance(panel, dict):
                errors.append(f"{path}: expected an object")
                continue

            panel_id = panel.get("id")
            if not isinstance(panel_id, str) or not panel_id:
                errors.append(f"{path}.id: expected a non-empty string")
            elif panel_id in seen_ids:
                errors.append(f"{path}.id: duplicate id '{panel_id}'")
            else:
                seen_ids.add(panel_id)

            if panel.get("size") not in valid_sizes:
                errors.append(f"{path}.size: expected one of {sorted(valid_sizes)}")

            priority = panel.get("priority", 0)
            if priority is not None and (isinstance(priority, bool) or not isinstance(priority, (int, float))):
                errors.append(f"{path}.priority: expected a number")

            preferred = panel.get("preferred_position")
            if preferred is not None and not _is_cell(preferred):
                errors.append(f"{path}.preferred_position: expected {{col: int, row: int}}")

    if errors:
        raise PresetValidationError(
            f"Invalid preset data ({len(errors)} errors)",
            path="presets",
            errors=errors,
        )


def _is_cell(value: Any) -> bool:
    if not isinstance(value, dict):
        return False
    return all(
        isinstance(value.get(key), int) and not isinstance(value.get(key), bool)
        for key in ("col", "row")
    )


def presets_from_dict(data: Dict[str, Any], *, validate: bool = True) -> Dict[str, Tuple[PanelLayout, ...]]:
    """
    Deserialize a preset table from a dictionary.

    Args:
        data: Dictionary in the preset file format
        validate: Whether to run validate_presets() first

    Returns:
        Mapping of preset name to panel tuple
    """
    if validate:
        validate_presets(data)

    return {
        name: tuple(PanelLayout.from_dict(panel) for panel in panels)
        for name, panels in data["presets"].items()
    }


def presets_to_dict(presets: PresetTable) -> Dict[str, Any]:
    """Serialize a preset table to the preset file format."""
    return {
        "presets": {
            name: [panel.to_dict() for panel in panels]
            for name, panels in presets.items()
        }
    }


def load_presets(path: Path) -> Dict[str, Tuple[PanelLayout, ...]]:
    """
    Load presets from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        PresetValidationError: If the JSON is invalid or malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise PresetValidationError(f"Invalid JSON in {path}: {e}", path=str(path)) from e

    presets = presets_from_dict(data)
    logger.info(f"Loaded {len(presets)} presets from {path}")
    return presets


def save_presets(presets: PresetTable, path: Path) -> Path:
    """
    Write presets to a JSON file.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(presets_to_dict(presets), f, indent=2)
    logger.debug(f"Saved {len(presets)} presets to {path}")
    return path
