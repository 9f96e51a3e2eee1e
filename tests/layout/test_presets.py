"""
Unit tests for preset layouts and preset file loading.
"""

import json

import pytest

from panel_grid.layout import (
    PRESET_LAYOUTS,
    CellPosition,
    PanelLayout,
    PanelSize,
    PresetValidationError,
    get_preset,
    load_presets,
    save_presets,
)
from panel_grid.layout.presets import presets_from_dict, presets_to_dict, validate_presets


def _preset_data(**overrides):
    panel = {
        "id": "hero",
        "size": "2x2",
        "priority": 5,
        "preferred_position": {"col": 1, "row": 0},
    }
    panel.update(overrides)
    return {"presets": {"landing": [panel]}}


class TestBuiltinPresets:
    """Tests for the built-in preset table."""

    def test_presets_when_listed_then_three_known_names(self):
        assert set(PRESET_LAYOUTS) == {"default", "minimal", "showcase"}

    def test_default_when_loaded_then_four_corner_panels(self):
        panels = get_preset("default")

        assert [p.id for p in panels] == ["vision", "info", "services", "contact"]
        assert [p.preferred_position for p in panels] == [
            CellPosition(0, 0),
            CellPosition(3, 0),
            CellPosition(0, 2),
            CellPosition(3, 2),
        ]
        assert all(p.size is PanelSize.ONE_BY_ONE for p in panels)

    def test_showcase_when_loaded_then_mixed_sizes(self):
        sizes = {p.id: p.size for p in get_preset("showcase")}
        assert sizes == {
            "vision": PanelSize.TWO_BY_TWO,
            "info": PanelSize.ONE_BY_ONE,
            "services": PanelSize.ONE_BY_TWO,
            "contact": PanelSize.ONE_BY_ONE,
        }

    def test_get_preset_when_unknown_then_raises_key_error(self):
        with pytest.raises(KeyError, match="Unknown preset 'missing'"):
            get_preset("missing")

    def test_presets_when_mutated_then_raises(self):
        with pytest.raises(TypeError):
            PRESET_LAYOUTS["extra"] = ()


class TestValidatePresets:
    """Tests for validate_presets()."""

    def test_validate_when_valid_then_passes(self):
        validate_presets(_preset_data())

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(PresetValidationError, match="'presets' object"):
            validate_presets([])

    def test_validate_when_bad_size_then_reports_path(self):
        with pytest.raises(PresetValidationError) as exc_info:
            validate_presets(_preset_data(size="3x3"))

        assert exc_info.value.errors[0].startswith("presets.landing[0].size")

    def test_validate_when_priority_null_then_passes(self):
        data = _preset_data(priority=None)

        validate_presets(data)
        assert presets_from_dict(data)["landing"][0].priority == 0

    def test_validate_when_many_problems_then_collects_all(self):
        data = {
            "presets": {
                "broken": [
                    {"id": "", "size": "1x1"},
                    {"id": "a", "size": "1x1", "priority": "high"},
                    {"id": "a", "size": "1x1", "preferred_position": {"col": "0", "row": 0}},
                ],
                "not_a_list": {"id": "x"},
            }
        }

        with pytest.raises(PresetValidationError) as exc_info:
            validate_presets(data)

        errors = exc_info.value.errors
        assert len(errors) == 5
        assert any("duplicate id 'a'" in e for e in errors)
        assert any(e.startswith("presets.not_a_list") for e in errors)


class TestPresetFiles:
    """Tests for JSON round trip through files."""

    def test_presets_from_dict_when_valid_then_builds_panels(self):
        presets = presets_from_dict(_preset_data())

        assert presets["landing"] == (
            PanelLayout("hero", PanelSize.TWO_BY_TWO, priority=5,
                        preferred_position=CellPosition(1, 0)),
        )

    def test_save_then_load_when_builtin_then_equal(self, tmp_path):
        path = save_presets(PRESET_LAYOUTS, tmp_path / "nested" / "presets.json")

        assert load_presets(path) == dict(PRESET_LAYOUTS)

    def test_presets_to_dict_when_serialized_then_uses_size_tags(self):
        data = presets_to_dict({"minimal": get_preset("minimal")})
        assert data["presets"]["minimal"][0]["size"] == "1x1"

    def test_load_when_invalid_json_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(PresetValidationError, match="Invalid JSON"):
            load_presets(path)

    def test_load_when_malformed_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "presets.json"
        path.write_text(json.dumps(_preset_data(id=7)), encoding="utf-8")

        with pytest.raises(PresetValidationError):
            load_presets(path)

    def test_load_when_missing_file_then_raises_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_presets(tmp_path / "absent.json")
