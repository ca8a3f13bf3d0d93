"""Unit tests for project file loading and conversion."""

import json

import pytest

from cabinetry.application.config import (
    ConfigError,
    ProjectConfiguration,
    config_to_modules,
    config_to_standards,
    load_config,
    load_config_from_dict,
)
from cabinetry.application.config.loader import _format_json_path
from cabinetry.domain import (
    BackPanelType,
    CutListGenerator,
    DoorOpenType,
    HardwareScheduleGenerator,
    ModuleType,
    StandardCategory,
)


def minimal_project(**module_fields):
    module = {"name": "B1", "width_mm": 600, "height_mm": 720, "depth_mm": 550}
    module.update(module_fields)
    return {"schema_version": "1.0", "modules": [module]}


class TestProjectSchema:
    """Tests for ProjectConfiguration validation."""

    def test_minimal_project_defaults(self):
        config = load_config_from_dict(minimal_project())

        module = config.modules[0]
        assert config.name == "project"
        assert module.module_type == ModuleType.BASE
        assert module.door_open_type == DoorOpenType.HINGED
        assert module.has_back_panel is True
        assert module.back_panel_type == BackPanelType.NAILED
        assert config.standards == []

    @pytest.mark.parametrize("version", ["1.0", "1.3"])
    def test_supported_versions(self, version):
        config = ProjectConfiguration(schema_version=version)

        assert config.schema_version == version

    @pytest.mark.parametrize("version", ["2.0", "1", "v1.0"])
    def test_unsupported_versions(self, version):
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": version})

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(minimal_project(colour="red"))

        assert exc_info.value.details[0]["path"] == "modules[0].colour"

    @pytest.mark.parametrize(
        "field,value",
        [("width_mm", 0), ("height_mm", -1), ("door_count", -2), ("drawer_count", -1)],
    )
    def test_invalid_numbers_are_rejected(self, field, value):
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(minimal_project(**{field: value}))

        assert exc_info.value.details[0]["path"] == f"modules[0].{field}"
        assert exc_info.value.details[0]["value"] == value

    def test_unknown_enum_value_is_rejected(self):
        with pytest.raises(ConfigError):
            load_config_from_dict(minimal_project(door_open_type="swing"))

    def test_loose_json_fields_accept_text_and_decoded_values(self):
        config = load_config_from_dict(
            minimal_project(drawer_heights_mm=[150, 200], hardware_json='{"Rod": 1}')
        )

        assert config.modules[0].drawer_heights_mm == [150, 200]
        assert config.modules[0].hardware_json == '{"Rod": 1}'

    @pytest.mark.parametrize(
        "fields",
        [
            {"hardware_json": 5},
            {"hardware_json": True},
            {"drawer_count": 2, "drawer_heights_mm": {"a": 1}},
            {"drawer_count": 2, "drawer_heights_mm": 150},
        ],
    )
    def test_odd_json_field_values_load_and_degrade(self, fields):
        """Free-form JSON fields never fail loading; generation ignores them."""
        config = load_config_from_dict(minimal_project(**fields))

        module = config_to_modules(config)[0]
        hardware = HardwareScheduleGenerator().generate([module], [])
        cut_list = CutListGenerator().generate([module], [])

        assert [item for item in hardware if item.category == "custom"] == []
        fronts = [p for p in cut_list if p.part.endswith("Front")]
        assert len(fronts) == module.drawer_count

    def test_error_message_lists_fields(self):
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(minimal_project(width_mm=-5))

        assert "modules[0].width_mm" in str(exc_info.value)


class TestFormatJsonPath:
    """Tests for _format_json_path."""

    def test_nested_path(self):
        assert _format_json_path(("modules", 0, "width_mm")) == "modules[0].width_mm"

    def test_leading_index(self):
        assert _format_json_path((0, "name")) == "[0].name"


class TestLoadConfig:
    """Tests for load_config file handling."""

    def test_loads_fixture(self, fixtures_path):
        config = load_config(fixtures_path / "kitchen.json")

        assert config.name == "Test Kitchen"
        assert [m.name for m in config.modules] == ["B1", "D1", "W1"]
        assert len(config.standards) == 5

    def test_file_not_found(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, fixtures_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")

        assert exc_info.value.error_type == "json_parse"
        assert "line" in exc_info.value.details[0]

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2]))

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "validation"

    def test_validation_error_records_path(self, fixtures_path):
        path = fixtures_path / "unknown_field.json"

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path == path


class TestConfigAdapter:
    """Tests for converting configuration to domain entities."""

    def test_modules_keep_file_order_and_fields(self, fixtures_path):
        modules = config_to_modules(load_config(fixtures_path / "kitchen.json"))

        assert [m.name for m in modules] == ["B1", "D1", "W1"]
        assert modules[0].is_recessed
        assert modules[1].drawer_heights_mm == "[150, 250]"
        assert modules[2].door_open_type == DoorOpenType.LIFT_UP

    def test_standards_keep_catalog_order(self, fixtures_path):
        standards = config_to_standards(load_config(fixtures_path / "kitchen.json"))

        assert [s.category for s in standards] == [
            StandardCategory.CARCASS,
            StandardCategory.BACK_PANEL,
            StandardCategory.SHUTTER,
            StandardCategory.HARDWARE,
            StandardCategory.EDGEBAND,
        ]
        assert standards[0].rate_per_sqft == 120
