"""Unit tests for project validation and manufacturing advisories."""

import pytest

from cabinetry.application.config import (
    ConfigError,
    ValidationResult,
    check_manufacturing_advisories,
    load_config,
    load_config_from_dict,
    result_from_config_error,
    validate_config,
)

PRICED_STANDARDS = [
    {"category": "carcass", "material": "HDHMR 18mm", "thickness_mm": 18, "rate_per_sqft": 120},
    {"category": "back_panel", "material": "MR Ply 6mm", "thickness_mm": 6, "rate_per_sqft": 45},
    {"category": "shutter", "material": "Ply + Laminate", "thickness_mm": 18, "rate_per_sqft": 180},
]


def project(*modules, standards=None):
    return load_config_from_dict(
        {
            "schema_version": "1.0",
            "modules": list(modules),
            "standards": PRICED_STANDARDS if standards is None else standards,
        }
    )


def module(**fields):
    data = {"name": "B1", "width_mm": 600, "height_mm": 720, "depth_mm": 550}
    data.update(fields)
    return data


def warning_paths(result):
    return [w.path for w in result.warnings]


class TestValidationResult:
    """Tests for ValidationResult exit codes and merging."""

    def test_clean_exit_code(self):
        assert ValidationResult().exit_code == 0

    def test_warning_exit_code(self):
        result = ValidationResult()
        result.add_warning("modules", "empty")

        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code(self):
        result = ValidationResult()
        result.add_warning("modules", "empty")
        result.add_error("modules[0]", "bad", value=1)

        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self):
        first = ValidationResult()
        first.add_warning("a", "one")
        second = ValidationResult()
        second.add_error("b", "two")

        merged = first.merge(second)

        assert warning_paths(merged) == ["a"]
        assert [e.path for e in merged.errors] == ["b"]


class TestManufacturingAdvisories:
    """Tests for check_manufacturing_advisories."""

    def test_fixture_project_is_clean(self, fixtures_path):
        result = validate_config(load_config(fixtures_path / "kitchen.json"))

        assert result.warnings == []
        assert result.exit_code == 0

    def test_duplicate_module_names(self):
        result = check_manufacturing_advisories(project(module(), module()))

        assert "modules[1].name" in warning_paths(result)

    def test_recessed_depth_too_shallow(self):
        result = check_manufacturing_advisories(
            project(module(depth_mm=12, back_panel_type="recessed"))
        )

        assert "modules[0].depth_mm" in warning_paths(result)

    @pytest.mark.parametrize("raw", ["{bad json", '{"a": 1}', "[100, 100, 100]"])
    def test_drawer_heights_problems(self, raw):
        result = check_manufacturing_advisories(
            project(module(drawer_count=2, drawer_heights_mm=raw))
        )

        assert "modules[0].drawer_heights_mm" in warning_paths(result)

    @pytest.mark.parametrize("raw", [{"a": 1}, 150])
    def test_decoded_non_array_heights_warn(self, raw):
        result = check_manufacturing_advisories(
            project(module(drawer_count=2, drawer_heights_mm=raw))
        )

        assert "modules[0].drawer_heights_mm" in warning_paths(result)

    @pytest.mark.parametrize("raw", [5, [1], "\"text\""])
    def test_non_object_hardware_warns(self, raw):
        result = check_manufacturing_advisories(project(module(hardware_json=raw)))

        assert "modules[0].hardware_json" in warning_paths(result)
        assert result.exit_code == 2

    def test_fewer_heights_than_drawers_is_fine(self):
        result = check_manufacturing_advisories(
            project(module(drawer_count=3, drawer_heights_mm="[150]"))
        )

        assert "modules[0].drawer_heights_mm" not in warning_paths(result)

    def test_crowded_drawers(self):
        result = check_manufacturing_advisories(project(module(drawer_count=30)))

        assert "modules[0].drawer_count" in warning_paths(result)

    def test_hardware_json_problems(self):
        result = check_manufacturing_advisories(
            project(
                module(name="A", hardware_json="{oops"),
                module(name="B", hardware_json="[1]"),
                module(name="C", hardware_json='{"Rod": 1, "Hook": -1}'),
            )
        )

        paths = warning_paths(result)
        assert "modules[0].hardware_json" in paths
        assert "modules[1].hardware_json" in paths
        assert "modules[2].hardware_json.Hook" in paths
        assert "modules[2].hardware_json.Rod" not in paths

    def test_unpriced_material(self):
        result = check_manufacturing_advisories(project(module(), standards=[]))

        messages = [w.message for w in result.warnings if w.path == "standards"]
        assert any("HDHMR 18mm at 18mm" in m for m in messages)

    def test_duplicate_standard_category(self):
        standards = PRICED_STANDARDS + [
            {"category": "carcass", "material": "BWP Ply", "thickness_mm": 18},
        ]

        result = check_manufacturing_advisories(project(module(), standards=standards))

        assert "standards[3].category" in warning_paths(result)

    def test_fixture_with_warnings(self, fixtures_path):
        result = validate_config(load_config(fixtures_path / "with_warnings.json"))

        paths = warning_paths(result)
        assert "modules[0].drawer_heights_mm" in paths
        assert "modules[0].hardware_json.Hook" in paths
        assert "standards[1].category" in paths
        assert result.exit_code == 2


class TestValidateConfig:
    """Tests for validate_config."""

    def test_empty_project_warns(self):
        result = validate_config(project())

        assert warning_paths(result) == ["modules"]


class TestResultFromConfigError:
    """Tests for converting load failures into validation errors."""

    def test_schema_failure_becomes_field_errors(self):
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"schema_version": "1.0", "modules": [module(width_mm=-5, colour="red")]}
            )

        result = result_from_config_error(exc_info.value)

        paths = [e.path for e in result.errors]
        assert "modules[0].width_mm" in paths
        assert "modules[0].colour" in paths
        assert next(e for e in result.errors if e.path == "modules[0].width_mm").value == -5
        assert not result.is_valid
        assert result.exit_code == 1

    def test_file_failure_becomes_single_error(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        result = result_from_config_error(exc_info.value)

        assert len(result.errors) == 1
        assert "not found" in result.errors[0].message
        assert result.exit_code == 1
