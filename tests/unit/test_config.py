"""Unit tests for configuration loading and validation."""

import json

import pytest

from xsdgen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)
from xsdgen.codegen.languages.go.naming import validate_go_package_name


def test_defaults():
    config = load_config()
    assert config == GeneratorConfig()
    assert config.package_name == ""
    assert config.prefix == ""
    assert config.exported is False
    assert config.conflict_strategy == "first"


def test_overrides():
    config = load_config(custom_config={"package_name": "models", "exported": True})
    assert config.package_name == "models"
    assert config.exported is True


def test_file_then_overrides(tmp_path):
    path = tmp_path / "xsdgen.json"
    path.write_text(json.dumps({"package_name": "models", "prefix": "xsd"}))

    config = load_config(custom_config={"prefix": "api"}, config_file=path)
    assert config.package_name == "models"
    assert config.prefix == "api"


def test_unknown_option_rejected():
    with pytest.raises(ConfigError, match="int_type"):
        load_config(custom_config={"int_type": "int64"})


def test_wrong_value_types_rejected():
    with pytest.raises(ConfigError, match="boolean"):
        load_config(custom_config={"exported": "yes"})
    with pytest.raises(ConfigError, match="string"):
        load_config(custom_config={"prefix": 3})


def test_invalid_conflict_strategy():
    with pytest.raises(ConfigError, match="conflict_strategy"):
        load_config(custom_config={"conflict_strategy": "merge"})


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "missing.json")


def test_non_json_suffix(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("package_name: models")
    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=path)


def test_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=path)


def test_non_object_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(config_file=path)


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    original = GeneratorConfig(package_name="models", prefix="xsd", exported=True)
    path = tmp_path / "saved.json"

    manager.save_config(original, path)
    assert manager.get_config(config_file=path) == original


def test_validate_config_package_name():
    warnings = ConfigManager().validate_config(GeneratorConfig(package_name="My-Pkg"))
    assert len(warnings) == 3


def test_validate_config_prefix():
    warnings = ConfigManager().validate_config(GeneratorConfig(prefix="9x"))
    assert warnings == ["Prefix '9x' will not form a valid Go identifier"]


def test_validate_config_clean():
    config = GeneratorConfig(package_name="models", prefix="xsd")
    assert ConfigManager().validate_config(config) == []


def test_go_package_name_rules():
    assert validate_go_package_name("models") == []
    assert validate_go_package_name("") == ["Package name cannot be empty"]
    assert "'type' is a Go reserved word" in validate_go_package_name("type")
    assert "Package names should not contain underscores" in validate_go_package_name(
        "my_models"
    )
