"""Tests for the config module."""

import json

import pytest
from pydantic import ValidationError

from providergen.config import GeneratorConfig, load_config, validate_config
from providergen.errors import ConfigError
from providergen.version import VERSION


class TestToolVersion:
    """toolVersion must exactly match the running tool."""

    def test_missing_version(self, config_dict):
        del config_dict["toolVersion"]
        with pytest.raises(ConfigError, match="toolVersion"):
            validate_config(config_dict)

    def test_mismatched_version_names_both(self, config_dict):
        config_dict["toolVersion"] = "0.0.1"
        with pytest.raises(ConfigError) as exc_info:
            validate_config(config_dict)
        message = str(exc_info.value)
        assert "'0.0.1'" in message
        assert f"'{VERSION}'" in message

    def test_no_semantic_comparison(self, config_dict):
        config_dict["toolVersion"] = VERSION + ".0"
        with pytest.raises(ConfigError):
            validate_config(config_dict)

    def test_matching_version(self, config_dict):
        config = validate_config(config_dict)
        assert config.tool_version == VERSION


class TestMandatoryFields:
    """Fields become mandatory depending on the enabled passes."""

    @pytest.mark.parametrize("key", [
        "providerJavaPackage",
        "providerClassName",
        "sqliteHelperClassName",
        "authority",
        "databaseFileName",
    ])
    def test_provider_strings(self, config_dict, key):
        del config_dict[key]
        with pytest.raises(ConfigError, match=f"'{key}'.*must be a string"):
            validate_config(config_dict)

    def test_provider_boolean(self, config_dict):
        config_dict["enableForeignKeys"] = "yes"
        with pytest.raises(ConfigError, match="'enableForeignKeys'.*must be a boolean"):
            validate_config(config_dict)

    def test_provider_fields_optional_when_disabled(self, config_dict):
        config_dict["generateProvider"] = False
        for key in ("providerJavaPackage", "providerClassName", "sqliteHelperClassName",
                    "authority", "databaseFileName", "enableForeignKeys"):
            del config_dict[key]
        config = validate_config(config_dict)
        assert config.provider_java_package is None
        assert config.generate_provider is False

    def test_fragments_need_provider_package(self, config_dict):
        config_dict["generateProvider"] = False
        config_dict["generateFragments"] = True
        del config_dict["providerJavaPackage"]
        with pytest.raises(ConfigError, match="'providerJavaPackage'"):
            validate_config(config_dict)

    def test_base_url_required_for_api(self, config_dict):
        del config_dict["projectBaseUrl"]
        with pytest.raises(ConfigError, match="'projectBaseUrl'"):
            validate_config(config_dict)

    def test_base_url_optional_without_api(self, config_dict):
        del config_dict["projectBaseUrl"]
        config_dict["generateApi"] = False
        assert validate_config(config_dict).project_base_url is None

    def test_package_id_always_required(self, config_dict):
        del config_dict["projectPackageId"]
        config_dict["generateProvider"] = False
        config_dict["generateApi"] = False
        with pytest.raises(ConfigError, match="'projectPackageId'"):
            validate_config(config_dict)


class TestToggles:
    def test_defaults(self, config_dict):
        config = validate_config(config_dict)
        assert config.generate_provider is True
        assert config.generate_api is True
        assert config.generate_views is True
        assert config.generate_models is True
        assert config.generate_fragments is False

    def test_non_boolean_toggle(self, config_dict):
        config_dict["generateViews"] = "false"
        with pytest.raises(ConfigError, match="generateViews"):
            validate_config(config_dict)

    def test_not_an_object(self):
        with pytest.raises(ConfigError, match="JSON object"):
            validate_config(["toolVersion"])


class TestGeneratorConfig:
    def test_frozen(self, config_dict):
        config = validate_config(config_dict)
        with pytest.raises(ValidationError):
            config.generate_views = False

    def test_extra_keys_kept(self, config_dict):
        config_dict["customFlag"] = "on"
        config = validate_config(config_dict)
        assert config.customFlag == "on"

    def test_api_package(self, config_dict):
        assert validate_config(config_dict).api_java_package == "com.example.app.api"

    def test_is_model(self, config_dict):
        assert isinstance(validate_config(config_dict), GeneratorConfig)


class TestLoadConfig:
    def test_loads_file(self, tmp_path, config_dict):
        (tmp_path / "_config.json").write_text(json.dumps(config_dict), encoding="utf-8")
        config = load_config(tmp_path)
        assert config.provider_class_name == "SampleProvider"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="_config.json"):
            load_config(tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "_config.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Could not parse"):
            load_config(tmp_path)

    def test_non_utf8_file(self, tmp_path):
        (tmp_path / "_config.json").write_bytes(b'{"toolVersion": "\xff"}')
        with pytest.raises(ConfigError, match="UTF-8"):
            load_config(tmp_path)
