"""Tests for API consistency configuration loading."""

import json

import pytest

from theme_auditor.config import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_API_CONSISTENCY_CONFIG,
    ApiConsistencyConfig,
    ConfigLoader,
    ErrorLevels,
    ThemeSource,
    load_config,
    resolve_object_ref,
)
from theme_auditor.errors import ConfigurationError
from theme_auditor.models import Level


class TestErrorLevels:
    """Tests for the ErrorLevels model."""

    def test_defaults(self):
        levels = ErrorLevels()

        assert levels.api_mismatch == Level.ERROR
        assert levels.type_mismatch == Level.ERROR
        assert levels.method_signature == Level.WARNING
        assert levels.props_missing == Level.WARNING
        assert levels.categories == {}

    def test_camel_case_and_uppercase_values(self):
        levels = ErrorLevels(apiMismatch="WARNING", categories={"missing-hook": "Error"})

        assert levels.api_mismatch == Level.WARNING
        assert levels.categories == {"missing-hook": Level.ERROR}


class TestApiConsistencyConfig:
    """Tests for the ApiConsistencyConfig model."""

    def test_defaults(self):
        config = ApiConsistencyConfig()

        assert config.strict_mode is False
        assert config.ignore_checks == []
        assert config.custom_rules == []
        assert [t.id for t in config.themes] == ["tech", "minimal"]

    def test_default_instance_is_strict(self):
        assert DEFAULT_API_CONSISTENCY_CONFIG.strict_mode is True

    def test_snake_case_names_accepted(self):
        config = ApiConsistencyConfig(strict_mode=True, ignore_checks=["style-api-consistency"])

        assert config.strict_mode is True
        assert config.is_check_ignored("style-api-consistency")
        assert not config.is_check_ignored("button-props-consistency")

    def test_level_for_category(self):
        config = ApiConsistencyConfig(errorLevels={"categories": {"missing-event": "info"}})

        assert config.level_for_category("missing-event", Level.WARNING) == Level.INFO
        assert config.level_for_category("missing-prop", Level.WARNING) == Level.WARNING

    def test_custom_rule_reference_resolved(self):
        config = ApiConsistencyConfig(
            customRules=["theme_auditor.rules:ButtonPropsConsistencyRule"]
        )

        assert config.custom_rules[0].__name__ == "ButtonPropsConsistencyRule"

    def test_invalid_custom_rule(self):
        with pytest.raises(ValueError):
            ApiConsistencyConfig(customRules=[42])

    def test_duplicate_theme_ids(self):
        with pytest.raises(ValueError):
            ApiConsistencyConfig(
                themes=[
                    {"id": "a", "module": "x"},
                    {"id": "a", "module": "y"},
                ]
            )

    def test_to_dict_uses_camel_case(self):
        data = ApiConsistencyConfig(strict_mode=True).to_dict()

        assert data["strictMode"] is True
        assert data["errorLevels"]["apiMismatch"] == "error"
        assert "customRules" not in data
        assert data["themes"][0]["module"] == "theme_auditor.themes.tech"


class TestThemeSource:
    """Tests for theme source entries."""

    def test_display_name_falls_back_to_id(self):
        assert ThemeSource(id="tech", module="m").display_name == "tech"
        assert ThemeSource(id="tech", name="Tech", module="m").display_name == "Tech"


class TestResolveObjectRef:
    """Tests for module:attribute references."""

    def test_module_only(self):
        assert resolve_object_ref("json").__name__ == "json"

    def test_missing_attribute(self):
        with pytest.raises(ValueError):
            resolve_object_ref("json:not_there")

    def test_missing_module(self):
        with pytest.raises(ValueError):
            resolve_object_ref("theme_auditor_missing_module")


class TestConfigLoader:
    """Tests for configuration precedence and file handling."""

    def test_defaults_when_no_file(self, tmp_path):
        config = ConfigLoader(tmp_path).load()

        assert config == DEFAULT_API_CONSISTENCY_CONFIG
        assert config is not DEFAULT_API_CONSISTENCY_CONFIG

    def test_project_file(self, tmp_path, write_config):
        write_config({"ignoreChecks": ["event-handling-consistency"]})

        config = ConfigLoader(tmp_path).load()

        assert config.ignore_checks == ["event-handling-consistency"]
        assert config.strict_mode is True

    def test_file_can_disable_strict_mode(self, tmp_path, write_config):
        write_config({"strictMode": False})

        assert ConfigLoader(tmp_path).load().strict_mode is False

    def test_env_var_beats_project_file(self, tmp_path, write_config, monkeypatch):
        write_config({"ignoreChecks": ["project"]})
        env_file = write_config({"ignoreChecks": ["env"]}, name="env.json")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))

        assert ConfigLoader(tmp_path).load().ignore_checks == ["env"]

    def test_explicit_path_beats_env_var(self, tmp_path, write_config, monkeypatch):
        env_file = write_config({"ignoreChecks": ["env"]}, name="env.json")
        explicit = write_config({"ignoreChecks": ["explicit"]}, name="explicit.json")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))

        config = load_config(explicit, project_path=tmp_path)

        assert config.ignore_checks == ["explicit"]

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(tmp_path).load(tmp_path / "nope.json")

        assert exc_info.value.exit_code == 2

    def test_invalid_json(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigLoader(tmp_path).load()

    def test_non_object_root(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("[]", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be an object"):
            ConfigLoader(tmp_path).load()

    def test_invalid_values(self, tmp_path, write_config):
        write_config({"errorLevels": {"apiMismatch": "fatal"}})

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigLoader(tmp_path).load()

    def test_save_round_trip(self, tmp_path):
        loader = ConfigLoader(tmp_path)
        config = ApiConsistencyConfig(strict_mode=False, ignore_checks=["style-api-consistency"])

        path = loader.save(config)

        assert path == tmp_path / CONFIG_FILENAME
        assert json.loads(path.read_text())["ignoreChecks"] == ["style-api-consistency"]
        assert loader.load().to_dict() == config.to_dict()
