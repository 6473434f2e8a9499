import json

import pytest

from design_patterns.config import RunnerConfig, load_config
from design_patterns.errors import ConfigurationError


class TestRunnerConfig:
    def test_defaults(self):
        config = RunnerConfig()
        assert config.pause_between_patterns is True
        assert config.log_level == "warning"
        assert config.log_format == "console"
        assert config.show_metrics is False

    def test_from_dict_ignores_unknown_keys(self):
        config = RunnerConfig.from_dict({"log_level": "DEBUG", "colour": "blue"})
        assert config.log_level == "debug"

    def test_invalid_log_format(self):
        with pytest.raises(ConfigurationError):
            RunnerConfig(log_format="xml")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DESIGN_PATTERNS_PAUSE", "false")
        monkeypatch.setenv("DESIGN_PATTERNS_LOG_LEVEL", "info")
        monkeypatch.setenv("DESIGN_PATTERNS_LOG_FORMAT", "json")

        config = RunnerConfig.from_env()

        assert config.pause_between_patterns is False
        assert config.log_level == "info"
        assert config.log_format == "json"


class TestLoadConfig:
    def test_without_file_uses_environment(self, monkeypatch):
        monkeypatch.setenv("DESIGN_PATTERNS_LOG_LEVEL", "error")
        assert load_config(None).log_level == "error"

    def test_file_overrides_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DESIGN_PATTERNS_LOG_LEVEL", "error")
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"log_level": "debug", "show_metrics": True}))

        config = load_config(config_file)

        assert config.log_level == "debug"
        assert config.show_metrics is True

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_top_level_must_be_object(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(["not", "a", "mapping"]))

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    @pytest.mark.parametrize(
        "values",
        [
            {"log_level": 10},
            {"log_format": None},
            {"pause_between_patterns": "false"},
            {"show_metrics": 1},
        ],
    )
    def test_wrong_value_types(self, tmp_path, values):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(values))

        with pytest.raises(ConfigurationError):
            load_config(config_file)
