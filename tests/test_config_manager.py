"""Unit tests for ConfigManager."""
import json
import os
import tempfile
import pytest
from optn.config import ConfigManager, Config, CalculatorSettings, LoggingConfig


def write_config(config_data):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump(config_data, f)
        return f.name


class TestConfigManager:
    """Test cases for ConfigManager."""

    def test_load_valid_config(self):
        """Test loading a valid configuration file."""
        config_path = write_config({
            "calculator": {
                "weekdays_per_year": 252,
                "per_share_fee": 0.01,
                "contract_fee": 1.0,
                "contract_size": 100
            },
            "logging": {
                "level": "DEBUG",
                "file_path": "logs/test.log"
            }
        })

        try:
            manager = ConfigManager()
            config = manager.load_config(config_path)

            assert config.calculator.weekdays_per_year == 252
            assert config.calculator.per_share_fee == 0.01
            assert config.calculator.contract_fee == 1.0
            assert config.calculator.contract_size == 100
            assert config.logging_config.level == "DEBUG"
            assert config.logging_config.file_path == "logs/test.log"
        finally:
            os.unlink(config_path)

    def test_load_config_missing_file(self):
        """Test loading configuration from non-existent file."""
        manager = ConfigManager()

        with pytest.raises(FileNotFoundError) as exc_info:
            manager.load_config("nonexistent_config.json")

        assert "Configuration file not found" in str(exc_info.value)

    def test_load_config_invalid_json(self):
        """Test loading configuration with invalid JSON format."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            f.write("{ invalid json }")
            config_path = f.name

        try:
            manager = ConfigManager()

            with pytest.raises(json.JSONDecodeError) as exc_info:
                manager.load_config(config_path)

            assert "Invalid JSON format" in str(exc_info.value)
        finally:
            os.unlink(config_path)

    def test_environment_variable_substitution(self, monkeypatch):
        """Test environment variable substitution in configuration."""
        monkeypatch.setenv('TEST_PER_SHARE_FEE', '0.0065')
        monkeypatch.setenv('TEST_LOG_PATH', '/tmp/optn-test.log')

        config_path = write_config({
            "calculator": {
                "per_share_fee": "${TEST_PER_SHARE_FEE}"
            },
            "logging": {
                "file_path": "${TEST_LOG_PATH}"
            }
        })

        try:
            config = ConfigManager().load_config(config_path)

            assert config.calculator.per_share_fee == 0.0065
            assert config.logging_config.file_path == "/tmp/optn-test.log"
        finally:
            os.unlink(config_path)

    def test_default_value_application(self):
        """Test that default values are applied for missing fields."""
        config_path = write_config({})

        try:
            config = ConfigManager().load_config(config_path)

            assert config.calculator.weekdays_per_year == 260
            assert config.calculator.per_share_fee == 0.005
            assert config.calculator.contract_fee == 0.5
            assert config.calculator.contract_size == 100
            assert config.logging_config.level == "WARNING"
            assert config.logging_config.file_path is None
        finally:
            os.unlink(config_path)

    def test_invalid_value_type(self):
        config_path = write_config({"calculator": {"weekdays_per_year": "lots"}})

        try:
            with pytest.raises(ValueError, match="Invalid configuration value type"):
                ConfigManager().load_config(config_path)
        finally:
            os.unlink(config_path)

    def test_validation_failure(self):
        config_path = write_config({"calculator": {"weekdays_per_year": 0}})

        try:
            with pytest.raises(ValueError, match="Weekdays per year must be positive"):
                ConfigManager().load_config(config_path)
        finally:
            os.unlink(config_path)

    def test_invalid_log_level(self):
        config_path = write_config({"logging": {"level": "LOUD"}})

        try:
            with pytest.raises(ValueError, match="Configuration validation error: Logging config error"):
                ConfigManager().load_config(config_path)
        finally:
            os.unlink(config_path)

    def test_load_default_without_file(self, monkeypatch):
        monkeypatch.delenv('OPTN_CONFIG', raising=False)
        monkeypatch.delenv('OPTN_LOG_LEVEL', raising=False)

        config = ConfigManager().load_default()

        assert config == Config()

    def test_load_default_from_environment(self, monkeypatch):
        config_path = write_config({"calculator": {"contract_fee": 0.65}})
        monkeypatch.setenv('OPTN_CONFIG', config_path)

        try:
            config = ConfigManager().load_default()

            assert config.calculator.contract_fee == 0.65
        finally:
            os.unlink(config_path)

    def test_explicit_path_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv('OPTN_CONFIG', 'nonexistent_config.json')
        config_path = write_config({"calculator": {"contract_fee": 0.65}})

        try:
            config = ConfigManager().load_default(config_path)

            assert config.calculator.contract_fee == 0.65
        finally:
            os.unlink(config_path)

    def test_log_level_override(self, monkeypatch):
        monkeypatch.delenv('OPTN_CONFIG', raising=False)
        monkeypatch.setenv('OPTN_LOG_LEVEL', 'debug')

        config = ConfigManager().load_default()

        assert config.logging_config.level == "DEBUG"

    def test_null_sections_use_defaults(self):
        config_path = write_config({"calculator": None, "logging": None})

        try:
            config = ConfigManager().load_config(config_path)

            assert config == Config()
        finally:
            os.unlink(config_path)

    @pytest.mark.parametrize("section,value", [
        ("calculator", [1, 2]),
        ("calculator", "cheap"),
        ("logging", 5),
    ])
    def test_section_must_be_object(self, section, value):
        config_path = write_config({section: value})

        try:
            with pytest.raises(ValueError, match=f"Configuration section '{section}' must be a JSON object"):
                ConfigManager().load_config(config_path)
        finally:
            os.unlink(config_path)

    def test_top_level_must_be_object(self):
        config_path = write_config([{"calculator": {}}])

        try:
            with pytest.raises(ValueError, match="must contain a JSON object"):
                ConfigManager().load_config(config_path)
        finally:
            os.unlink(config_path)


class TestModelValidation:
    """Test cases for configuration model validation."""

    def test_default_config_is_valid(self):
        assert Config().validate() == (True, None)

    @pytest.mark.parametrize("settings, message", [
        (CalculatorSettings(weekdays_per_year=0), "Weekdays per year must be positive"),
        (CalculatorSettings(contract_size=0), "Contract size must be positive"),
        (CalculatorSettings(per_share_fee=-0.01), "Per-share fee cannot be negative"),
        (CalculatorSettings(contract_fee=-1.0), "Contract fee cannot be negative"),
    ])
    def test_invalid_calculator_settings(self, settings, message):
        is_valid, error = settings.validate()

        assert is_valid is False
        assert error == message

    def test_blank_log_path(self):
        is_valid, error = LoggingConfig(file_path="  ").validate()

        assert is_valid is False
        assert error == "Log file path cannot be blank"

    def test_config_reports_nested_error(self):
        config = Config(calculator=CalculatorSettings(contract_size=-1))

        is_valid, error = config.validate()

        assert is_valid is False
        assert error.startswith("Calculator settings error:")
