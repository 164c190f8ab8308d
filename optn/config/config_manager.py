"""Configuration manager for loading and validating configuration."""
import json
import os
import re
from typing import Optional

from .models import (
    Config,
    CalculatorSettings,
    LoggingConfig,
    CONTRACT_FEE,
    CONTRACT_SIZE,
    PER_SHARE_FEE,
    WDAYS_PER_YEAR,
)

CONFIG_PATH_ENV = 'OPTN_CONFIG'
LOG_LEVEL_ENV = 'OPTN_LOG_LEVEL'


class ConfigManager:
    """Manages loading and validation of configuration."""

    def load_config(self, config_path: str) -> Config:
        """Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
            json.JSONDecodeError: If JSON is malformed
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(
                f"Configuration file not found: {config_path}\n"
                f"Please create a configuration file at this location."
            )

        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Invalid JSON format in configuration file: {e.msg}",
                e.doc,
                e.pos
            )

        config_data = self._substitute_env_vars(config_data)
        config = self._build_config(config_data)

        self.validate_config(config)
        return config

    def load_default(self, config_path: Optional[str] = None) -> Config:
        """Load configuration for a command-line run.

        The path comes from the argument, then the OPTN_CONFIG environment
        variable. With neither, the built-in defaults are used. The
        OPTN_LOG_LEVEL environment variable overrides the log level.

        Args:
            config_path: Optional explicit configuration file path

        Returns:
            Config object
        """
        config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
        if config_path:
            config = self.load_config(config_path)
        else:
            config = Config()

        level_override = os.environ.get(LOG_LEVEL_ENV)
        if level_override:
            config.logging_config.level = level_override.upper()

        self.validate_config(config)
        return config

    def _build_config(self, config_data: dict) -> Config:
        """Create a Config from parsed JSON, applying defaults for missing fields."""
        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a JSON object")
        calculator_data = self._section(config_data, 'calculator')
        logging_data = self._section(config_data, 'logging')

        try:
            calculator = CalculatorSettings(
                weekdays_per_year=int(calculator_data.get('weekdays_per_year', WDAYS_PER_YEAR)),
                per_share_fee=float(calculator_data.get('per_share_fee', PER_SHARE_FEE)),
                contract_fee=float(calculator_data.get('contract_fee', CONTRACT_FEE)),
                contract_size=int(calculator_data.get('contract_size', CONTRACT_SIZE)),
            )
        except (ValueError, TypeError) as e:
            raise ValueError(
                f"Invalid configuration value type: {e}\n"
                f"Please check that numeric values are numbers."
            )

        file_path = logging_data.get('file_path') or None
        logging_config = LoggingConfig(
            level=str(logging_data.get('level', 'WARNING')),
            file_path=file_path,
        )

        return Config(calculator=calculator, logging_config=logging_config)

    def _section(self, config_data: dict, name: str) -> dict:
        """Return a named section of the configuration, empty when absent or null.

        Raises:
            ValueError: If the section is present but not a JSON object
        """
        section = config_data.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Configuration section '{name}' must be a JSON object")
        return section

    def _substitute_env_vars(self, data):
        """Recursively substitute environment variables in configuration data.

        Environment variables should be in the format ${VAR_NAME}.

        Args:
            data: Configuration data (dict, list, or string)

        Returns:
            Data with environment variables substituted
        """
        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        elif isinstance(data, str):
            pattern = r'\$\{([^}]+)\}'
            matches = re.findall(pattern, data)
            result = data
            for var_name in matches:
                env_value = os.environ.get(var_name, '')
                result = result.replace(f'${{{var_name}}}', env_value)
            return result
        else:
            return data

    def validate_config(self, config: Config) -> bool:
        """Validate the configuration.

        Args:
            config: Config object to validate

        Returns:
            True if valid

        Raises:
            ValueError: If validation fails with error message
        """
        is_valid, error_message = config.validate()
        if not is_valid:
            raise ValueError(f"Configuration validation error: {error_message}")
        return True
