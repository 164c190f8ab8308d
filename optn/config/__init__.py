"""Configuration management module."""
from .models import Config, CalculatorSettings, LoggingConfig
from .config_manager import ConfigManager

__all__ = ['Config', 'CalculatorSettings', 'LoggingConfig', 'ConfigManager']
