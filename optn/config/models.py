"""Data models for configuration."""
from dataclasses import dataclass, field
from typing import Optional

# One option contract covers 100 shares of the underlying
CONTRACT_SIZE = 100
# 52 weeks of 5 trading days, holidays ignored
WDAYS_PER_YEAR = 260
# Fee deducted per share before computing percentage returns
PER_SHARE_FEE = 0.005
# Flat fee deducted from the gross proceeds of one contract
CONTRACT_FEE = 0.5


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = 'WARNING'
    file_path: Optional[str] = None  # console only when unset

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate logging configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.level.upper() not in valid_levels:
            return False, f"Log level must be one of {valid_levels}"
        if self.file_path is not None and not self.file_path.strip():
            return False, "Log file path cannot be blank"
        return True, None


@dataclass
class CalculatorSettings:
    """Constants used by the return formulas."""
    weekdays_per_year: int = WDAYS_PER_YEAR
    per_share_fee: float = PER_SHARE_FEE
    contract_fee: float = CONTRACT_FEE
    contract_size: int = CONTRACT_SIZE

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate calculator settings.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.weekdays_per_year <= 0:
            return False, "Weekdays per year must be positive"
        if self.contract_size <= 0:
            return False, "Contract size must be positive"
        if self.per_share_fee < 0:
            return False, "Per-share fee cannot be negative"
        if self.contract_fee < 0:
            return False, "Contract fee cannot be negative"
        return True, None


@dataclass
class Config:
    """Main configuration for the calculator."""
    calculator: CalculatorSettings = field(default_factory=CalculatorSettings)
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate the entire configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        is_valid, error = self.calculator.validate()
        if not is_valid:
            return False, f"Calculator settings error: {error}"

        is_valid, error = self.logging_config.validate()
        if not is_valid:
            return False, f"Logging config error: {error}"

        return True, None
