"""Calculator logger with structured context fields."""
import logging
import sys
from dataclasses import asdict, is_dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from optn.config.models import LoggingConfig

LOGGER_NAME = 'optn'


class CalcLogger:
    """Logger for the calculator.

    Writes to stderr so that it never mixes with the report on stdout,
    and to a rotating file when one is configured.
    """

    def __init__(self, config: LoggingConfig):
        """Initialize the calculator logger.

        Args:
            config: Logging configuration
        """
        self.config = config
        level = getattr(logging, config.level.upper())
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if config.file_path:
            log_path = Path(config.file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                config.file_path,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

    def close(self):
        """Flush and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def _format_context(self, context: Optional[Dict[str, Any]]) -> str:
        """Format context dictionary for logging.

        Args:
            context: Context dictionary

        Returns:
            Formatted context string
        """
        if not context:
            return ""

        context_parts = [f"{key}={value}" for key, value in context.items()]
        return " | " + " | ".join(context_parts)

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an info message.

        Args:
            message: Log message
            context: Optional context dictionary for structured data
        """
        self.logger.info(f"{message}{self._format_context(context)}")

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a warning message.

        Args:
            message: Log message
            context: Optional context dictionary for structured data
        """
        self.logger.warning(f"{message}{self._format_context(context)}")

    def log_error(self, message: str, error: Optional[Exception] = None,
                  context: Optional[Dict[str, Any]] = None):
        """Log an error message.

        Args:
            message: Log message
            error: Optional exception object
            context: Optional context dictionary for structured data
        """
        context_str = self._format_context(context)

        if error:
            error_info = f" | Error: {type(error).__name__}: {str(error)}"
            self.logger.error(f"{message}{context_str}{error_info}", exc_info=error)
        else:
            self.logger.error(f"{message}{context_str}")

    def log_debug(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a debug message.

        Args:
            message: Log message
            context: Optional context dictionary for structured data
        """
        self.logger.debug(f"{message}{self._format_context(context)}")

    def log_result(self, strategy: str, result: Any):
        """Log a calculation result.

        Args:
            strategy: Strategy code ("sp" or "cc")
            result: Result record; dataclasses are expanded field by field
        """
        fields = asdict(result) if is_dataclass(result) else {'result': result}
        self.log_debug(f"Calculated {strategy}", fields)
