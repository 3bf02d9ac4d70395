"""
Logging-related settings for item_patcher.
"""

import logging

from .base import SettingsGroup

logger = logging.getLogger(__name__)

# Relative to the working directory of the host process
LOG_FILE_PATH = "logs/item_patcher.csv"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(SettingsGroup):
    """Console and file logging switches."""

    group = "logging"

    @property
    def console_logging(self) -> bool:
        return self._get_bool("console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Level name of the console handler; the package logger may still filter below it."""
        return self._get_str("console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Invalid console log level: {value}, keeping current: {self.console_log_level}"
            )
            return
        self._set("console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        """Write a rotating CSV log next to the host process."""
        return self._get_bool("file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("file_enabled", value)

    @property
    def log_file_path(self) -> str:
        return LOG_FILE_PATH
