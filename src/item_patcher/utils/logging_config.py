"""
Logging configuration for item_patcher.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

PACKAGE_LOGGER = "item_patcher"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for console output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        formatted = super().format(record)

        # Color only the level name
        if record.levelname in formatted:
            formatted = formatted.replace(
                record.levelname, f"{color}{record.levelname}{reset}", 1
            )

        return formatted


class CSVFormatter(logging.Formatter):
    """Semicolon-separated file log: time; level; logger; line; message."""

    def format(self, record: logging.LogRecord) -> str:
        # Quotes in messages are doubled as in standard CSV
        message = record.getMessage().replace('"', '""')
        return (
            f'"{self.formatTime(record, self.datefmt)}";{record.levelname.ljust(8)};'
            f'"{record.name}";"{record.lineno}";"{message}"'
        )


def setup_logging(settings: "AppSettings") -> None:
    """
    Setup package logging with console and file handlers.

    Handlers are attached to the package logger only, so the host process
    keeps control of the root logger. The package logger level doubles as
    the verbose switch: DEBUG when ``settings.debug`` is on, INFO otherwise.

    Args:
        settings: AppSettings instance for all logging configuration
    """
    log_settings = settings.logging
    console_enabled = log_settings.console_logging
    console_level = log_settings.console_log_level
    use_colors = log_settings.console_use_colors
    file_enabled = log_settings.file_logging
    log_file = log_settings.log_file_path
    debug = settings.debug

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Drop handlers from a previous setup
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if console_enabled:
        if use_colors:
            console_formatter = ColoredFormatter(
                fmt="%(asctime)s : %(levelname)-8s : %(message)s", datefmt="%H:%M:%S"
            )
        else:
            console_formatter = logging.Formatter(
                fmt="%(asctime)s : %(levelname)-8s : %(message)s", datefmt="%H:%M:%S"
            )

        console_handler = logging.StreamHandler()
        console_level_no = getattr(logging, console_level.upper(), logging.INFO)
        if debug:
            console_level_no = min(console_level_no, logging.DEBUG)
        console_handler.setLevel(console_level_no)
        console_handler.setFormatter(console_formatter)
        package_logger.addHandler(console_handler)

    log_path = None
    if file_enabled:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
            package_logger.addHandler(file_handler)
        except OSError as e:
            # Keep console logging if the file cannot be opened
            package_logger.warning(f"Could not setup file logging: {e}")
            log_path = None

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if console_enabled:
        logger.debug(f"Console logging: {console_level} (colors: {use_colors})")
    if log_path:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")
    logger.debug(f"Verbose patch tracing: {debug}")
