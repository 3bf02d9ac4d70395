"""
Settings package for item_patcher.

Type-safe configuration management on top of Qt's QSettings, either in the
platform store or in an INI file shipped with the mod.

Usage:
    from item_patcher.settings import AppSettings, ValidationResult

    settings = AppSettings(settings_file="config/item_patcher.ini")
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .patching import PatchSettings, DEFAULT_EXCLUDE_PATTERN

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "PatchSettings",
    "DEFAULT_EXCLUDE_PATTERN",
]
