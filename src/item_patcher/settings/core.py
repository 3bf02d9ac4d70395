"""
Core settings management for item_patcher.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .patching import PatchSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

# Setting name -> (subsystem property, key within its group)
_OVERRIDABLE: Dict[str, Tuple[str, str]] = {
    "items_dir": ("paths", "items_dir"),
    "database_path": ("paths", "database"),
    "debug": ("patching", "debug"),
    "exclude_pattern": ("patching", "exclude_pattern"),
    "quest_patch_enabled": ("patching", "quest_patch"),
}


class AppSettings:
    """
    Configuration management using QSettings.

    Uses the platform store by default. When ``settings_file`` is given the
    values live in that INI file instead, which is how a mod ships its
    config next to its item definitions.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to read and write instead of the platform store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("item_patcher", "item_patcher")
        self.profile = profile

        # Profile group: item_patcher/<profile>/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._patching = PatchSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        """Stamp the configuration version on first run."""
        if not str(self.settings.value("app/version", "")):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def patching(self) -> PatchSettings:
        """Access patch run settings subsystem."""
        return self._patching

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def items_dir(self) -> Optional[Path]:
        """Get directory holding the item config fragments."""
        return self._paths.items_dir

    @items_dir.setter
    def items_dir(self, value: Optional[Path]) -> None:
        """Set directory holding the item config fragments."""
        self._paths.items_dir = value

    @property
    def database_path(self) -> Optional[Path]:
        """Get path to a JSON dump of the host database tables."""
        return self._paths.database_path

    @database_path.setter
    def database_path(self, value: Optional[Path]) -> None:
        """Set path to a JSON dump of the host database tables."""
        self._paths.database_path = value

    # === PATCH SETTINGS (DELEGATED) ===

    @property
    def debug(self) -> bool:
        """Check if verbose per-step tracing is enabled."""
        return self._patching.debug

    @debug.setter
    def debug(self, value: bool) -> None:
        """Set verbose per-step tracing."""
        self._patching.debug = value

    @property
    def exclude_pattern(self) -> str:
        """Get file-name pattern of fragments to skip while loading."""
        return self._patching.exclude_pattern

    @exclude_pattern.setter
    def exclude_pattern(self, value: str) -> None:
        """Set file-name pattern of fragments to skip while loading."""
        self._patching.exclude_pattern = value

    @property
    def quest_patch_enabled(self) -> bool:
        """Check if the fixed quest-condition patch should run."""
        return self._patching.quest_patch_enabled

    @quest_patch_enabled.setter
    def quest_patch_enabled(self, value: bool) -> None:
        """Enable or disable the fixed quest-condition patch."""
        self._patching.quest_patch_enabled = value

    # === RUN OVERRIDES ===

    def override(self, **values: Any) -> None:
        """Apply values to this instance only, without touching the store.

        Used for command line options, which must not outlive the run.

        Raises:
            ValueError: If a name is not an overridable setting
        """
        for name, value in values.items():
            if name not in _OVERRIDABLE:
                raise ValueError(f"Setting cannot be overridden: {name}")
            group, key = _OVERRIDABLE[name]
            getattr(self, group).override(key, value)
            logger.debug(f"Override for this run: {name} = {value}")

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
