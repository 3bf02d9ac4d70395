"""
Patch run settings for item_patcher.
"""

import logging

from .base import SettingsGroup

logger = logging.getLogger(__name__)

# Config fragments whose file name contains this are not item configs
DEFAULT_EXCLUDE_PATTERN = "BaseItemReplacement"


class PatchSettings(SettingsGroup):
    """Manages settings that shape a patch run."""

    group = "patching"

    @property
    def debug(self) -> bool:
        """Check if verbose per-step tracing is enabled."""
        return self._get_bool("debug", False)

    @debug.setter
    def debug(self, value: bool) -> None:
        self._set("debug", value)

    @property
    def exclude_pattern(self) -> str:
        """Get file-name pattern of fragments to skip while loading."""
        return self._get_str("exclude_pattern", DEFAULT_EXCLUDE_PATTERN)

    @exclude_pattern.setter
    def exclude_pattern(self, value: str) -> None:
        if not value:
            logger.warning(
                f"Empty exclude pattern rejected, keeping current: {self.exclude_pattern}"
            )
            return
        self._set("exclude_pattern", value)

    @property
    def quest_patch_enabled(self) -> bool:
        """Check if the fixed quest-condition patches should run."""
        return self._get_bool("quest_patch", True)

    @quest_patch_enabled.setter
    def quest_patch_enabled(self, value: bool) -> None:
        self._set("quest_patch", value)
