"""
Path-related settings for item_patcher.
"""

from pathlib import Path
from typing import Optional

from .base import SettingsGroup


class PathSettings(SettingsGroup):
    """Locations of the item configs and of the database dump."""

    group = "paths"

    def _get_path(self, name: str) -> Optional[Path]:
        path_str = self._get_str(name, "")
        return Path(path_str) if path_str else None

    def _set_path(self, name: str, value: Optional[Path]) -> None:
        # Unset is stored as an empty string
        self._set(name, str(value) if value else "")

    @property
    def items_dir(self) -> Optional[Path]:
        """Get directory holding the item config fragments."""
        return self._get_path("items_dir")

    @items_dir.setter
    def items_dir(self, value: Optional[Path]) -> None:
        self._set_path("items_dir", value)

    @property
    def database_path(self) -> Optional[Path]:
        """Get path to a JSON dump of the host database tables (command line runs only)."""
        return self._get_path("database")

    @database_path.setter
    def database_path(self, value: Optional[Path]) -> None:
        self._set_path("database", value)
