"""
Thin accessor around the host's in-memory database tables.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import orjson

from ..settings.types import ConfigError
from .models import (
    TemplateMap,
    Location,
    Trader,
    BotType,
    Quest,
    MasteringList,
)


class HostDatabase:
    """Accessor for the host database tables.

    Wraps the table mapping the host hands over during database load and
    exposes the sub-tables the patches touch. Every property returns the
    live object; nothing is copied or rebuilt.
    """

    def __init__(self, tables: Dict[str, Any]):
        self.tables = tables
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    def from_file(cls, path: Path) -> "HostDatabase":
        """Load a JSON dump of the host tables.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        try:
            with path.open("rb") as f:
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            raise ConfigError(f"Cannot load database dump {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Database dump {path} is not a JSON object")
        return cls(data)

    @property
    def templates(self) -> Dict[str, Any]:
        return self.tables["templates"]

    @property
    def items(self) -> TemplateMap:
        """Item templates keyed by id."""
        return self.templates["items"]

    @property
    def quests(self) -> Dict[str, Quest]:
        return self.templates.get("quests", {})

    @property
    def handbook_items(self) -> Optional[List[Dict[str, Any]]]:
        """Handbook entries, or None when the host has no handbook table."""
        handbook = self.templates.get("handbook")
        if handbook is None:
            return None
        return handbook.get("Items")

    @property
    def prices(self) -> Optional[Dict[str, Any]]:
        """Flea price table, or None when absent."""
        return self.templates.get("prices")

    @property
    def locations(self) -> Dict[str, Location]:
        return self.tables.get("locations", {})

    @property
    def traders(self) -> Dict[str, Trader]:
        return self.tables.get("traders", {})

    @property
    def bot_types(self) -> Dict[str, BotType]:
        return self.tables.get("bots", {}).get("types", {})

    @property
    def mastering(self) -> MasteringList:
        """The global mastering section list."""
        return self.tables["globals"]["config"]["Mastering"]

    @property
    def item_presets(self) -> Dict[str, Any]:
        """The global weapon preset table keyed by preset id."""
        return self.tables["globals"]["ItemPresets"]

    @property
    def global_locales(self) -> Dict[str, Dict[str, str]]:
        """Locale string tables keyed by language code."""
        return self.tables.get("locales", {}).get("global", {})

    def get_item(self, item_id: str) -> Optional[Dict[str, Any]]:
        """Return the item template with this id, or None."""
        return self.items.get(item_id)
