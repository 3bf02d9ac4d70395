"""
Static shorthand tables mapping friendly names to raw host ids.

A missing key means the input already is a raw id, so every lookup falls
back to the literal value.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .items import ITEM_MAP
from .base_classes import ITEM_BASE_CLASS_MAP
from .handbook import ITEM_HANDBOOK_CATEGORY_MAP
from .constants import TRADER_IDS, CURRENCY_IDS, ALL_BOT_TYPES, INVENTORY_SLOTS


def resolve(table: Mapping[str, str], key: str) -> str:
    """Return the mapped id for ``key``, or ``key`` itself when unmapped."""
    return table.get(key) or key


@dataclass(frozen=True)
class ShorthandMaps:
    """Bundle of read-only lookup tables used while patching.

    Defaults to the built-in tables; tests and alternate hosts can pass
    their own mappings.
    """

    items: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(ITEM_MAP))
    base_classes: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(ITEM_BASE_CLASS_MAP)
    )
    handbook: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(ITEM_HANDBOOK_CATEGORY_MAP)
    )
    traders: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(TRADER_IDS))
    currencies: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(CURRENCY_IDS)
    )
    bot_types: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(ALL_BOT_TYPES)
    )
    inventory_slots: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(INVENTORY_SLOTS)
    )

    def item(self, key: str) -> str:
        return resolve(self.items, key)

    def base_class(self, key: str) -> str:
        return resolve(self.base_classes, key)

    def handbook_category(self, key: str) -> str:
        return resolve(self.handbook, key)

    def trader(self, key: str) -> str:
        return resolve(self.traders, key)

    def currency(self, key: str) -> Optional[str]:
        """Resolve a barter currency: currency table, then item table, else None."""
        return self.currencies.get(key) or self.items.get(key)


DEFAULT_MAPS = ShorthandMaps()

__all__ = [
    "ShorthandMaps",
    "DEFAULT_MAPS",
    "resolve",
    "ITEM_MAP",
    "ITEM_BASE_CLASS_MAP",
    "ITEM_HANDBOOK_CATEGORY_MAP",
    "TRADER_IDS",
    "CURRENCY_IDS",
    "ALL_BOT_TYPES",
    "INVENTORY_SLOTS",
]
