"""
Custom item config loading.

Reads per-item JSON fragments from a directory, merges them by item id and
turns each entry into an ItemDescriptor.
"""

from .models import (
    RawItemConfig,
    RawConfigMap,
    ItemDescriptor,
    StaticLootPlacement,
    ModSlotPlacement,
    TraderItem,
    BarterEntry,
    TraderListing,
)
from .loaders import ItemConfigLoader

__all__ = [
    "RawItemConfig",
    "RawConfigMap",
    "ItemDescriptor",
    "StaticLootPlacement",
    "ModSlotPlacement",
    "TraderItem",
    "BarterEntry",
    "TraderListing",
    "ItemConfigLoader",
]
