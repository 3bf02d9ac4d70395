"""
item_patcher: config-driven custom items for a modded game server

Reads declarative item configs and, at database-load time, clones the new
item templates and merges them into loot tables, attachment slots, trader
assorts, bot loot, mastering, weapon presets and quest conditions.
"""

__version__ = "0.1.0"
__author__ = "item_patcher Contributors"

# Core service imports
from .patching import ItemPatchService, PatchReport
from .database import HostDatabase
from .item_configs import ItemConfigLoader, ItemDescriptor
from .references import ShorthandMaps, DEFAULT_MAPS
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    'ItemPatchService',
    'PatchReport',
    'HostDatabase',
    'ItemConfigLoader',

    # Logging
    'setup_logging',

    # Data models
    'ItemDescriptor',
    'ShorthandMaps',
    'DEFAULT_MAPS',
]
