"""
Type aliases and well-known ids for the host database tables.

The host owns these structures; they stay plain dicts so every patch
mutates the live objects the host will later read.
"""

from typing import Any, Dict, List, TypeAlias

Template: TypeAlias = Dict[str, Any]
"""A single item template (``_id``, ``_parent``, ``_props``...)."""

TemplateMap: TypeAlias = Dict[str, Template]
"""Maps template id to template."""

Location: TypeAlias = Dict[str, Any]
"""A location record, optionally carrying a ``staticLoot`` container map."""

Trader: TypeAlias = Dict[str, Any]
"""A trader record with its ``assort`` block."""

BotType: TypeAlias = Dict[str, Any]
"""A bot type record with ``inventory.items`` loot weights."""

Quest: TypeAlias = Dict[str, Any]
"""A quest definition with its ``conditions`` tree."""

MasterySection: TypeAlias = Dict[str, Any]
"""An entry of ``globals.config.Mastering`` (``Name``, ``Templates``...)."""

MasteringList: TypeAlias = List[MasterySection]

# Template holding the default player inventory slots
DEFAULT_INVENTORY_ID = "55d7217a4bdc2d86028b456d"

# Virtual root every trader assort stub hangs from
HIDEOUT_ROOT = "hideout"
