"""
Slot patches: weapon/gear attachment slots and player inventory slots.

Both append the item id to a slot's first filter and skip ids already
there, so applying them twice changes nothing.
"""

import logging
from typing import Any, Dict, List, Optional, Set

from ..database.host import HostDatabase
from ..database.models import DEFAULT_INVENTORY_ID
from .context import PatchContext

logger = logging.getLogger(__name__)


def _first_filter(slot: Dict[str, Any]) -> Optional[List[str]]:
    """Return the slot's first filter list, or None when it has none."""
    filters = slot.get("_props", {}).get("filters")
    if not filters:
        return None
    return filters[0].get("Filter")


def _ensure_first_filter(slot: Dict[str, Any]) -> List[str]:
    """Return the slot's first filter list, creating an empty one if needed."""
    props = slot.setdefault("_props", {})
    filters = props.get("filters")
    if not filters:
        filters = [{"AnimationIndex": 0, "Filter": []}]
        props["filters"] = filters
    return filters[0].setdefault("Filter", [])


def add_to_slot_filter(slot: Dict[str, Any], item_id: str) -> bool:
    """Add ``item_id`` to the slot filter unless present. Returns True if added."""
    slot_filter = _ensure_first_filter(slot)
    if item_id in slot_filter:
        return False
    slot_filter.append(item_id)
    return True


def _qualifies_by_source(
    slots: List[Dict[str, Any]], source_tpl: str, slot_names: Set[str]
) -> bool:
    """True when a matching slot already accepts the clone source."""
    for slot in slots:
        slot_filter = _first_filter(slot)
        if slot_filter and source_tpl in slot_filter:
            if str(slot.get("_name", "")).lower() in slot_names:
                return True
    return False


def apply_mod_slots(ctx: PatchContext, database: HostDatabase) -> int:
    """Make the item fit wherever its clone source fits.

    A parent item qualifies when it is whitelisted, or when one of the named
    slots already accepts the clone source. Blacklisted parents never do.
    """
    placement = ctx.descriptor.mod_slots
    if placement is None:
        return 0

    logger.debug(f"Processing mod slots for item: {ctx.item_id}")
    whitelist = {ctx.maps.item(name) for name in placement.whitelist}
    blacklist = {ctx.maps.item(name) for name in placement.blacklist}
    slot_names = {name.lower() for name in placement.slot_names}
    if not slot_names:
        return 0

    added = 0
    for parent_id, parent_item in database.items.items():
        slots = parent_item.get("_props", {}).get("Slots")
        if not slots:
            continue
        if parent_id in blacklist:
            continue

        if parent_id not in whitelist and not _qualifies_by_source(
            slots, ctx.source_tpl, slot_names
        ):
            continue

        for slot in slots:
            slot_name = str(slot.get("_name", ""))
            if slot_name.lower() not in slot_names:
                continue
            if add_to_slot_filter(slot, ctx.item_id):
                added += 1
                logger.debug(
                    f"Successfully added item {ctx.item_id} to the filter of mod slot "
                    f"{slot_name} for parent item {parent_id}"
                )
    return added


def apply_inventory_slots(ctx: PatchContext, database: HostDatabase) -> int:
    """Allow the item in the configured default-inventory slots.

    Targets may name a slot by its raw name, by the name it maps to, or by
    the alias that maps to it.
    """
    allowed = ctx.descriptor.inventory_slots
    if allowed is None:
        return 0

    logger.debug(f"Processing inventory slots for item: {ctx.item_id}")
    inventory = database.get_item(DEFAULT_INVENTORY_ID)
    if inventory is None:
        logger.warning(
            f"Default inventory {DEFAULT_INVENTORY_ID} not found, skipping inventory slots "
            f"for item: {ctx.item_id}"
        )
        return 0

    table = ctx.maps.inventory_slots
    added = 0
    for slot in inventory.get("_props", {}).get("Slots", []):
        raw_name = slot.get("_name")
        mapped_name = table.get(raw_name)
        alias = next((key for key, value in table.items() if value == raw_name), None)

        if raw_name in allowed or mapped_name in allowed or alias in allowed:
            if add_to_slot_filter(slot, ctx.item_id):
                added += 1
                logger.debug(
                    f"Successfully added item {ctx.item_id} to the filter of slot {raw_name}"
                )
    return added
