"""
Loot patches: static container distributions and bot loot weights.
"""

import logging
from typing import Any

from ..database.host import HostDatabase
from .context import PatchContext

logger = logging.getLogger(__name__)


def add_to_static_loot(
    database: HostDatabase, container_id: str, tpl: str, probability: Any
) -> int:
    """Append ``tpl`` to the container's distribution in every location.

    Entries are appended without a presence check, so applying the same
    item twice yields two entries.

    Returns:
        Number of distribution lists extended
    """
    added = 0
    for location_id, location in database.locations.items():
        static_loot = location.get("staticLoot") if isinstance(location, dict) else None
        if not static_loot:
            logger.warning(f"No static loot found in location: {location_id}")
            continue

        if container_id not in static_loot:
            logger.error(
                f"Invalid loot container ID: {container_id} in location: {location_id}"
            )
            continue

        loot_container = static_loot[container_id]
        if not loot_container:
            logger.error(
                f"Loot container ID {container_id} not found in location: {location_id}"
            )
            continue

        distribution = loot_container.setdefault("itemDistribution", [])
        distribution.append({"tpl": tpl, "relativeProbability": probability})
        added += 1
        logger.debug(
            f"Added {tpl} to loot container: {container_id} in location: {location_id}"
        )
    return added


def apply_static_loot(ctx: PatchContext, database: HostDatabase) -> int:
    """Place the item in every configured static loot container."""
    placements = ctx.descriptor.static_loot
    if placements is None:
        return 0

    logger.debug(f"Processing static loot containers for item: {ctx.item_id}")
    tpl = ctx.maps.item(ctx.item_id)
    added = 0
    for placement in placements:
        container_id = ctx.maps.item(placement.container)
        added += add_to_static_loot(database, container_id, tpl, placement.probability)
        logger.debug(
            f" - Added to container '{container_id}' with probability {placement.probability}"
        )
    return added


def apply_bot_inventories(ctx: PatchContext, database: HostDatabase) -> int:
    """Give the item the loot weights its clone source has, per bot and slot.

    Only bot types listed in the bot-type map are touched; a slot gets an
    entry only where the source template already has a weight.
    """
    if not ctx.descriptor.add_to_bots:
        return 0

    logger.debug(f"Processing bot inventories for item: {ctx.item_id}")
    added = 0
    for bot_id, bot_type in database.bot_types.items():
        bot_name = ctx.maps.bot_types.get(bot_id)
        if not bot_name:
            logger.warning(f"Unknown bot type '{bot_id}', skipping for item: {ctx.item_id}")
            continue

        loot_slots = bot_type.get("inventory", {}).get("items", {})
        for loot_slot, weights in loot_slots.items():
            if ctx.source_tpl not in weights:
                continue
            weight = weights[ctx.source_tpl]
            weights[ctx.item_id] = weight
            added += 1
            logger.debug(
                f" - Adding item to bot inventory for bot type: {bot_name} "
                f"in loot slot: {loot_slot} with weight: {weight}"
            )
    return added
