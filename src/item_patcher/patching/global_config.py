"""
Patches against the host's global config: mastering and weapon presets.
"""

import copy
import logging
from typing import Any, Dict, List

from ..database.host import HostDatabase
from .context import PatchContext

logger = logging.getLogger(__name__)

PRESET_TYPE = "Preset"


def apply_mastery_sections(ctx: PatchContext, database: HostDatabase) -> int:
    """Merge the item's mastery sections into the global mastering list.

    Templates are appended to an existing section of the same name without
    a presence check; unknown sections are appended whole.
    """
    sections = ctx.descriptor.mastery_sections
    if sections is None:
        return 0

    logger.debug(f"Processing mastery sections for item: {ctx.item_id}")
    mastering = database.mastering
    changed = 0
    for mastery in sections:
        existing = next(
            (m for m in mastering if m.get("Name") == mastery.get("Name")), None
        )
        if existing is not None:
            existing.setdefault("Templates", []).extend(mastery.get("Templates", []))
            logger.debug(f" - Adding to existing mastery section for item: {ctx.item_id}")
        else:
            mastering.append(copy.deepcopy(mastery))
            logger.debug(f" - Adding new mastery section for item: {ctx.item_id}")
        changed += 1
    return changed


def build_preset(preset_data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize a configured preset into the host's preset record."""
    items: List[Dict[str, Any]] = []
    for item_data in preset_data.get("_items", []):
        item: Dict[str, Any] = {"_id": item_data.get("_id"), "_tpl": item_data.get("_tpl")}
        # Links only when configured
        if item_data.get("parentId"):
            item["parentId"] = item_data["parentId"]
        if item_data.get("slotId"):
            item["slotId"] = item_data["slotId"]
        items.append(item)

    preset: Dict[str, Any] = {
        "_changeWeaponName": preset_data.get("_changeWeaponName"),
        "_id": preset_data.get("_id"),
        "_items": items,
        "_name": preset_data.get("_name"),
        "_parent": preset_data.get("_parent"),
        "_type": PRESET_TYPE,
    }
    if preset_data.get("_encyclopedia"):
        preset["_encyclopedia"] = preset_data["_encyclopedia"]
    return preset


def apply_weapon_presets(ctx: PatchContext, database: HostDatabase) -> int:
    """Register the item's weapon presets, overwriting presets with the same id."""
    presets = ctx.descriptor.weapon_presets
    if presets is None:
        return 0

    logger.debug(f"Processing weapon presets for item: {ctx.item_id}")
    item_presets = database.item_presets
    for preset_data in presets:
        preset = build_preset(preset_data)
        item_presets[preset["_id"]] = preset
        logger.debug(f" - Added weapon preset: {preset['_name']}")
    return len(presets)
