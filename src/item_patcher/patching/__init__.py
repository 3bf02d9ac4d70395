"""
Patching custom items into the host database.

The service builds a clone request per item, hands it to the item factory,
then runs the patch steps (static loot, mod slots, inventory slots,
mastering, weapon presets, bot loot, traders) against the live tables.
"""

from .service import ItemPatchService, PatchReport, PATCH_STEPS
from .clone import CloneRequest, build_clone_request, PREFAB_PATH_FORMAT
from .context import PatchContext
from .errors import PatchError, BarterCurrencyError, CloneSourceError
from .factory import ItemFactory, CloneItemFactory
from .quests import QuestWeaponPatch, PISTOL_QUEST_PATCH

__all__ = [
    "ItemPatchService",
    "PatchReport",
    "PATCH_STEPS",
    "CloneRequest",
    "build_clone_request",
    "PREFAB_PATH_FORMAT",
    "PatchContext",
    "PatchError",
    "BarterCurrencyError",
    "CloneSourceError",
    "ItemFactory",
    "CloneItemFactory",
    "QuestWeaponPatch",
    "PISTOL_QUEST_PATCH",
]
