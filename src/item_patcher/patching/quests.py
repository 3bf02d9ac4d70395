"""
Fixed quest-condition patches.

Unlike the item steps these are not driven by item configs: each
QuestWeaponPatch names the quests and weapons it touches up front.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ..database.host import HostDatabase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestWeaponPatch:
    """Adds weapons to the finish-condition weapon whitelist of fixed quests."""
    quest_ids: Tuple[str, ...]
    weapon_ids: Tuple[str, ...]

    @staticmethod
    def _weapon_condition(quest: Dict[str, Any]) -> Dict[str, Any]:
        """Return the counter condition holding the weapon whitelist."""
        return quest["conditions"]["AvailableForFinish"][0]["counter"]["conditions"][0]

    def apply(self, database: HostDatabase) -> int:
        """Apply to every target quest present in the host.

        The weapon list is copied, extended with missing weapons and written
        back only when something was added.

        Returns:
            Number of quests modified
        """
        modified_quests = 0
        for quest_id in self.quest_ids:
            quest = database.quests.get(quest_id)
            if not quest:
                continue

            try:
                condition = self._weapon_condition(quest)
                updated: List[str] = copy.deepcopy(condition.get("weapon", []))
            except (KeyError, IndexError, TypeError) as e:
                logger.error(f"Error modifying quest {quest_id}: missing condition {e}")
                continue

            modified = False
            for weapon_id in self.weapon_ids:
                if weapon_id not in updated:
                    updated.append(weapon_id)
                    modified = True
                    logger.debug(f"Added new weapon {weapon_id} to quest {quest_id}")
                else:
                    logger.debug(f"Weapon already allowed in quest {quest_id}: {weapon_id}")

            if modified:
                condition["weapon"] = updated
                modified_quests += 1
                logger.debug(f"Modified quest {quest_id}: {updated}")
        return modified_quests


PISTOL_QUEST_PATCH = QuestWeaponPatch(
    quest_ids=("596b455186f77457cb50eccb", "64e7b99017ab941a6f7bf9d7"),
    weapon_ids=("665fe0e865683281eb8e7ed6",),
)
