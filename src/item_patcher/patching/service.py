"""
Main service for patching custom items into the host database.

Provides the load-time entry point: read the item configs, then for every
item build and register its clone and run the patch steps in order.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, TYPE_CHECKING

from ..database.host import HostDatabase
from ..item_configs.loaders import ItemConfigLoader
from ..item_configs.models import ItemDescriptor
from ..references import DEFAULT_MAPS, ShorthandMaps
from ..settings.patching import DEFAULT_EXCLUDE_PATTERN
from ..settings.types import ConfigError
from .clone import build_clone_request
from .context import PatchContext
from .errors import PatchError
from .factory import CloneItemFactory, ItemFactory
from .global_config import apply_mastery_sections, apply_weapon_presets
from .loot import apply_bot_inventories, apply_static_loot
from .quests import PISTOL_QUEST_PATCH, QuestWeaponPatch
from .slots import apply_inventory_slots, apply_mod_slots
from .traders import apply_trader_assort

if TYPE_CHECKING:
    from ..settings import AppSettings

PatchStep = Callable[[PatchContext, HostDatabase], int]

# Order matters only in that every step runs after the clone exists
PATCH_STEPS: Sequence[PatchStep] = (
    apply_static_loot,
    apply_mod_slots,
    apply_inventory_slots,
    apply_mastery_sections,
    apply_weapon_presets,
    apply_bot_inventories,
    apply_trader_assort,
)


@dataclass
class PatchReport:
    """Outcome of one patch run."""
    added: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    mutations: Dict[str, int] = field(default_factory=dict)
    quests_modified: int = 0

    @property
    def success(self) -> bool:
        return not self.failed


class ItemPatchService:
    """Service that applies custom item configs to a host database.

    Each item is independent: a PatchError aborts that item's remaining
    steps, is logged and recorded, and the run moves on to the next item.
    """

    def __init__(
        self,
        database: HostDatabase,
        settings: Optional["AppSettings"] = None,
        item_factory: Optional[ItemFactory] = None,
        maps: ShorthandMaps = DEFAULT_MAPS,
        quest_patches: Sequence[QuestWeaponPatch] = (PISTOL_QUEST_PATCH,),
    ):
        """Initialize the patch service.

        Args:
            database: The host database to mutate in place
            settings: App settings for items directory, exclusions and toggles
            item_factory: Host item factory; defaults to cloning into ``database``
            maps: Shorthand lookup tables
            quest_patches: Fixed quest patches run once after all items
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.database = database
        self.settings = settings
        self.item_factory: ItemFactory = item_factory or CloneItemFactory(database)
        self.maps = maps
        self.quest_patches = tuple(quest_patches)

        exclude_pattern = settings.exclude_pattern if settings else DEFAULT_EXCLUDE_PATTERN
        self.loader = ItemConfigLoader(exclude_pattern=exclude_pattern)

    @property
    def quest_patch_enabled(self) -> bool:
        return self.settings.quest_patch_enabled if self.settings else True

    def load_descriptors(self, items_dir: Optional[Path] = None) -> Dict[str, ItemDescriptor]:
        """Load item descriptors from ``items_dir`` or the configured directory.

        Raises:
            ConfigError: If no directory is known or a fragment is malformed
        """
        if items_dir is None and self.settings:
            items_dir = self.settings.items_dir
        if items_dir is None:
            raise ConfigError("Items directory not set")
        return self.loader.load_descriptors(Path(items_dir))

    def run(self, items_dir: Optional[Path] = None) -> PatchReport:
        """Load item configs and apply them all."""
        return self.apply_all(self.load_descriptors(items_dir))

    def apply_item(self, descriptor: ItemDescriptor) -> int:
        """Clone one item and run every patch step for it.

        Returns:
            Total number of mutations the steps made

        Raises:
            PatchError: If the item cannot be completed
        """
        request, source_tpl = build_clone_request(descriptor, self.maps)
        self.logger.debug(f"Item ID: {descriptor.item_id}")
        self.logger.debug(f"Prefab Path: {request.prefab_path}")
        self.item_factory.create_item_from_clone(request)

        ctx = PatchContext(descriptor=descriptor, source_tpl=source_tpl, maps=self.maps)
        return sum(step(ctx, self.database) for step in PATCH_STEPS)

    def apply_all(self, descriptors: Mapping[str, ItemDescriptor]) -> PatchReport:
        """Apply every descriptor, then the fixed quest patches."""
        report = PatchReport()

        for item_id, descriptor in descriptors.items():
            try:
                report.mutations[item_id] = self.apply_item(descriptor)
            except PatchError as e:
                self.logger.error(f"Failed to add custom item {item_id}: {e}")
                report.failed[item_id] = str(e)
                continue
            report.added.append(item_id)

        if self.quest_patch_enabled:
            for quest_patch in self.quest_patches:
                report.quests_modified += quest_patch.apply(self.database)

        if report.added:
            self.logger.info(f"Database: Loaded {len(report.added)} custom items.")
        else:
            self.logger.info("Database: No custom items loaded.")
        if report.failed:
            self.logger.warning(
                f"{len(report.failed)} custom items failed: {', '.join(report.failed)}"
            )
        return report
