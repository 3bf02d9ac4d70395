"""
Clone request construction.

Turns a descriptor into the record the host item factory consumes.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..item_configs.models import ItemDescriptor
from ..references import ShorthandMaps

logger = logging.getLogger(__name__)

PREFAB_PATH_FORMAT = "customItems/{item_id}.bundle"


@dataclass
class CloneRequest:
    """Instruction to create a new template derived from an existing one."""
    item_tpl_to_clone: str
    new_id: str
    parent_id: str
    handbook_parent_id: str
    override_properties: Dict[str, Any] = field(default_factory=dict)
    flea_price_roubles: Any = None
    handbook_price_roubles: Any = None
    locales: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @property
    def prefab_path(self) -> Optional[str]:
        prefab = self.override_properties.get("Prefab")
        return prefab.get("path") if isinstance(prefab, dict) else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the host's new-item-from-clone record."""
        return {
            "itemTplToClone": self.item_tpl_to_clone,
            "overrideProperties": self.override_properties,
            "parentId": self.parent_id,
            "newId": self.new_id,
            "fleaPriceRoubles": self.flea_price_roubles,
            "handbookPriceRoubles": self.handbook_price_roubles,
            "handbookParentId": self.handbook_parent_id,
            "locales": self.locales,
        }


def build_clone_request(
    descriptor: ItemDescriptor, maps: ShorthandMaps
) -> Tuple[CloneRequest, str]:
    """Build the clone request for one item.

    Shorthand references resolve through ``maps`` and fall back to the
    literal value. The prefab path defaults to ``customItems/<id>.bundle``
    unless the override properties set one.

    Args:
        descriptor: The item's descriptor
        maps: Shorthand lookup tables

    Returns:
        The clone request and the resolved id of the template to clone
    """
    item_id = descriptor.item_id
    source_tpl = maps.item(descriptor.item_tpl_to_clone)

    override_properties: Dict[str, Any] = copy.deepcopy(descriptor.override_properties or {})
    prefab = override_properties.get("Prefab")
    prefab_path = prefab.get("path") if isinstance(prefab, dict) else None
    override_properties["Prefab"] = {
        "path": prefab_path or PREFAB_PATH_FORMAT.format(item_id=item_id),
        "rcid": "",
    }

    request = CloneRequest(
        item_tpl_to_clone=source_tpl,
        new_id=item_id,
        parent_id=maps.base_class(descriptor.parent_id),
        handbook_parent_id=maps.handbook_category(descriptor.handbook_parent_id),
        override_properties=override_properties,
        flea_price_roubles=descriptor.flea_price_roubles,
        handbook_price_roubles=descriptor.handbook_price_roubles,
        locales=copy.deepcopy(descriptor.locales),
    )
    logger.debug(f"Cloning item {source_tpl} for itemID: {item_id}")
    return request, source_tpl
