"""
Item factory: turns clone requests into registered templates.

The host normally provides this capability. ``CloneItemFactory`` does the
same work directly against a HostDatabase so the patcher can run outside
the host (command line, tests).
"""

import copy
import logging
from typing import Any, Dict, Protocol

from ..database.host import HostDatabase
from .clone import CloneRequest
from .errors import CloneSourceError


class ItemFactory(Protocol):
    """Host capability that registers a new item from a clone request."""

    def create_item_from_clone(self, request: CloneRequest) -> None:
        ...


class CloneItemFactory:
    """Registers cloned templates, handbook entries, prices and locales."""

    def __init__(self, database: HostDatabase):
        self.database = database
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def create_item_from_clone(self, request: CloneRequest) -> None:
        """Clone the source template and register the result.

        Raises:
            CloneSourceError: If the template to clone does not exist
        """
        source = self.database.get_item(request.item_tpl_to_clone)
        if source is None:
            raise CloneSourceError(request.new_id, request.item_tpl_to_clone)

        new_item: Dict[str, Any] = copy.deepcopy(source)
        new_item["_id"] = request.new_id
        new_item["_parent"] = request.parent_id
        props = new_item.setdefault("_props", {})
        # Override keys replace inherited values as a whole
        for key, value in request.override_properties.items():
            props[key] = copy.deepcopy(value)

        self.database.items[request.new_id] = new_item
        self._add_handbook_entry(request)
        self._add_flea_price(request)
        self._add_locales(request)
        self.logger.debug(
            f"Created item {request.new_id} from {request.item_tpl_to_clone}"
        )

    def _add_handbook_entry(self, request: CloneRequest) -> None:
        handbook_items = self.database.handbook_items
        if handbook_items is None:
            self.logger.warning(f"No handbook table, {request.new_id} not added to handbook")
            return
        handbook_items.append(
            {
                "Id": request.new_id,
                "ParentId": request.handbook_parent_id,
                "Price": request.handbook_price_roubles,
            }
        )

    def _add_flea_price(self, request: CloneRequest) -> None:
        prices = self.database.prices
        if prices is None:
            return
        prices[request.new_id] = request.flea_price_roubles

    def _add_locales(self, request: CloneRequest) -> None:
        if not request.locales:
            return
        fallback = next(iter(request.locales.values()))
        for language, strings in self.database.global_locales.items():
            details = request.locales.get(language, fallback)
            strings[f"{request.new_id} Name"] = details.get("name", "")
            strings[f"{request.new_id} ShortName"] = details.get("shortName", "")
            strings[f"{request.new_id} Description"] = details.get("description", "")
