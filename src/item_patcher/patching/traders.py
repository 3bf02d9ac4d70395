"""
Trader assort patch.
"""

import logging
from typing import List

from ..database.host import HostDatabase
from ..database.models import HIDEOUT_ROOT
from .context import PatchContext
from .errors import BarterCurrencyError

logger = logging.getLogger(__name__)


def apply_trader_assort(ctx: PatchContext, database: HostDatabase) -> int:
    """List the item at its trader.

    Every barter currency is resolved before the trader is touched, so a
    listing with an unknown currency raises without leaving a half-written
    offer behind. Assort stubs are appended without a presence check; the
    barter scheme and loyalty level for the item are overwritten.

    Raises:
        BarterCurrencyError: If a barter ``_tpl`` is neither a currency nor a known item
    """
    listing = ctx.descriptor.trader
    if listing is None:
        return 0

    item_id = ctx.item_id
    trader_id = ctx.maps.trader(listing.trader_id)
    trader = database.traders.get(trader_id)
    if not trader:
        logger.warning(f"Unknown trader '{listing.trader_id}' for item: {item_id}")
        return 0

    currencies: List[str] = []
    for scheme in listing.barter_scheme:
        tpl = ctx.maps.currency(scheme.tpl)
        if not tpl:
            raise BarterCurrencyError(item_id, scheme.tpl)
        currencies.append(tpl)

    assort = trader.get("assort")
    if assort is None:
        logger.warning(f"Trader '{listing.trader_id}' has no assort, skipping item: {item_id}")
        return 0

    logger.debug(f"Processing traders for item: {item_id}")
    assort_items = assort.setdefault("items", [])
    for trader_item in listing.items:
        assort_items.append(
            {
                "_id": item_id,
                "_tpl": item_id,
                "parentId": HIDEOUT_ROOT,
                "slotId": HIDEOUT_ROOT,
                "upd": {
                    "UnlimitedCount": trader_item.unlimited_count,
                    "StackObjectsCount": trader_item.stack_objects_count,
                },
            }
        )
        logger.debug(f"Successfully added item {item_id} to the trader {listing.trader_id}")

    barter_scheme = assort.setdefault("barter_scheme", {})
    barter_scheme[item_id] = [
        [{"count": scheme.count, "_tpl": tpl}]
        for scheme, tpl in zip(listing.barter_scheme, currencies)
    ]
    logger.debug(
        f"Added {len(currencies)} barter options for item {item_id} at trader {listing.trader_id}"
    )

    assort.setdefault("loyal_level_items", {})[item_id] = listing.loyalty_level
    return len(listing.items) + len(currencies) + 1
