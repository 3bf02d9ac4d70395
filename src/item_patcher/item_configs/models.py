"""
Data models for custom item configs.

An item config is read from JSON where every optional feature is switched on
by a boolean flag next to its data (``addtoTraders`` + ``traderId``...).
Here each feature becomes an optional field that is only set when its flag
is on, so patch steps check presence instead of re-reading flags.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypeAlias, cast

RawItemConfig: TypeAlias = Dict[str, Any]
"""A single item config as parsed from JSON."""

RawConfigMap: TypeAlias = Dict[str, RawItemConfig]
"""Maps item id to its raw config (one fragment file)."""


def _as_list(value: Any) -> List[Any]:
    """Normalize a 'one or many' JSON value to a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return list(cast(List[Any], value))
    return [value]


def _as_str_list(value: Any) -> List[str]:
    return [str(v) for v in _as_list(value) if isinstance(v, str) and v]


@dataclass
class StaticLootPlacement:
    """One container the item spawns in, with its relative probability."""
    container: str
    probability: Any = None


@dataclass
class ModSlotPlacement:
    """Attachment slots the item fits in, plus explicit parent overrides."""
    slot_names: List[str] = field(default_factory=list)
    whitelist: List[str] = field(default_factory=list)
    blacklist: List[str] = field(default_factory=list)


@dataclass
class TraderItem:
    """Stock flags of one assort stub."""
    unlimited_count: Any = None
    stack_objects_count: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TraderItem":
        return cls(
            unlimited_count=data.get("unlimitedCount"),
            stack_objects_count=data.get("stackObjectsCount"),
        )


@dataclass
class BarterEntry:
    """One price component: ``count`` of the currency or item ``tpl``."""
    count: Any
    tpl: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BarterEntry":
        return cls(count=data.get("count"), tpl=str(data.get("_tpl", "")))


@dataclass
class TraderListing:
    """Trader offer for the item."""
    trader_id: str
    items: List[TraderItem] = field(default_factory=list)
    barter_scheme: List[BarterEntry] = field(default_factory=list)
    loyalty_level: Optional[int] = None


@dataclass
class ItemDescriptor:
    """Declarative description of one custom item.

    Feature fields (``static_loot`` through ``trader``) are None when the
    matching JSON flag is off; ``add_to_bots`` carries no data of its own.
    """
    item_id: str
    item_tpl_to_clone: str
    parent_id: str = ""
    handbook_parent_id: str = ""
    override_properties: Optional[Dict[str, Any]] = None
    flea_price_roubles: Any = None
    handbook_price_roubles: Any = None
    locales: Dict[str, Dict[str, str]] = field(default_factory=dict)

    static_loot: Optional[List[StaticLootPlacement]] = None
    mod_slots: Optional[ModSlotPlacement] = None
    inventory_slots: Optional[List[str]] = None
    mastery_sections: Optional[List[Dict[str, Any]]] = None
    weapon_presets: Optional[List[Dict[str, Any]]] = None
    trader: Optional[TraderListing] = None
    add_to_bots: bool = False

    @classmethod
    def from_dict(cls, item_id: str, data: RawItemConfig) -> "ItemDescriptor":
        """Create ItemDescriptor from a raw JSON item config.

        Args:
            item_id: Id the new item will be registered under
            data: Raw config dict for that id

        Returns:
            ItemDescriptor with feature blocks set only where flagged
        """
        static_loot = None
        if data.get("addtoStaticLootContainers"):
            static_loot = cls._parse_static_loot(data)

        mod_slots = None
        if data.get("addtoModSlots"):
            mod_slots = ModSlotPlacement(
                slot_names=_as_str_list(data.get("modSlot")),
                whitelist=_as_str_list(data.get("ModdableItemWhitelist")),
                blacklist=_as_str_list(data.get("ModdableItemBlacklist")),
            )

        # The flag doubles as the slot list
        inventory_slots = None
        if data.get("addtoInventorySlots"):
            inventory_slots = _as_str_list(data.get("addtoInventorySlots"))

        mastery_sections = None
        if data.get("masteries"):
            mastery_sections = [
                cast(Dict[str, Any], s)
                for s in _as_list(data.get("masterySections"))
                if isinstance(s, dict)
            ]

        weapon_presets = None
        if data.get("addweaponpreset"):
            weapon_presets = [
                cast(Dict[str, Any], p)
                for p in _as_list(data.get("weaponpresets"))
                if isinstance(p, dict)
            ]

        trader = None
        if data.get("addtoTraders"):
            trader = TraderListing(
                trader_id=str(data.get("traderId", "")),
                items=[
                    TraderItem.from_dict(cast(Dict[str, Any], i))
                    for i in _as_list(data.get("traderItems"))
                    if isinstance(i, dict)
                ],
                barter_scheme=[
                    BarterEntry.from_dict(cast(Dict[str, Any], b))
                    for b in _as_list(data.get("barterScheme"))
                    if isinstance(b, dict)
                ],
                loyalty_level=data.get("loyallevelitems"),
            )

        override_properties = data.get("overrideProperties")
        return cls(
            item_id=item_id,
            item_tpl_to_clone=str(data.get("itemTplToClone", "")),
            parent_id=str(data.get("parentId", "")),
            handbook_parent_id=str(data.get("handbookParentId", "")),
            override_properties=(
                dict(override_properties) if isinstance(override_properties, dict) else None
            ),
            flea_price_roubles=data.get("fleaPriceRoubles"),
            handbook_price_roubles=data.get("handbookPriceRoubles"),
            locales=dict(data.get("locales") or {}),
            static_loot=static_loot,
            mod_slots=mod_slots,
            inventory_slots=inventory_slots,
            mastery_sections=mastery_sections,
            weapon_presets=weapon_presets,
            trader=trader,
            add_to_bots=bool(data.get("addtoBots")),
        )

    @staticmethod
    def _parse_static_loot(data: RawItemConfig) -> List[StaticLootPlacement]:
        """Read either the list form or the single container + Probability form."""
        containers = data.get("StaticLootContainers")
        if isinstance(containers, list):
            return [
                StaticLootPlacement(
                    container=str(entry.get("ContainerName", "")),
                    probability=entry.get("Probability"),
                )
                for entry in cast(List[Any], containers)
                if isinstance(entry, dict)
            ]
        if containers:
            return [
                StaticLootPlacement(
                    container=str(containers), probability=data.get("Probability")
                )
            ]
        return []
