"""Shared fixtures: a small host database and matching shorthand tables."""

from pathlib import Path
from typing import Any, Callable, Dict

import orjson
import pytest

from item_patcher.database import HostDatabase, DEFAULT_INVENTORY_ID
from item_patcher.item_configs import ItemDescriptor
from item_patcher.patching import PatchContext
from item_patcher.references import ShorthandMaps

STIRRUP_QUEST = "596b455186f77457cb50eccb"
SECOND_PISTOL_QUEST = "64e7b99017ab941a6f7bf9d7"


def _slot(name: str, *allowed: str) -> Dict[str, Any]:
    return {"_name": name, "_props": {"filters": [{"Filter": list(allowed)}]}}


def _quest(*weapons: str) -> Dict[str, Any]:
    return {
        "conditions": {
            "AvailableForFinish": [
                {"counter": {"conditions": [{"weapon": list(weapons)}]}}
            ]
        }
    }


def make_tables() -> Dict[str, Any]:
    """Build a minimal host table set covering every patch step."""
    return {
        "templates": {
            "items": {
                "rawA": {"_id": "rawA", "_parent": "pistolclass", "_props": {"Name": "A", "Weight": 1.0}},
                "weapon1": {
                    "_id": "weapon1",
                    "_props": {
                        "Slots": [
                            _slot("mod_pistol_grip", "rawA", "grip2"),
                            _slot("mod_magazine", "mag1"),
                        ]
                    },
                },
                "weapon2": {
                    "_id": "weapon2",
                    "_props": {"Slots": [_slot("mod_pistol_grip", "grip2")]},
                },
                "weapon3": {
                    "_id": "weapon3",
                    "_props": {"Slots": [{"_name": "Mod_Pistol_Grip", "_props": {}}]},
                },
                "ammo1": {"_id": "ammo1", "_props": {}},
                DEFAULT_INVENTORY_ID: {
                    "_id": DEFAULT_INVENTORY_ID,
                    "_props": {
                        "Slots": [
                            _slot("FirstPrimaryWeapon"),
                            _slot("Holster"),
                            _slot("Scabbard"),
                        ]
                    },
                },
            },
            "handbook": {"Items": []},
            "prices": {},
            "quests": {
                STIRRUP_QUEST: _quest("w1", "w2"),
                SECOND_PISTOL_QUEST: _quest("w3"),
            },
        },
        "locations": {
            "bigmap": {
                "staticLoot": {
                    "rawContainer": {"itemDistribution": [{"tpl": "old", "relativeProbability": 3}]},
                    "otherContainer": {"itemDistribution": []},
                }
            },
            "woods": {"staticLoot": {"otherContainer": {"itemDistribution": []}}},
            "hideout": {"base": {}},
        },
        "traders": {
            "rawTrader": {"assort": {"items": [], "barter_scheme": {}, "loyal_level_items": {}}},
        },
        "bots": {
            "types": {
                "assault": {"inventory": {"items": {"Backpack": {"rawA": 5}, "Pockets": {"other": 1}}}},
                "usec": {"inventory": {"items": {"TacticalVest": {"rawA": 12}}}},
                "unmapped": {"inventory": {"items": {"Backpack": {"rawA": 3}}}},
            }
        },
        "globals": {
            "config": {"Mastering": [{"Name": "Glock", "Templates": ["g1"], "Level2": 100}]},
            "ItemPresets": {},
        },
        "locales": {"global": {"en": {}, "ru": {}}},
    }


@pytest.fixture
def tables() -> Dict[str, Any]:
    return make_tables()


@pytest.fixture
def database(tables: Dict[str, Any]) -> HostDatabase:
    return HostDatabase(tables)


@pytest.fixture
def maps() -> ShorthandMaps:
    return ShorthandMaps(
        items={
            "shortA": "rawA",
            "shortContainer": "rawContainer",
            "shortWeapon2": "weapon2",
            "GP": "gpcoin",
        },
        base_classes={"PISTOL": "pistolclass"},
        handbook={"PISTOLS": "hbpistols"},
        traders={"shortTrader": "rawTrader"},
        currencies={"ROUBLES": "roubles"},
        bot_types={"assault": "Scav", "usec": "PMC USEC"},
        inventory_slots={"Primary": "FirstPrimaryWeapon", "Melee": "Scabbard"},
    )


@pytest.fixture
def make_ctx(maps: ShorthandMaps) -> Callable[..., PatchContext]:
    """Build a PatchContext from a raw item config."""

    def _make(config: Dict[str, Any], item_id: str = "X") -> PatchContext:
        descriptor = ItemDescriptor.from_dict(item_id, {"itemTplToClone": "shortA", **config})
        return PatchContext(
            descriptor=descriptor,
            source_tpl=maps.item(descriptor.item_tpl_to_clone),
            maps=maps,
        )

    return _make


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON file under tmp_path and return its path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(orjson.dumps(data))
        return path

    return _write
