"""Friendly handbook category names mapped to host handbook ids."""

from typing import Dict

ITEM_HANDBOOK_CATEGORY_MAP: Dict[str, str] = {
    "WEAPONS": "5b5f78dc86f77409407a7f8e",
    "PISTOLS": "5b5f792486f77447ed5636b3",
    "ASSAULT_RIFLES": "5b5f78fc86f77409407a7f90",
    "ASSAULT_CARBINES": "5b5f78e986f77447ed5636b1",
    "SMGS": "5b5f796a86f774093f2ed3c0",
    "SHOTGUNS": "5b5f794b86f77409407a7f92",
    "MARKSMAN_RIFLES": "5b5f791486f774093f2ed3be",
    "BOLT_ACTION_RIFLES": "5b5f798886f77447ed5636b5",
    "MACHINE_GUNS": "5b5f79a486f77409407a7f94",
    "MELEE_WEAPONS": "5b5f7a0886f77409407a7f96",
    "GEAR_COMPONENTS": "5b5f71a686f77447ed5636ab",
    "MAGAZINES": "5b5f754a86f774094242f19b",
    "AMMO_PACKS": "5b47574386f77428ca22b33c",
    "BACKPACKS": "5b5f6f6c86f774093f2ecf0b",
    "BODY_ARMOR": "5b5f701386f774093f2ecf0f",
    "TACTICAL_RIGS": "5b5f6f8786f77447ed563642",
    "HEADWEAR": "5b47574386f77428ca22b330",
    "BARTER_ITEMS": "5b47574386f77428ca22b33e",
    "MEDICATION": "5b47574386f77428ca22b344",
    "KEYS": "5b47574386f77428ca22b342",
}
