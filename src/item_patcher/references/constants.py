"""
Trader, currency, bot-type and inventory-slot lookup tables.
"""

from typing import Dict

TRADER_IDS: Dict[str, str] = {
    "PRAPOR": "54cb50c76803fa8b248b4571",
    "THERAPIST": "54cb57776803fa99248b456e",
    "FENCE": "579dc571d53a0658a154fbec",
    "SKIER": "58330581ace78e27b8b10cee",
    "PEACEKEEPER": "5935c25fb3acc3127c3d8cd9",
    "MECHANIC": "5a7c2eca46aef81a7ca2145d",
    "RAGMAN": "5ac3b934156ae10c4430e83c",
    "JAEGER": "5c0647fdd443bc2504c2d371",
    "LIGHTKEEPER": "638f541a29ffd1183d187f57",
    "REF": "6617beeaa9cfa777ca915b7c",
}

CURRENCY_IDS: Dict[str, str] = {
    "ROUBLES": "5449016a4bdc2d6f028b456f",
    "DOLLARS": "5696686a4bdc2da3298b456a",
    "EUROS": "569668774bdc2da2298b4568",
    "GP": "5d235b4d86f7742e017bc88a",
}

# Host bot type id -> display name. Only these bot types receive loot weights.
ALL_BOT_TYPES: Dict[str, str] = {
    "usec": "PMC USEC",
    "bear": "PMC BEAR",
    "assault": "Scav",
    "cursedassault": "Cursed Scav",
    "marksman": "Sniper Scav",
    "pmcbot": "Raider",
    "exusec": "Rogue",
    "arenafighter": "Arena Fighter",
    "arenafighterevent": "Bloodhound",
    "crazyassaultevent": "Crazy Scav",
    "sectantpriest": "Cultist Priest",
    "sectantwarrior": "Cultist",
    "bossbully": "Reshala",
    "followerbully": "Reshala Guard",
    "bosskilla": "Killa",
    "bosskojaniy": "Shturman",
    "followerkojaniy": "Shturman Guard",
    "bossgluhar": "Glukhar",
    "followergluharassault": "Glukhar Assault Guard",
    "followergluharsecurity": "Glukhar Security Guard",
    "followergluharscout": "Glukhar Scout Guard",
    "followergluharsnipe": "Glukhar Sniper Guard",
    "bosssanitar": "Sanitar",
    "followersanitar": "Sanitar Guard",
    "bosstagilla": "Tagilla",
    "followertagilla": "Tagilla Guard",
    "bossknight": "Knight",
    "followerbigpipe": "Big Pipe",
    "followerbirdeye": "Birdeye",
    "bosszryachiy": "Zryachiy",
    "followerzryachiy": "Zryachiy Guard",
    "bossboar": "Kaban",
    "followerboar": "Kaban Guard",
    "bossboarsniper": "Kaban Sniper",
    "bosskolontay": "Kollontay",
    "followerkolontayassault": "Kollontay Assault Guard",
    "followerkolontaysecurity": "Kollontay Security Guard",
}

# Friendly slot alias -> host inventory slot name
INVENTORY_SLOTS: Dict[str, str] = {
    "Primary": "FirstPrimaryWeapon",
    "Secondary": "SecondPrimaryWeapon",
    "Holster": "Holster",
    "Melee": "Scabbard",
    "FaceCover": "FaceCover",
    "Headwear": "Headwear",
    "Earpiece": "Earpiece",
    "Eyewear": "Eyewear",
    "Armband": "ArmBand",
    "BodyArmor": "ArmorVest",
    "Rig": "TacticalVest",
    "Backpack": "Backpack",
    "Pockets": "Pockets",
    "SecureContainer": "SecuredContainer",
}
