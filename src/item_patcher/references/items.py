"""
Friendly item names mapped to host template ids.

Covers the weapons, containers and currencies item configs refer to by
name. Anything not listed here is used as a raw template id.
"""

from typing import Dict

ITEM_MAP: Dict[str, str] = {
    # Pistols
    "PISTOL_GLOCK17": "5a7ae0c351dfba0017554310",
    "PISTOL_GLOCK18C": "5b1fa9b25acfc40018633c01",
    "PISTOL_GLOCK19X": "63088377b5cd696784087147",
    "PISTOL_M1911A1": "5e81c3cbac2bb513793cdc75",
    "PISTOL_M45A1": "5f36a0e5fbf956000b716b65",
    "PISTOL_M9A3": "5cadc190ae921500103bb3b6",
    "PISTOL_P226R": "56d59856d2720bd8418b456a",
    "PISTOL_PM": "5448bd6b4bdc2dfc2f8b4569",
    "PISTOL_TT": "571a12c42459771f627b58a0",
    "PISTOL_APS": "5a17f98cfcdbcb0980087290",
    "PISTOL_FN57": "5d3eb3b0a4b93615055e84d2",
    "PISTOL_USP": "6193a720f8ee7e52e42109ed",
    "PISTOL_SR1MP": "59f98b4986f7746f546d2cef",
    "PISTOL_MP443": "576a581d2459771e7b1bc4f1",
    # Rifles and carbines
    "ASSAULTRIFLE_AK74N": "5644bd2b4bdc2d3b4c8b4572",
    "ASSAULTRIFLE_AKM": "59d6088586f774275f37482f",
    "ASSAULTRIFLE_M4A1": "5447a9cd4bdc2dbd208b4567",
    "ASSAULTRIFLE_HK416A5": "5bb2475ed4351e00853264e3",
    "ASSAULTRIFLE_MDR556": "5c488a752e221602b412af63",
    "ASSAULTCARBINE_SKS": "574d967124597745970e7c94",
    "ASSAULTCARBINE_VSSVINTOREZ": "57838ad32459774a17445cd2",
    "SMG_MP5": "5926bb2186f7744b1c6c6e60",
    "SMG_MP7A1": "5ba26383d4351e00334c93d9",
    "SMG_MPX": "58948c8e86f77409493f7266",
    "SMG_P90": "5cc82d76e24e8d00134b4b83",
    "SHOTGUN_MP153": "56dee2bdd2720bc8328b4567",
    "SHOTGUN_M870": "5a7828548dc32e5a9c28b516",
    "MARKSMANRIFLE_SR25": "5df8ce05b11454561e39243b",
    "SNIPERRIFLE_M700": "5bfea6e90db834001b7347f3",
    "SNIPERRIFLE_MOSIN": "5ae08f0a5acfc408fb1398a1",
    # Magazines
    "MAGAZINE_9X19_GLOCK_17": "5a718b548dc32e000d46d262",
    "MAGAZINE_45ACP_M1911_7": "5e81c4ca763d9f754677befa",
    "MAGAZINE_556X45_STANAG_30": "55802d5f4bdc2dac148b458e",
    # Static loot containers
    "CONTAINER_WEAPON_BOX_6X3": "5909d5ef86f77467974efbd4",
    "CONTAINER_WEAPON_BOX_5X5": "5909d4c186f7746ad34e805a",
    "CONTAINER_WEAPON_BOX_4X4": "5909d76c86f77471e53d2adf",
    "CONTAINER_WOODEN_CRATE": "578f87ad245977356274f2cc",
    "CONTAINER_DRAWER": "578f87b7245977356274f2cd",
    "CONTAINER_JACKET": "578f8778245977358849a9b5",
    "CONTAINER_SAFE": "578f8782245977354405a1e3",
    "CONTAINER_TOOLBOX": "5909d50c86f774659e6aaebe",
    "CONTAINER_MEDCASE": "5909d36d86f774660f0bb900",
    "CONTAINER_BURIED_BARREL_CACHE": "5d6d2bb386f774785b07a77a",
    "CONTAINER_GROUND_CACHE": "5d6d2b5486f774785c2ba8ea",
    # Barter goods and currencies
    "BARTER_GP_COIN": "5d235b4d86f7742e017bc88a",
    "BARTER_BITCOIN": "59faff1d86f7746c51718c9c",
    "MONEY_ROUBLES": "5449016a4bdc2d6f028b456f",
    "MONEY_DOLLARS": "5696686a4bdc2da3298b456a",
    "MONEY_EUROS": "569668774bdc2da2298b4568",
}
