"""Friendly base-class names mapped to host parent ids."""

from typing import Dict

ITEM_BASE_CLASS_MAP: Dict[str, str] = {
    "WEAPON": "5422acb9af1c889c16000029",
    "PISTOL": "5447b5cf4bdc2d65278b4567",
    "REVOLVER": "617f1ef5e8b54b0998387733",
    "SMG": "5447b5e04bdc2d62278b4567",
    "ASSAULT_RIFLE": "5447b5f14bdc2d61278b4567",
    "ASSAULT_CARBINE": "5447b5fc4bdc2d87278b4567",
    "SHOTGUN": "5447b6094bdc2dc3278b4567",
    "MARKSMAN_RIFLE": "5447b6194bdc2d67278b4567",
    "SNIPER_RIFLE": "5447b6254bdc2dc3278b4568",
    "MACHINE_GUN": "5447bed64bdc2d97278b4568",
    "GRENADE_LAUNCHER": "5447bedf4bdc2d87278b4568",
    "KNIFE": "5447e1d04bdc2dff2f8b4567",
    "THROW_WEAPON": "543be6564bdc2df4348b4568",
    "MOD": "5448fe124bdc2da5018b4567",
    "MAGAZINE": "5448bc234bdc2d3c308b4569",
    "BARREL": "555ef6e44bdc2de9068b457e",
    "HANDGUARD": "55818a104bdc2db9688b4569",
    "RECEIVER": "55818a304bdc2db5418b457d",
    "STOCK": "55818a594bdc2db9688b456a",
    "PISTOL_GRIP": "55818a684bdc2ddd698b456d",
    "MUZZLE": "5448fe394bdc2d0d028b456c",
    "SILENCER": "550aa4cd4bdc2dd8348b456c",
    "SIGHTS": "5448fe7a4bdc2d6f028b456b",
    "AMMO": "5485a8684bdc2da71d8b4567",
    "AMMO_BOX": "543be5cb4bdc2deb348b4568",
    "BACKPACK": "5448e53e4bdc2d60728b4567",
    "VEST": "5448e5284bdc2dcb718b4567",
    "ARMOR": "5448e54d4bdc2dcc718b4568",
    "HEADWEAR": "5a341c4086f77401f2541505",
    "FOOD": "5448e8d04bdc2ddf718b4569",
    "DRINK": "5448e8d64bdc2dce718b4568",
    "MEDS": "5448f3ac4bdc2dce718b4569",
    "KEY": "543be5e94bdc2df1348b4568",
    "MONEY": "543be5dd4bdc2deb348b4569",
    "BARTER_ITEM": "5448eb774bdc2d0a728b4567",
}
