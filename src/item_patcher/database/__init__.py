"""
Access to the host server's database tables.
"""

from .host import HostDatabase
from .models import (
    Template,
    TemplateMap,
    Location,
    Trader,
    BotType,
    Quest,
    MasterySection,
    MasteringList,
    DEFAULT_INVENTORY_ID,
    HIDEOUT_ROOT,
)

__all__ = [
    "HostDatabase",
    "Template",
    "TemplateMap",
    "Location",
    "Trader",
    "BotType",
    "Quest",
    "MasterySection",
    "MasteringList",
    "DEFAULT_INVENTORY_ID",
    "HIDEOUT_ROOT",
]
