"""
Per-item state shared by the patch steps.
"""

from dataclasses import dataclass

from ..item_configs.models import ItemDescriptor
from ..references import ShorthandMaps


@dataclass
class PatchContext:
    """What every step needs to know about the item being patched in.

    ``source_tpl`` is the resolved id of the template the item was cloned
    from; mod-slot and bot steps inherit from it.
    """
    descriptor: ItemDescriptor
    source_tpl: str
    maps: ShorthandMaps

    @property
    def item_id(self) -> str:
        return self.descriptor.item_id
