"""Item sheet: plain items and equipment variants."""
from __future__ import annotations

from typing import Dict, Union

from gear.sheets.collection import Sheet
from gear.sheets.row import Row

from .equipment import Equipment
from .item import Item
from .primary import (
    ARMOUR_PARAMETERS,
    NO_PRIMARY_PARAMETERS,
    PrimaryParameterSource,
    SHIELD_PARAMETERS,
    WEAPON_PARAMETERS,
)

# EquipSlotCategory key -> primary parameter source. Unlisted slots are armour.
PRIMARY_SOURCES: Dict[int, PrimaryParameterSource] = {
    1: WEAPON_PARAMETERS,  # main hand
    13: WEAPON_PARAMETERS,  # two-handed
    14: WEAPON_PARAMETERS,  # main hand, blocks off hand
    2: SHIELD_PARAMETERS,  # off hand
    9: NO_PRIMARY_PARAMETERS,  # ears
    10: NO_PRIMARY_PARAMETERS,  # neck
    11: NO_PRIMARY_PARAMETERS,  # wrists
    12: NO_PRIMARY_PARAMETERS,  # fingers
    17: NO_PRIMARY_PARAMETERS,  # soul crystal
}


def primary_source_for(equip_slot_category: int) -> PrimaryParameterSource:
    return PRIMARY_SOURCES.get(equip_slot_category, ARMOUR_PARAMETERS)


class ItemSheet(Sheet[Item]):
    """Sheet that creates :class:`Equipment` for equippable rows."""

    def create(self, row: Row) -> Union[Item, Equipment]:
        slot_category = row.as_int("EquipSlotCategory")
        if slot_category == 0:
            return Item(self, row)
        return Equipment(self, row, primary_source_for(slot_category))


__all__ = ["ItemSheet", "PRIMARY_SOURCES", "primary_source_for"]
