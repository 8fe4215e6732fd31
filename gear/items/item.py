"""Catalog item rows."""
from __future__ import annotations

from typing import Optional

from gear.xiv.entities import ItemLevel, NamedRow


class Item(NamedRow):
    SHEET = "Item"

    @property
    def description(self) -> str:
        return self.as_str("Description")

    @property
    def item_level(self) -> Optional[ItemLevel]:
        return self.as_entity(ItemLevel, "Level{Item}")

    @property
    def is_unique(self) -> bool:
        return self.as_bool("IsUnique")

    @property
    def is_untradable(self) -> bool:
        return self.as_bool("IsUntradable")

    @property
    def is_equippable(self) -> bool:
        return self.as_int("EquipSlotCategory") != 0


__all__ = ["Item"]
