"""Entities backed by data-sheet rows."""
from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Dict, Optional, Type, TypeVar

from gear.sheets.collection import MissingTableEntry
from gear.sheets.row import Row

if TYPE_CHECKING:
    from gear.sheets.collection import Sheet

R = TypeVar("R", bound="XivRow")


class XivRow:
    """Base for every entity read from a sheet.

    Equality and hashing follow the sheet name and row key; two instances of
    the same row compare equal even if they were created separately.
    """

    SHEET: ClassVar[str] = ""

    def __init__(self, sheet: "Sheet", row: Row) -> None:
        self.sheet = sheet
        self.row = row

    @property
    def key(self) -> int:
        return self.row.key

    def as_int(self, column: str, index: Optional[int] = None) -> int:
        return self.row.as_int(column, index)

    def as_int64(self, column: str, index: Optional[int] = None) -> int:
        return self.row.as_int64(column, index)

    def as_bool(self, column: str, index: Optional[int] = None) -> bool:
        return self.row.as_bool(column, index)

    def as_str(self, column: str, index: Optional[int] = None) -> str:
        return self.row.as_str(column, index)

    def as_entity(
        self,
        entity_type: Type[R],
        column: Optional[str] = None,
        index: Optional[int] = None,
    ) -> Optional[R]:
        """Resolve the key stored in ``column`` against ``entity_type``'s sheet.

        ``column`` defaults to the sheet name. A key of ``0`` with no matching
        row is an empty reference and resolves to ``None``.
        """

        key = self.as_int(column or entity_type.SHEET, index)
        sheet = self.sheet.collection.get_sheet(entity_type.SHEET)
        if key == 0 and key not in sheet:
            return None
        return sheet[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XivRow):
            return NotImplemented
        return self.sheet.name == other.sheet.name and self.key == other.key

    def __hash__(self) -> int:
        return hash((self.sheet.name, self.key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key})"


class NamedRow(XivRow):
    @property
    def name(self) -> str:
        return self.as_str("Name")

    def __str__(self) -> str:
        return self.name or f"{self.SHEET}#{self.key}"


class BaseParam(NamedRow):
    """A stat an item can grant."""

    SHEET = "BaseParam"

    def get_maximum(self, equip_slot_category: "EquipSlotCategory") -> int:
        """Factor, in percent, of the level maximum that applies to a slot category."""

        value = self.row.get("EquipSlotCategoryPct", equip_slot_category.key)
        if value is None:
            raise MissingTableEntry(f"{self.SHEET}[{self.key}].EquipSlotCategoryPct", equip_slot_category.key)
        return int(value)

    def get_modifier(self, modifier_code: int) -> int:
        """Factor, in percent, applied for an item's role modifier code."""

        value = self.row.get("MeldParam", modifier_code)
        if value is None:
            raise MissingTableEntry(f"{self.SHEET}[{self.key}].MeldParam", modifier_code)
        return int(value)


class ItemLevel(XivRow):
    SHEET = "ItemLevel"

    def get_maximum(self, base_param: BaseParam) -> int:
        """Level scaled maximum for ``base_param``."""

        value = self.row.get("Maximum", base_param.key)
        if value is None:
            raise MissingTableEntry(f"{self.SHEET}[{self.key}].Maximum", base_param.key)
        return int(value)


class EquipSlotCategory(NamedRow):
    SHEET = "EquipSlotCategory"


class ClassJob(NamedRow):
    SHEET = "ClassJob"

    @property
    def abbreviation(self) -> str:
        return self.as_str("Abbreviation")


class ClassJobCategory(NamedRow):
    SHEET = "ClassJobCategory"


class ItemSpecialBonus(NamedRow):
    SHEET = "ItemSpecialBonus"


class ItemSeries(NamedRow):
    SHEET = "ItemSeries"


ENTITY_TYPES: Dict[str, Type[XivRow]] = {
    entity.SHEET: entity
    for entity in (
        BaseParam,
        ItemLevel,
        EquipSlotCategory,
        ClassJob,
        ClassJobCategory,
        ItemSpecialBonus,
        ItemSeries,
    )
}


__all__ = [
    "BaseParam",
    "ClassJob",
    "ClassJobCategory",
    "ENTITY_TYPES",
    "EquipSlotCategory",
    "ItemLevel",
    "ItemSeries",
    "ItemSpecialBonus",
    "NamedRow",
    "XivRow",
]
