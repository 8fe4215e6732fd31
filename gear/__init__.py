"""Equipment parameters and materia meld caps."""
from __future__ import annotations

from gear.items.equipment import Equipment, special_parameter_type
from gear.items.item import Item
from gear.items.parameters import Parameter, ParameterCollection, ParameterType, ParameterValue
from gear.sheets.collection import Collection, MissingTableEntry
from gear.sheets.content import ContentManager, build_collection
from gear.xiv.entities import BaseParam, EquipSlotCategory, ItemLevel

__all__ = [
    "BaseParam",
    "Collection",
    "ContentManager",
    "EquipSlotCategory",
    "Equipment",
    "Item",
    "ItemLevel",
    "MissingTableEntry",
    "Parameter",
    "ParameterCollection",
    "ParameterType",
    "ParameterValue",
    "build_collection",
    "special_parameter_type",
]
