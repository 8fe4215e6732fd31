"""Equipment items: derived parameters and materia meld caps."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from gear.engine.once import Once
from gear.sheets.collection import MissingTableEntry
from gear.xiv.entities import (
    BaseParam,
    ClassJob,
    ClassJobCategory,
    EquipSlotCategory,
    ItemLevel,
    ItemSeries,
    ItemSpecialBonus,
)

from .item import Item
from .parameters import Parameter, ParameterCollection, ParameterType, ParameterValue

if TYPE_CHECKING:
    from gear.sheets.collection import Sheet
    from gear.sheets.row import Row

    from .primary import PrimaryParameterSource

PARAMETER_SLOTS = 6

# Special bonus keys 2 and 4 are the only ones with a known meaning.
_SPECIAL_BONUS_TYPES = {
    2: ParameterType.SET_BONUS,
    4: ParameterType.SANCTION,
}


def special_parameter_type(special_bonus_key: int) -> ParameterType:
    """Bucket for the special stat slots of an item with the given bonus key."""

    return _SPECIAL_BONUS_TYPES.get(special_bonus_key, ParameterType.HQ)


class Equipment(Item):
    """An item that can be worn.

    Primary parameters come from ``primary_source``; secondary parameters are
    read from the six base and six special stat slots of the row. Both, and
    their union, are computed once and cached for the life of the instance.
    """

    def __init__(self, sheet: "Sheet", row: "Row", primary_source: "PrimaryParameterSource") -> None:
        super().__init__(sheet, row)
        self.primary_source = primary_source
        self._primary = Once(lambda: tuple(self.primary_source.build(self)))
        self._secondary = Once(self.build_secondary_parameters)
        self._all = Once(self._build_all_parameters)

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------
    @property
    def primary_parameters(self) -> Tuple[Parameter, ...]:
        return self._primary.get()

    @property
    def secondary_parameters(self) -> ParameterCollection:
        return self._secondary.get()

    @property
    def all_parameters(self) -> ParameterCollection:
        return self._all.get()

    @property
    def parameters(self) -> ParameterCollection:
        return self.all_parameters

    def _build_all_parameters(self) -> ParameterCollection:
        parameters = ParameterCollection()
        parameters.add_range(self.primary_parameters)
        parameters.add_range(self.secondary_parameters)
        return parameters

    def build_secondary_parameters(self) -> ParameterCollection:
        parameters = ParameterCollection()
        self._add_default_parameters(parameters)
        self._add_special_parameters(parameters)
        return parameters

    def _add_default_parameters(self, parameters: ParameterCollection) -> None:
        for i in range(PARAMETER_SLOTS):
            self._add_parameter(
                parameters,
                ParameterType.BASE,
                self.as_int("BaseParam", i),
                self.as_int("BaseParamValue", i),
            )

    def _add_special_parameters(self, parameters: ParameterCollection) -> None:
        parameter_type = special_parameter_type(self.as_int("ItemSpecialBonus"))
        for i in range(PARAMETER_SLOTS):
            self._add_parameter(
                parameters,
                parameter_type,
                self.as_int("BaseParam{Special}", i),
                self.as_int("BaseParamValue{Special}", i),
            )

    def _add_parameter(
        self,
        parameters: ParameterCollection,
        parameter_type: ParameterType,
        base_param_key: int,
        value: int,
    ) -> None:
        if base_param_key == 0:
            return
        base_param = self.sheet.collection.get_sheet(BaseParam.SHEET)[base_param_key]
        if base_param.key == 0:
            return
        parameters.add_parameter_value(base_param, ParameterValue(parameter_type, value))
        log = self.sheet.collection.channel("parameters")
        if log and log.enabled:
            log.debug("%s: %s %s %+d", self, base_param, parameter_type.value, value)

    # ------------------------------------------------------------------
    # Materia
    # ------------------------------------------------------------------
    def get_materia_meld_cap(self, base_param: BaseParam, include_hq_bonus: bool) -> int:
        """Amount of ``base_param`` that can still be melded before hitting the cap.

        The cap is ``round(level maximum * slot factor * role modifier / 10000)``,
        both factors being whole percentages. Ties round to even.
        Existing base values count against it, and HQ values too when
        ``include_hq_bonus`` is set. Never negative.
        """

        item_level = self._require(self.item_level, ItemLevel.SHEET, "Level{Item}")
        slot_category = self._require(self.equip_slot_category, EquipSlotCategory.SHEET, "EquipSlotCategory")

        # Base value for the stat at the item's level
        max_base = item_level.get_maximum(base_param)
        # Factor, in percent, for the stat in the item's equip slot
        slot_factor = base_param.get_maximum(slot_category)
        # Factor, in percent, for the stat in the item's role
        role_modifier = base_param.get_modifier(self.base_param_modifier)

        cap = round(max_base * slot_factor * role_modifier / 10000.0)

        current = 0
        present = self.all_parameters.get(base_param)
        if present is not None:
            base_value = present.value_of(ParameterType.BASE)
            if base_value is not None:
                current += base_value.amount
            if include_hq_bonus:
                hq_value = present.value_of(ParameterType.HQ)
                if hq_value is not None:
                    current += hq_value.amount

        remaining = max(0, cap - current)
        log = self.sheet.collection.channel("meld")
        if log and log.enabled:
            log.debug(
                "%s %s: max=%d slot=%d role=%d cap=%d current=%d remaining=%d",
                self,
                base_param,
                max_base,
                slot_factor,
                role_modifier,
                cap,
                current,
                remaining,
            )
        return remaining

    def _require(self, entity, table: str, column: str):
        if entity is None:
            raise MissingTableEntry(table, self.as_int(column))
        return entity

    # ------------------------------------------------------------------
    # Row fields
    # ------------------------------------------------------------------
    @property
    def equipment_level(self) -> int:
        return self.as_int("Level{Equip}")

    @property
    def base_param_modifier(self) -> int:
        return self.as_int("BaseParamModifier")

    @property
    def equip_slot_category(self) -> Optional[EquipSlotCategory]:
        return self.as_entity(EquipSlotCategory)

    @property
    def free_materia_slots(self) -> int:
        return self.as_int("MateriaSlotCount")

    @property
    def repair_class_job(self) -> Optional[ClassJob]:
        return self.as_entity(ClassJob, "ClassJob{Repair}")

    @property
    def repair_item(self) -> Optional[Item]:
        return self.as_entity(Item, "Item{Repair}")

    @property
    def item_special_bonus(self) -> Optional[ItemSpecialBonus]:
        return self.as_entity(ItemSpecialBonus)

    @property
    def item_series(self) -> Optional[ItemSeries]:
        return self.as_entity(ItemSeries)

    @property
    def class_job_category(self) -> Optional[ClassJobCategory]:
        return self.as_entity(ClassJobCategory)

    @property
    def required_pvp_rank(self) -> int:
        return self.as_int("PvPRank")

    @property
    def primary_model_key(self) -> int:
        return self.as_int64("Model{Main}")

    @property
    def secondary_model_key(self) -> int:
        return self.as_int64("Model{Sub}")


__all__ = ["Equipment", "PARAMETER_SLOTS", "special_parameter_type"]
