"""Sources of an equipment item's primary parameters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Protocol, Tuple

from gear.xiv.entities import BaseParam

from .parameters import Parameter, ParameterType, ParameterValue

if TYPE_CHECKING:
    from .equipment import Equipment


class PrimaryParameterSource(Protocol):
    """Produces the main stats of an equipment item."""

    def build(self, equipment: "Equipment") -> Iterable[Parameter]:
        ...


@dataclass(frozen=True)
class ColumnParameters:
    """Primary parameters read from fixed row columns.

    Each entry pairs a BaseParam key with the column holding its value.
    Columns holding zero are left out.
    """

    columns: Tuple[Tuple[int, str], ...]

    def build(self, equipment: "Equipment") -> Iterable[Parameter]:
        base_params = equipment.sheet.collection.get_sheet(BaseParam.SHEET)
        parameters: List[Parameter] = []
        for base_param_key, column in self.columns:
            value = equipment.as_int(column)
            if value == 0:
                continue
            parameters.append(
                Parameter(base_params[base_param_key], [ParameterValue(ParameterType.BASE, value)])
            )
        return parameters


class NoPrimaryParameters:
    """Accessories carry no primary stats."""

    def build(self, equipment: "Equipment") -> Iterable[Parameter]:
        return ()


NO_PRIMARY_PARAMETERS = NoPrimaryParameters()


PHYSICAL_DAMAGE = 12
MAGIC_DAMAGE = 13
DELAY = 14
BLOCK_STRENGTH = 17
BLOCK_RATE = 18
DEFENSE = 21
MAGIC_DEFENSE = 24

WEAPON_PARAMETERS = ColumnParameters(
    (
        (PHYSICAL_DAMAGE, "Damage{Phys}"),
        (MAGIC_DAMAGE, "Damage{Mag}"),
        (DELAY, "Delay<ms>"),
    )
)

SHIELD_PARAMETERS = ColumnParameters(
    (
        (BLOCK_STRENGTH, "Block"),
        (BLOCK_RATE, "BlockRate"),
    )
)

ARMOUR_PARAMETERS = ColumnParameters(
    (
        (DEFENSE, "Defense{Phys}"),
        (MAGIC_DEFENSE, "Defense{Mag}"),
    )
)


__all__ = [
    "ARMOUR_PARAMETERS",
    "ColumnParameters",
    "NO_PRIMARY_PARAMETERS",
    "NoPrimaryParameters",
    "PrimaryParameterSource",
    "SHIELD_PARAMETERS",
    "WEAPON_PARAMETERS",
]
