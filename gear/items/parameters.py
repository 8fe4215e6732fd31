"""Parameter values and the collections that group them by stat."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from gear.xiv.entities import BaseParam


class ParameterType(Enum):
    """Origin of a stat contribution."""

    BASE = "Base"
    HQ = "Hq"
    SET_BONUS = "SetBonus"
    SANCTION = "Sanction"


@dataclass(frozen=True)
class ParameterValue:
    """A typed amount contributed to one stat."""

    type: ParameterType
    amount: int


class Parameter:
    """All values contributed to a single stat, in insertion order."""

    __slots__ = ("base_param", "_values")

    def __init__(self, base_param: "BaseParam", values: Iterable[ParameterValue] = ()) -> None:
        self.base_param = base_param
        self._values: List[ParameterValue] = list(values)

    def add_value(self, value: ParameterValue) -> None:
        self._values.append(value)

    @property
    def values(self) -> Tuple[ParameterValue, ...]:
        return tuple(self._values)

    def __iter__(self) -> Iterator[ParameterValue]:
        return iter(tuple(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def value_of(self, parameter_type: ParameterType) -> Optional[ParameterValue]:
        """Return the first value of ``parameter_type``, if any."""

        for value in self._values:
            if value.type is parameter_type:
                return value
        return None

    def total(self, *types: ParameterType) -> int:
        """Sum the amounts of the given types (all types when none are given)."""

        return sum(v.amount for v in self._values if not types or v.type in types)

    def __repr__(self) -> str:
        inner = ", ".join(f"{v.type.value}={v.amount}" for v in self._values)
        return f"Parameter({self.base_param!r}: {inner})"


class ParameterCollection:
    """Ordered mapping from stat to :class:`Parameter`.

    Each stat appears once; further values for the same stat are appended to
    its existing entry.
    """

    def __init__(self, parameters: Iterable[Parameter] = ()) -> None:
        self._parameters: Dict["BaseParam", Parameter] = {}
        self.add_range(parameters)

    def add_parameter_value(self, base_param: "BaseParam", value: ParameterValue) -> Parameter:
        parameter = self._parameters.get(base_param)
        if parameter is None:
            parameter = Parameter(base_param)
            self._parameters[base_param] = parameter
        parameter.add_value(value)
        return parameter

    def add_range(self, parameters: Iterable[Parameter]) -> None:
        # Values are copied so the source parameters are never touched.
        for parameter in parameters:
            for value in parameter:
                self.add_parameter_value(parameter.base_param, value)

    def get(self, base_param: "BaseParam") -> Optional[Parameter]:
        return self._parameters.get(base_param)

    def __getitem__(self, base_param: "BaseParam") -> Parameter:
        return self._parameters[base_param]

    def __contains__(self, base_param: object) -> bool:
        return base_param in self._parameters

    def __iter__(self) -> Iterator[Parameter]:
        return iter(list(self._parameters.values()))

    def __len__(self) -> int:
        return len(self._parameters)

    def values_for(self, base_param: "BaseParam") -> Tuple[ParameterValue, ...]:
        parameter = self._parameters.get(base_param)
        return parameter.values if parameter is not None else ()

    def values(self) -> List[Tuple["BaseParam", ParameterValue]]:
        """Every value with its stat, flattened in insertion order."""

        return [(p.base_param, v) for p in self._parameters.values() for v in p]

    def total(self, base_param: "BaseParam", *types: ParameterType) -> int:
        parameter = self._parameters.get(base_param)
        return parameter.total(*types) if parameter is not None else 0

    def __repr__(self) -> str:
        return f"ParameterCollection({list(self._parameters.values())!r})"


__all__ = ["Parameter", "ParameterCollection", "ParameterType", "ParameterValue"]
