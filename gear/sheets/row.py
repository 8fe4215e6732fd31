"""Typed field lookups over a single data row."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional


def column_name(column: str, index: Optional[int] = None) -> str:
    """Return the flat name of a repeated column, e.g. ``BaseParam[2]``."""

    if index is None:
        return column
    return f"{column}[{index}]"


class Row:
    """Read-only view over the fields of one row.

    Repeated columns may be stored either as a list under the bare column
    name (``{"BaseParam": [1, 2, 0]}``) or as flat ``Name[i]`` entries.
    Absent fields read as ``None`` from :meth:`get` and as ``0`` from the
    integer accessors, matching how empty cells appear in the data sheets.
    """

    __slots__ = ("_key", "_fields")

    def __init__(self, key: int, fields: Mapping[str, Any]) -> None:
        self._key = int(key)
        self._fields: Dict[str, Any] = dict(fields)

    @property
    def key(self) -> int:
        return self._key

    def get(self, column: str, index: Optional[int] = None, default: Any = None) -> Any:
        if index is None:
            return self._fields.get(column, default)
        flat = column_name(column, index)
        if flat in self._fields:
            return self._fields[flat]
        values = self._fields.get(column)
        if isinstance(values, (list, tuple)) and 0 <= index < len(values):
            return values[index]
        return default

    def as_int(self, column: str, index: Optional[int] = None) -> int:
        value = self.get(column, index)
        if value is None:
            return 0
        return int(value)

    def as_int64(self, column: str, index: Optional[int] = None) -> int:
        value = self.as_int(column, index)
        # Model keys are stored unsigned in some exports; fold them into int64.
        if value >= 1 << 63:
            value -= 1 << 64
        return value

    def as_bool(self, column: str, index: Optional[int] = None) -> bool:
        return bool(self.get(column, index, False))

    def as_str(self, column: str, index: Optional[int] = None) -> str:
        value = self.get(column, index)
        return "" if value is None else str(value)

    def __repr__(self) -> str:
        return f"Row(key={self._key})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Row":
        fields = {k: v for k, v in data.items() if k != "key"}
        return cls(int(data["key"]), fields)


def rows_by_key(rows: Iterable[Row]) -> Dict[int, Row]:
    return {row.key: row for row in rows}


__all__ = ["Row", "column_name", "rows_by_key"]
