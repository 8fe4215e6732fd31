"""Keyed sheets of rows and the collection that resolves references between them."""
from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING, Callable, Dict, Generic, Iterable, Optional, TypeVar

from .row import Row

if TYPE_CHECKING:
    from gear.engine.logger import ChannelLogger, GearLogger


class MissingTableEntry(KeyError):
    """Raised when a sheet, row or table column has no entry for a key."""

    def __init__(self, table: str, key: object) -> None:
        super().__init__(f"{table} has no entry for {key!r}")
        self.table = table
        self.key = key


E = TypeVar("E")


class Sheet(Generic[E]):
    """Rows of one sheet, exposed as entity instances.

    Entities are created on first lookup and cached per key, so the same
    key always yields the same instance.
    """

    def __init__(
        self,
        collection: "Collection",
        name: str,
        rows: Dict[int, Row],
        factory: Optional[Callable[["Sheet[E]", Row], E]] = None,
    ) -> None:
        self.collection = collection
        self.name = name
        self._rows = rows
        self._factory = factory
        self._instances: Dict[int, E] = {}
        self._lock = Lock()

    def __contains__(self, key: int) -> bool:
        return key in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def row(self, key: int) -> Row:
        try:
            return self._rows[key]
        except KeyError:
            raise MissingTableEntry(self.name, key) from None

    def create(self, row: Row) -> E:
        if self._factory is None:
            raise TypeError(f"{type(self).__name__} {self.name!r} has no entity factory")
        return self._factory(self, row)

    def __getitem__(self, key: int) -> E:
        instance = self._instances.get(key)
        if instance is not None:
            return instance
        row = self.row(key)
        with self._lock:
            instance = self._instances.get(key)
            if instance is None:
                instance = self.create(row)
                self._instances[key] = instance
        return instance

    def get(self, key: int, default: Optional[E] = None) -> Optional[E]:
        if key not in self._rows:
            return default
        return self[key]

    def __repr__(self) -> str:
        return f"Sheet({self.name!r}, rows={len(self._rows)})"


class Collection:
    """Registry of sheets, shared by every entity that references another sheet."""

    def __init__(self, logger: Optional["GearLogger"] = None) -> None:
        self.logger = logger
        self._sheets: Dict[str, Sheet] = {}

    def add_sheet(self, sheet: Sheet) -> Sheet:
        self._sheets[sheet.name] = sheet
        return sheet

    def get_sheet(self, name: str) -> Sheet:
        try:
            return self._sheets[name]
        except KeyError:
            raise MissingTableEntry("Collection", name) from None

    def sheet_names(self) -> Iterable[str]:
        return self._sheets.keys()

    def channel(self, name: str) -> Optional["ChannelLogger"]:
        if self.logger is None:
            return None
        return self.logger.channel(name)


__all__ = ["Collection", "MissingTableEntry", "Sheet"]
