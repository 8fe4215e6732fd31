"""Sheet loading from JSON content files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from gear.engine.logger import ChannelLogger, GearLogger
from gear.engine.settings import Settings
from gear.items.item import Item
from gear.items.sheet import ItemSheet
from gear.xiv.entities import ENTITY_TYPES

from .collection import Collection, Sheet
from .row import Row, rows_by_key


def _make_sheet(collection: Collection, name: str, rows: Dict[int, Row]) -> Sheet:
    if name == Item.SHEET:
        return ItemSheet(collection, name, rows)
    entity = ENTITY_TYPES.get(name)
    if entity is None:
        raise ValueError(f"Unknown sheet {name!r}")
    return Sheet(collection, name, rows, entity)


SHEET_NAMES = (*ENTITY_TYPES, Item.SHEET)


def build_collection(
    tables: Mapping[str, Iterable[Mapping[str, Any]]],
    logger: Optional[GearLogger] = None,
) -> Collection:
    """Build a collection from in-memory row dictionaries keyed by sheet name.

    Sheets missing from ``tables`` are registered empty.
    """

    collection = Collection(logger)
    for name in SHEET_NAMES:
        rows = rows_by_key(Row.from_dict(entry) for entry in tables.get(name, ()))
        collection.add_sheet(_make_sheet(collection, name, rows))
    return collection


class ContentManager:
    """Loads every known sheet from ``<root>/<SheetName>.json``.

    Sheets are read by :meth:`load`; looking up an item first loads them.
    """

    def __init__(self, root: Path, logger: Optional[GearLogger] = None) -> None:
        self.root = root
        self.logger = logger
        self.collection: Optional[Collection] = None

    @classmethod
    def from_settings(cls, settings: Settings, logger: Optional[GearLogger] = None) -> "ContentManager":
        return cls(settings.content_root, logger)

    def load(self) -> Collection:
        collection = Collection(self.logger)
        log = collection.channel("sheets")
        for name in SHEET_NAMES:
            rows = self._read_rows(self.root / f"{name}.json", log)
            collection.add_sheet(_make_sheet(collection, name, rows))
        self.collection = collection
        return collection

    def _read_rows(self, path: Path, log: Optional[ChannelLogger]) -> Dict[int, Row]:
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            if log and log.enabled:
                log.warning("Skipping %s: %s", path.name, exc)
            return {}
        if isinstance(data, dict):
            data = [data]
        rows = rows_by_key(Row.from_dict(entry) for entry in data)
        if log and log.enabled:
            log.info("Loaded %d rows from %s", len(rows), path.name)
        return rows

    @property
    def items(self) -> Sheet:
        collection = self.collection if self.collection is not None else self.load()
        return collection.get_sheet(Item.SHEET)

    def item(self, key: int) -> Item:
        return self.items[key]


__all__ = ["ContentManager", "SHEET_NAMES", "build_collection"]
