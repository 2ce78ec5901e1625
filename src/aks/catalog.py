from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import CatalogEntry, UnknownCombination, catalog_key
from .natural_sort import natural_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogIndex:
    """Nachschlagewerk für den AKS-Katalog.

    by_key: 'Gruppe||Code' -> Eintrag
    by_group: Gruppe -> Einträge, natürlich nach Code sortiert
    group_ids: Gruppen in Anzeigereihenfolge
    """
    by_key: Mapping[str, CatalogEntry]
    by_group: Mapping[str, tuple[CatalogEntry, ...]]
    group_ids: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.by_key)

    def find(self, group_id: str, code: str) -> CatalogEntry | None:
        return self.by_key.get(catalog_key(group_id, code))

    def get(self, group_id: str, code: str) -> CatalogEntry:
        """Holt einen Katalogeintrag nach Gruppe und Code.

        Raises:
            UnknownCombination: Wenn die Kombination nicht im Katalog enthalten ist
        """
        entry = self.find(group_id, code)
        if entry is None:
            raise UnknownCombination(group_id, code)
        return entry

    def variants(self, group_id: str) -> tuple[CatalogEntry, ...]:
        """Gibt alle Anlagetypen einer Gruppe zurück (leer für unbekannte Gruppen)."""
        return self.by_group.get(group_id, ())


def _is_number(value: str) -> bool:
    try:
        number = float(value)
    except ValueError:
        return False
    return not math.isnan(number)


def sort_group_ids(group_ids: Iterable[str]) -> list[str]:
    """Sortiert Gruppen numerisch, falls alle Zahlen sind, sonst natürlich."""
    ids = list(group_ids)
    if ids and all(_is_number(g) for g in ids):
        return sorted(ids, key=float)
    return sorted(ids, key=natural_key)


def build_catalog_index(entries: Iterable[CatalogEntry]) -> CatalogIndex:
    """Baut den Katalog-Index aus den geladenen Einträgen.

    Doppelte Schlüssel werden nicht abgelehnt: der letzte Eintrag gewinnt.
    """
    by_key: dict[str, CatalogEntry] = {}
    groups: dict[str, list[CatalogEntry]] = {}

    for entry in entries:
        if entry.key in by_key:
            logger.warning("Duplicate catalog key %s, keeping last entry", entry.key)
        by_key[entry.key] = entry
        groups.setdefault(entry.group_id, []).append(entry)

    by_group = {
        group_id: tuple(sorted(group_entries, key=lambda e: natural_key(e.code)))
        for group_id, group_entries in groups.items()
    }

    logger.debug("Catalog index built: %d entries in %d groups", len(by_key), len(by_group))
    return CatalogIndex(
        by_key=MappingProxyType(by_key),
        by_group=MappingProxyType(by_group),
        group_ids=tuple(sort_group_ids(by_group.keys())),
    )
