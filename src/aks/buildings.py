from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import BuildingRecord
from .natural_sort import natural_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildingIndex:
    """Gebäudeverzeichnis: sortierte Bezeichnungen und externe IDs."""
    labels: tuple[str, ...]
    external_ids: Mapping[str, str]

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, label: object) -> bool:
        return label in self.external_ids

    def external_id(self, label: str) -> str:
        """Externe Gebäude-ID (idBauwerk), leer für unbekannte Gebäude."""
        return self.external_ids.get(label.strip(), "")


def build_building_index(records: Iterable[BuildingRecord]) -> BuildingIndex:
    """Baut den Gebäude-Index.

    Datensätze ohne Bezeichnung werden übersprungen. Für mehrfach vorkommende
    Bezeichnungen bleibt die erste nicht-leere ID erhalten, spätere werden ignoriert.
    """
    external_ids: dict[str, str] = {}

    for record in records:
        label = record.bauwerk.strip()
        if not label:
            continue

        current = external_ids.get(label, "")
        if not current:
            external_ids[label] = record.id_bauwerk
        elif record.id_bauwerk and record.id_bauwerk != current:
            logger.debug("Ignoring id %s for building %s (keeping %s)", record.id_bauwerk, label, current)

    labels = tuple(sorted(external_ids.keys(), key=natural_key))
    return BuildingIndex(labels=labels, external_ids=MappingProxyType(external_ids))
