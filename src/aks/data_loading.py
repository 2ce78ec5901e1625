"""Laden der Katalog- und Gebäudedaten aus JSON-Dateien."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import BuildingRecord, CatalogEntry, FatalLoadError

logger = logging.getLogger(__name__)


def _read_json_list(file_path: Path) -> list[Any]:
    """Liest eine JSON-Datei, die eine Liste von Datensätzen enthält.

    Raises:
        FatalLoadError: Wenn die Datei fehlt, kein gültiges JSON ist oder keine Liste enthält
    """
    if not file_path.exists():
        raise FatalLoadError(f"Cannot load {file_path.name}: file not found ({file_path})")

    try:
        with open(file_path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FatalLoadError(f"Cannot load {file_path.name}: {e}") from e

    if not isinstance(data, list):
        raise FatalLoadError(f"Cannot load {file_path.name}: expected a list of records")
    return data


def parse_catalog_records(data: list[Any], source: str = "catalog") -> list[CatalogEntry]:
    """Validiert rohe Katalogdatensätze.

    Ein ungültiger Datensatz macht den ganzen Katalog unbrauchbar.
    """
    entries: list[CatalogEntry] = []
    for position, record in enumerate(data):
        try:
            entries.append(CatalogEntry.model_validate(record))
        except ValidationError as e:
            raise FatalLoadError(f"Invalid record #{position} in {source}: {e}") from e

    if not entries:
        raise FatalLoadError(f"No catalog entries found in {source}")
    return entries


def parse_building_records(data: list[Any], source: str = "buildings") -> list[BuildingRecord]:
    """Validiert rohe Gebäudedatensätze.

    Ungültige Datensätze und Datensätze ohne Bezeichnung werden übersprungen.
    """
    records: list[BuildingRecord] = []
    for position, record in enumerate(data):
        try:
            building = BuildingRecord.model_validate(record)
        except ValidationError as e:
            logger.warning("Skipping invalid building record #%d in %s: %s", position, source, e)
            continue
        if not building.bauwerk:
            continue
        records.append(building)

    if not records:
        raise FatalLoadError(f"No buildings found in {source}")
    return records


def load_catalog(file_path: Path) -> list[CatalogEntry]:
    """Lädt den AKS-Katalog (aks_catalog.json)."""
    entries = parse_catalog_records(_read_json_list(file_path), source=file_path.name)
    logger.info("Loaded %d catalog entries from %s", len(entries), file_path)
    return entries


def load_buildings(file_path: Path) -> list[BuildingRecord]:
    """Lädt das Gebäudeverzeichnis."""
    records = parse_building_records(_read_json_list(file_path), source=file_path.name)
    logger.info("Loaded %d building records from %s", len(records), file_path)
    return records
