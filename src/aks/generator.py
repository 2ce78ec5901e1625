from __future__ import annotations

import re
from dataclasses import dataclass

from .catalog import CatalogIndex
from .config import Settings
from .models import CatalogEntry

_DIGITS_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class GeneratedIds:
    """Kennzeichen für einen Raum: gemeinsamer Ortscode, ein Kennzeichen pro Anlage."""
    entry: CatalogEntry
    location_code: str
    ids: list[str]


def extract_building_number(building_label: str) -> str:
    """Erste Ziffernfolge in der Gebäudebezeichnung ('Gebäude 05 (Mensa)' -> '05').

    Returns:
        Ziffernfolge als Text, leer wenn die Bezeichnung keine Ziffern enthält
    """
    match = _DIGITS_RE.search(building_label or "")
    return match.group(0) if match else ""


def extract_floor(room: str) -> str:
    """Geschoss = erstes Zeichen der Raumbezeichnung ('U06' -> 'U')."""
    return room.strip()[:1]


def build_location_code(building_number: str, room: str, settings: Settings | None = None) -> str:
    """Baut den Ortscode, z.B. 'C1' + '48' + '01' + 'U' + '_U06' -> 'C14801U_U06'."""
    settings = settings or Settings()
    room = room.strip()
    return f"{settings.site_prefix}{building_number}{settings.section_code}{extract_floor(room)}_{room}"


def format_technical_id(location_code: str, entry: CatalogEntry, sequence: int, width: int = 3) -> str:
    return f"{location_code}_{entry.group_id}_{entry.sub}_{entry.code}{sequence:0{width}d}"


def generate_ids(
    catalog: CatalogIndex,
    group_id: str,
    building_label: str,
    room: str,
    variant_code: str,
    quantity: int,
    start: int = 1,
    settings: Settings | None = None,
) -> GeneratedIds:
    """Erzeugt die technischen Anlagennummern für einen Raum.

    Args:
        catalog: Katalog-Index für den Lookup von Gruppe und Anlagetyp
        group_id: Gruppe Technischer Anlagen (z.B. '300')
        building_label: Gebäudebezeichnung, aus der die Gebäudenummer gelesen wird
        room: Raumbezeichnung (z.B. 'U06')
        variant_code: Anlagetyp-Code (z.B. 'AB')
        quantity: Anzahl der Anlagen im Raum
        start: Erste laufende Nummer (Standard: 1)
        settings: Feste Codes; ohne Angabe die Standardwerte

    Returns:
        GeneratedIds mit Katalogeintrag, Ortscode und quantity Kennzeichen in Reihenfolge

    Raises:
        UnknownCombination: Wenn (group_id, variant_code) nicht im Katalog steht
    """
    settings = settings or Settings()
    entry = catalog.get(group_id, variant_code)

    location_code = build_location_code(extract_building_number(building_label), room, settings)
    ids = [
        format_technical_id(location_code, entry, sequence, settings.sequence_width)
        for sequence in range(start, start + max(quantity, 1))
    ]
    return GeneratedIds(entry=entry, location_code=location_code, ids=ids)
