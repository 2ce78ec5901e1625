from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .config import Settings
from .context import AksContext
from .generator import GeneratedIds, build_location_code, extract_building_number, generate_ids
from .models import EmptyResultSet, InputRow, ResultRow, UnknownCombination, catalog_key
from .natural_sort import natural_key
from .rooms import parse_room_tokens

logger = logging.getLogger(__name__)


class ResultSet:
    """Ergebnisliste einer Generierung (nur Anhängen, Leeren und Sortieren)."""

    def __init__(self, rows: Iterable[ResultRow] = ()):
        self._rows: list[ResultRow] = list(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[ResultRow]:
        return iter(self._rows)

    @property
    def rows(self) -> tuple[ResultRow, ...]:
        return tuple(self._rows)

    def add_row(self, row: ResultRow) -> None:
        self._rows.append(row)

    def clear(self) -> None:
        self._rows.clear()

    def sort(self) -> None:
        """Sortiert nach Gruppe, dann nach Anlagennummer (natürlich, stabil)."""
        self._rows.sort(key=lambda r: (natural_key(r.group_label), natural_key(r.technical_id)))

    def row_count_text(self) -> str:
        return f"{len(self._rows)} Assets generiert"


@dataclass
class GenerationReport:
    """Ergebnis eines Generierungslaufs."""
    results: ResultSet
    failures: list[UnknownCombination] = field(default_factory=list)
    processed_rows: int = 0

    @property
    def has_results(self) -> bool:
        return len(self.results) > 0


def format_group_label(generated: GeneratedIds) -> str:
    """'300.10 Lüftung' aus Gruppe, Untergruppe und Bezeichnung."""
    entry = generated.entry
    return f"{entry.group_id}.{entry.sub} {entry.description}".strip()


def format_asset_name(description: str, technical_id: str) -> str:
    name = f"{description}_{technical_id}"
    return name[1:] if name.startswith("_") else name


def build_result_rows(
    generated: GeneratedIds,
    building_label: str,
    room: str,
    building_external_id: str = "",
    settings: Settings | None = None,
) -> list[ResultRow]:
    """Erzeugt eine Ergebniszeile pro Kennzeichen (Menge jeweils 1)."""
    settings = settings or Settings()
    group_label = format_group_label(generated)
    cost_center = settings.cost_center_prefix + extract_building_number(building_label)

    return [
        ResultRow(
            group_label=group_label,
            asset_name=format_asset_name(generated.entry.description, technical_id),
            technical_id=technical_id,
            glt_code=technical_id,
            priority=settings.priority,
            cost_center=cost_center,
            building=building_label,
            room=room,
            variant_code=generated.entry.code,
            building_external_id=building_external_id,
            quantity=1,
        )
        for technical_id in generated.ids
    ]


def run_generation(
    rows: Iterable[InputRow],
    context: AksContext,
    result_set: ResultSet | None = None,
) -> GenerationReport:
    """Erzeugt alle Anlagen für die Eingabezeilen.

    Die Ergebnisliste wird vorher geleert. Leere und unvollständige Zeilen werden
    übersprungen. Unbekannte Kombinationen überspringen nur den betroffenen Raum.
    Wiederholt sich ein Raum mit gleichem Anlagetyp, wird die laufende Nummer
    fortgesetzt.
    """
    results = result_set if result_set is not None else ResultSet()
    results.clear()
    report = GenerationReport(results=results)
    next_sequence: dict[tuple[str, str], int] = {}

    for row in rows:
        if row.is_empty:
            continue
        if not row.is_complete:
            logger.debug("Skipping incomplete input row: %s", row)
            continue

        group_id = row.group_id.strip()
        variant_code = row.variant_code.strip()
        building_label = row.building_label.strip()
        external_id = context.buildings.external_id(building_label)
        report.processed_rows += 1

        for token in parse_room_tokens(row.room_text, row.default_quantity):
            location_code = build_location_code(extract_building_number(building_label), token.room, context.settings)
            counter_key = (location_code, catalog_key(group_id, variant_code))
            start = next_sequence.get(counter_key, 1)
            try:
                generated = generate_ids(
                    context.catalog, group_id, building_label, token.room, variant_code,
                    quantity=token.quantity, start=start, settings=context.settings,
                )
            except UnknownCombination as e:
                logger.warning("Skipping room %s: %s", token.room, e)
                report.failures.append(e)
                continue

            next_sequence[counter_key] = start + token.quantity
            for result_row in build_result_rows(
                generated, building_label, token.room, external_id, context.settings
            ):
                results.add_row(result_row)

    if results:
        results.sort()
    logger.info("Generation finished: %d assets, %d skipped rooms", len(results), len(report.failures))
    return report


def require_results(results: ResultSet) -> ResultSet:
    """Stellt sicher, dass Ergebnisse vorhanden sind (vor Anzeige und Export).

    Raises:
        EmptyResultSet: Wenn keine Anlagen erzeugt wurden
    """
    if not results:
        raise EmptyResultSet("Keine gültigen Zeilen. Bitte Gruppe, Anlagetyp, Gebäude und Räume ausfüllen.")
    return results
