"""Export der Ergebnistabelle als XLSX und CSV."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from io import BytesIO, StringIO

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from .models import ResultRow

RESULT_HEADERS: list[str] = [
    "Gruppe Technischer Anlagen",
    "Technische Anlage",
    "Techn. Anlagen Nr.",
    "GLT-Code",
    "Anlagenpriorität",
    "Kostenstelle",
    "Gebäude",
    "Raum",
    "Anlagetyp",
    "ID Bauwerk",
    "Menge",
]

SHEET_NAME = "AKS Assets"
XLSX_FILENAME = "aks_assets.xlsx"
CSV_FILENAME = "aks_assets.csv"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIME = "text/csv"

CSV_LINE_TERMINATOR = "\r\n"
MAX_COLUMN_WIDTH = 60


def _cells(row: ResultRow | Sequence[object]) -> list[object]:
    if isinstance(row, ResultRow):
        return list(row.as_cells())
    return list(row)


def to_spreadsheet_bytes(headers: Sequence[str], rows: Iterable[ResultRow | Sequence[object]]) -> bytes:
    """Erzeugt eine Arbeitsmappe mit einem Blatt: Kopfzeile in Zeile 1, danach eine Zeile pro Anlage."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    ws.append(list(headers))
    for cell in ws[1]:
        cell.font = Font(bold=True)

    widths = [len(str(h)) for h in headers]
    for row in rows:
        values = _cells(row)
        ws.append(values)
        for cell in ws[ws.max_row]:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"
        for idx, value in enumerate(values):
            if idx < len(widths):
                widths[idx] = max(widths[idx], len(str(value)))
            else:
                widths.append(len(str(value)))

    for idx, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(idx)].width = min(width + 2, MAX_COLUMN_WIDTH)
    ws.freeze_panes = "A2"

    output = BytesIO()
    wb.save(output)
    return output.getvalue()


def to_csv_text(headers: Sequence[str], rows: Iterable[ResultRow | Sequence[object]]) -> str:
    """Erzeugt CSV-Text (RFC 4180): Zeilen mit CRLF verbunden, Felder mit Komma,
    Anführungszeichen oder Zeilenumbruch in Anführungszeichen.
    """
    output = StringIO()
    writer = csv.writer(output, lineterminator=CSV_LINE_TERMINATOR, quoting=csv.QUOTE_MINIMAL)
    writer.writerow(list(headers))
    for row in rows:
        writer.writerow(["" if value is None else value for value in _cells(row)])

    text = output.getvalue()
    if text.endswith(CSV_LINE_TERMINATOR):
        text = text[: -len(CSV_LINE_TERMINATOR)]
    return text


def to_csv_bytes(headers: Sequence[str], rows: Iterable[ResultRow | Sequence[object]]) -> bytes:
    """CSV als UTF-8 mit BOM, damit Excel die Umlaute korrekt erkennt."""
    return to_csv_text(headers, rows).encode("utf-8-sig")
