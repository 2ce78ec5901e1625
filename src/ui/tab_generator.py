"""Tab für die Generierung der AKS-Kennzeichen."""

import pandas as pd
import streamlit as st

from src.aks.context import AksContext
from src.aks.export import (
    CSV_FILENAME,
    CSV_MIME,
    RESULT_HEADERS,
    XLSX_FILENAME,
    XLSX_MIME,
    to_csv_bytes,
    to_spreadsheet_bytes,
)
from src.aks.models import EmptyResultSet, InputRow
from src.aks.results import ResultSet, run_generation, require_results

ROOM_PLACEHOLDER = "U05\nU06 x4\nU08 x2\nE16 x2\nE23 x3"


# ============================================================================
# Session State
# ============================================================================
def init_generator_state() -> None:
    """Initialisiert Eingabezeilen und Ergebnisliste im Session State."""
    if "input_row_ids" not in st.session_state:
        st.session_state.input_row_ids = [0]
        st.session_state.next_input_row_id = 1
    if "results" not in st.session_state:
        st.session_state.results = ResultSet()


def add_input_row() -> None:
    st.session_state.input_row_ids.append(st.session_state.next_input_row_id)
    st.session_state.next_input_row_id += 1


def remove_input_row(row_id: int) -> None:
    st.session_state.input_row_ids.remove(row_id)
    for name in ("group", "variant", "building", "rooms", "qty"):
        st.session_state.pop(f"row_{row_id}_{name}", None)


def _drop_stale_choice(key: str, options: list[str]) -> None:
    """Entfernt eine Auswahl, die nicht mehr in den Optionen enthalten ist."""
    if key in st.session_state and st.session_state[key] not in options:
        del st.session_state[key]


# ============================================================================
# Eingabezeilen
# ============================================================================
def render_input_row(row_id: int, context: AksContext) -> InputRow:
    """Zeigt eine Eingabezeile und gibt ihre aktuellen Werte zurück."""
    catalog = context.catalog
    cols = st.columns([1.2, 2, 2, 2.5, 0.8, 0.4])

    with cols[0]:
        group_id = st.selectbox(
            "Gruppe",
            options=[""] + list(catalog.group_ids),
            format_func=lambda g: g or "-- Gruppe wählen --",
            key=f"row_{row_id}_group",
        )

    variants = {e.code: e for e in catalog.variants(group_id)} if group_id else {}
    variant_options = [""] + list(variants.keys())
    _drop_stale_choice(f"row_{row_id}_variant", variant_options)

    with cols[1]:
        variant_code = st.selectbox(
            "Anlagetyp",
            options=variant_options,
            format_func=lambda c: f"{c} – {variants[c].description}" if c else "-- Anlagetyp wählen --",
            key=f"row_{row_id}_variant",
        )

    with cols[2]:
        building_label = st.selectbox(
            "Gebäude",
            options=[""] + list(context.buildings.labels),
            format_func=lambda b: b or "-- Gebäude wählen --",
            key=f"row_{row_id}_building",
        )

    with cols[3]:
        room_text = st.text_area(
            "Räume",
            placeholder=ROOM_PLACEHOLDER,
            height=120,
            key=f"row_{row_id}_rooms",
            help="Ein Raum pro Zeile (oder durch Komma/Semikolon getrennt), optional mit Menge, z.B. 'U06 x4'",
        )

    with cols[4]:
        quantity = st.number_input("Menge", min_value=1, value=1, step=1, key=f"row_{row_id}_qty")

    with cols[5]:
        st.write("")
        if st.button("🗑️", key=f"row_{row_id}_delete", help="Zeile entfernen"):
            remove_input_row(row_id)
            st.rerun()

    return InputRow(
        group_id=group_id or "",
        variant_code=variant_code or "",
        building_label=building_label or "",
        room_text=room_text or "",
        default_quantity=int(quantity),
    )


def render_input_rows(context: AksContext) -> list[InputRow]:
    """Zeigt alle Eingabezeilen."""
    rows = []
    for row_id in list(st.session_state.input_row_ids):
        rows.append(render_input_row(row_id, context))
        st.divider()
    return rows


# ============================================================================
# Generierung und Ergebnis
# ============================================================================
def handle_generate(rows: list[InputRow], context: AksContext) -> None:
    """Führt die Generierung aus und meldet Fehler im UI."""
    report = run_generation(rows, context, st.session_state.results)

    try:
        require_results(report.results)
    except EmptyResultSet as e:
        st.error(str(e))
        return

    if report.failures:
        skipped = ", ".join(f"{e.group_id}/{e.variant_code}" for e in report.failures)
        st.warning(f"{len(report.failures)} Raum-Angabe(n) übersprungen (unbekannte Kombination: {skipped}).")


def _create_results_dataframe(results: ResultSet) -> pd.DataFrame:
    return pd.DataFrame([row.as_cells() for row in results], columns=RESULT_HEADERS)


def render_downloads(results: ResultSet) -> None:
    """Zeigt die Download-Buttons für XLSX und CSV."""
    try:
        require_results(results)
    except EmptyResultSet:
        st.info("Keine Daten zum Herunterladen.")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "📥 Excel herunterladen",
            data=to_spreadsheet_bytes(RESULT_HEADERS, results),
            file_name=XLSX_FILENAME,
            mime=XLSX_MIME,
            key="download_xlsx",
        )
    with col2:
        st.download_button(
            "📥 CSV herunterladen",
            data=to_csv_bytes(RESULT_HEADERS, results),
            file_name=CSV_FILENAME,
            mime=CSV_MIME,
            key="download_csv",
        )


def render_results(results: ResultSet) -> None:
    """Zeigt die Ergebnistabelle mit Anzahl und Downloads."""
    st.subheader("📋 Ergebnis")
    st.caption(results.row_count_text())

    if results:
        st.dataframe(_create_results_dataframe(results), width="stretch", hide_index=True)

    render_downloads(results)


def render_generator_tab(context: AksContext) -> None:
    """Rendert den kompletten Generator-Tab."""
    init_generator_state()
    st.header("AKS-Kennzeichen generieren")
    st.caption("Gruppe, Anlagetyp, Gebäude und Räume wählen. Menge pro Raum mit 'xN' angeben.")

    rows = render_input_rows(context)

    col1, col2, col3 = st.columns([1, 1, 1])
    with col1:
        if st.button("➕ Zeile hinzufügen", key="add_input_row"):
            add_input_row()
            st.rerun()
    with col2:
        generate = st.button("⚙️ Generieren", type="primary", key="generate")
    with col3:
        if st.button("🧹 Ergebnisse leeren", key="clear_results"):
            st.session_state.results.clear()

    if generate:
        handle_generate(rows, context)

    st.divider()
    render_results(st.session_state.results)
