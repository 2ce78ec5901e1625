"""Tab für den AKS-Katalog."""

import pandas as pd
import streamlit as st

from src.aks.catalog import CatalogIndex


def _create_catalog_dataframe(catalog: CatalogIndex, group_id: str | None) -> pd.DataFrame:
    group_ids = [group_id] if group_id else list(catalog.group_ids)
    data = []
    for gid in group_ids:
        for entry in catalog.variants(gid):
            data.append({
                "Gruppe": entry.group_id,
                "Untergruppe": entry.sub,
                "Anlagetyp": entry.code,
                "Bezeichnung": entry.description,
            })
    return pd.DataFrame(data, columns=["Gruppe", "Untergruppe", "Anlagetyp", "Bezeichnung"])


def render_catalog_tab(catalog: CatalogIndex) -> None:
    """Zeigt den geladenen Katalog, optional gefiltert nach Gruppe."""
    st.header("AKS-Katalog")
    st.caption("Gruppen und Anlagetypen aus aks_catalog.json (nur lesend).")

    col1, col2 = st.columns([1, 3])
    with col1:
        group_id = st.selectbox(
            "Gruppe",
            options=[""] + list(catalog.group_ids),
            format_func=lambda g: g or "Alle Gruppen",
            key="catalog_group_filter",
        )
    with col2:
        st.metric("Anlagetypen", len(catalog.variants(group_id)) if group_id else len(catalog))

    st.dataframe(_create_catalog_dataframe(catalog, group_id), width="stretch", hide_index=True)
