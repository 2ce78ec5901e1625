"""Tab für das Gebäudeverzeichnis."""

import pandas as pd
import streamlit as st

from src.aks.buildings import BuildingIndex
from src.aks.generator import extract_building_number


def render_buildings_tab(buildings: BuildingIndex) -> None:
    """Zeigt alle Gebäude mit externer ID und abgeleiteter Gebäudenummer."""
    st.header("Gebäude")
    st.caption("Gebäudeverzeichnis (nur lesend). Die Gebäudenummer ist die erste Zahl in der Bezeichnung.")

    data = [
        {
            "Gebäude": label,
            "ID Bauwerk": buildings.external_id(label),
            "Gebäudenummer": extract_building_number(label) or "—",
        }
        for label in buildings.labels
    ]
    st.metric("Anzahl Gebäude", len(buildings))
    st.dataframe(pd.DataFrame(data), width="stretch", hide_index=True)
