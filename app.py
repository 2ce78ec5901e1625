import streamlit as st

from src.aks.config import Settings
from src.aks.context import AksContext
from src.aks.logging_setup import configure_logging
from src.aks.models import FatalLoadError
from src.ui.access import apply_theme, render_pin_gate, render_theme_toggle
from src.ui.tab_buildings import render_buildings_tab
from src.ui.tab_catalog import render_catalog_tab
from src.ui.tab_generator import render_generator_tab
from src.utils import get_context

st.set_page_config(page_title="AKS-Generator", layout="wide")


# ============================================================================
# UI-Komponenten: Sidebar
# ============================================================================

def render_sidebar(context: AksContext, settings: Settings) -> None:
    """Rendert die Sidebar mit Übersicht und Farbschema."""
    with st.sidebar:
        st.header("Übersicht")
        st.metric("Anlagetypen im Katalog", len(context.catalog))
        st.metric("Gruppen", len(context.catalog.group_ids))
        st.metric("Gebäude", len(context.buildings))
        if "results" in st.session_state:
            st.metric("Generierte Assets", len(st.session_state.results))

        st.divider()
        render_theme_toggle(settings)


# ============================================================================
# Hauptanwendung
# ============================================================================

def main() -> None:
    """Hauptfunktion der Streamlit-App."""
    configure_logging()
    settings = Settings.from_env()
    apply_theme(settings)

    st.title("🏷️ AKS-Generator")
    st.caption("Anlagenkennzeichen für technische Anlagen in Gebäuden erzeugen")

    if not render_pin_gate(settings):
        return

    try:
        context = get_context(settings)
    except FatalLoadError as e:
        st.error(f"Fehler beim Laden der Stammdaten: {e}")
        st.stop()

    render_sidebar(context, settings)

    tab1, tab2, tab3, tab4 = st.tabs(["⚙️ Generator", "📚 Katalog", "🏢 Gebäude", "🔍 Debug"])

    with tab1:
        render_generator_tab(context)

    with tab2:
        render_catalog_tab(context.catalog)

    with tab3:
        render_buildings_tab(context.buildings)

    with tab4:
        st.header("Debug-Informationen")
        st.json({
            "settings": settings.model_dump(mode="json"),
            "group_ids": list(context.catalog.group_ids),
            "buildings": dict(context.buildings.external_ids),
        })


if __name__ == "__main__":
    main()
