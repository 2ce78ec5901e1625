"""PIN-Sperre und Farbschema."""

import streamlit as st

from src.aks.config import Settings
from src.utils import is_valid_pin, load_theme, next_theme, save_theme

DARK_THEME_CSS = """
<style>
.stApp { background-color: #111827; color: #e5e7eb; }
.stApp h1, .stApp h2, .stApp h3, .stApp label, .stApp p { color: #e5e7eb; }
</style>
"""


def render_pin_gate(settings: Settings) -> bool:
    """Zeigt die PIN-Abfrage, solange die App gesperrt ist.

    Returns:
        True, wenn die App entsperrt ist
    """
    if st.session_state.get("unlocked", False):
        return True

    st.subheader("🔒 Zugang")
    with st.form("pin_form", clear_on_submit=True):
        entered = st.text_input("PIN", type="password", key="pin_input")
        submitted = st.form_submit_button("Entsperren", type="primary")

    if submitted:
        if is_valid_pin(entered, settings):
            st.session_state.unlocked = True
            st.rerun()
        st.error("Falsche PIN. Bitte erneut versuchen.")
    return False


def apply_theme(settings: Settings) -> None:
    """Wendet das gespeicherte Farbschema an."""
    if "theme" not in st.session_state:
        st.session_state.theme = load_theme(settings)
    if st.session_state.theme == "dark":
        st.markdown(DARK_THEME_CSS, unsafe_allow_html=True)


def render_theme_toggle(settings: Settings) -> None:
    """Button zum Umschalten zwischen hellem und dunklem Farbschema."""
    is_dark = st.session_state.get("theme") == "dark"
    if st.button("☀️ Hell" if is_dark else "🌙 Dunkel", key="theme_toggle"):
        st.session_state.theme = next_theme(st.session_state.theme)
        save_theme(settings, st.session_state.theme)
        st.rerun()
