"""Gemeinsame Hilfsfunktionen für die App."""

import json
import logging

import streamlit as st

from src.aks.config import Settings
from src.aks.context import AksContext, load_context

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


@st.cache_resource(show_spinner="Lade Katalog und Gebäudeverzeichnis...")
def get_context(settings: Settings) -> AksContext:
    """Lädt Katalog und Gebäude einmal pro Prozess.

    Raises:
        FatalLoadError: Wenn die Stammdaten nicht geladen werden können
    """
    return load_context(settings)


def is_valid_pin(entered: str | None, settings: Settings) -> bool:
    """Vergleicht die eingegebene PIN (ohne Leerzeichen am Rand) mit der konfigurierten."""
    return (entered or "").strip() == settings.access_pin


def load_theme(settings: Settings) -> str:
    """Liest das gespeicherte Farbschema oder gibt das Standardschema zurück."""
    file_path = settings.preferences_file
    if not file_path.exists():
        return settings.default_theme

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Cannot read theme preference: %s", e)
        return settings.default_theme

    theme = data.get(settings.theme_storage_key) if isinstance(data, dict) else None
    return theme if theme in THEMES else settings.default_theme


def save_theme(settings: Settings, theme: str) -> None:
    """Speichert das Farbschema. Fehler werden nur protokolliert."""
    file_path = settings.preferences_file
    data: dict = {}
    try:
        if file_path.exists():
            with open(file_path, encoding="utf-8") as f:
                loaded = json.load(f)
            if isinstance(loaded, dict):
                data = loaded
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable preferences file: %s", e)

    data[settings.theme_storage_key] = theme
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.warning("Cannot persist theme preference: %s", e)


def next_theme(theme: str) -> str:
    return "light" if theme == "dark" else "dark"
