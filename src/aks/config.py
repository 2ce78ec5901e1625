"""Einstellungen des AKS-Generators.

Feste Codes für die Kennzeichnung sowie Dateipfade. Pfade und PIN können über
Umgebungsvariablen (AKS_*) überschrieben werden.
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class Settings(BaseModel):
    """Konfiguration für Kennzeichnung, Datenquellen und Oberfläche."""
    model_config = ConfigDict(frozen=True)

    site_prefix: str = Field(default="C1", description="Liegenschaftskennung am Anfang des Ortscodes")
    section_code: str = Field(default="01", description="Fester Bauteil-Code im Ortscode")
    sequence_width: int = Field(default=3, ge=1, description="Stellen der laufenden Nummer")
    priority: str = Field(default="mittel", description="Anlagenpriorität für alle Anlagen")
    cost_center_prefix: str = Field(default="99000", description="Präfix der Kostenstelle vor der Gebäudenummer")

    catalog_file: Path = Field(default=DATA_DIR / "aks_catalog.json")
    buildings_file: Path = Field(default=DATA_DIR / "buildings.json")

    access_pin: str = Field(default="2025", description="PIN zum Entsperren der Oberfläche")
    preferences_file: Path = Field(default=Path(".aks_preferences.json"))
    theme_storage_key: str = "aks-theme"
    default_theme: str = "light"

    @classmethod
    def from_env(cls) -> "Settings":
        """Erzeugt die Einstellungen, überschrieben durch gesetzte Umgebungsvariablen."""
        overrides: dict[str, str] = {}
        env_map = {
            "AKS_CATALOG_FILE": "catalog_file",
            "AKS_BUILDINGS_FILE": "buildings_file",
            "AKS_ACCESS_PIN": "access_pin",
            "AKS_PREFERENCES_FILE": "preferences_file",
        }
        for env_name, field_name in env_map.items():
            value = os.getenv(env_name)
            if value:
                overrides[field_name] = value
        return cls(**overrides)
