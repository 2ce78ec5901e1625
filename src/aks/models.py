from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Fehler
# =============================================================================

class AksError(ValueError):
    """Basisklasse für alle Fehler des AKS-Generators."""


class FatalLoadError(AksError):
    """Katalog- oder Gebäudedaten konnten beim Start nicht geladen werden."""


class UnknownCombination(AksError):
    """Kombination aus Gruppe und Anlagetyp ist nicht im Katalog enthalten."""

    def __init__(self, group_id: str, variant_code: str):
        self.group_id = group_id
        self.variant_code = variant_code
        super().__init__(f"Unknown AKS combination: {group_id}||{variant_code}")


class MalformedToken(AksError):
    """Raumangabe entspricht nicht dem Muster 'Raum' oder 'Raum xN'.

    Wird vom Parser nicht geworfen: ungültige Angaben werden still übersprungen.
    """


class EmptyResultSet(AksError):
    """Es wurden keine Anlagen erzeugt, daher ist kein Export möglich."""


# =============================================================================
# Stammdaten
# =============================================================================

class CatalogEntry(BaseModel):
    """Anlagetyp aus dem AKS-Katalog.

    Eindeutig über (Gruppe, Code). Zahlen aus der JSON-Datei werden als Text übernommen.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    group_id: str = Field(alias="groupId", min_length=1, description="Gruppe Technischer Anlagen")
    sub: str = Field(description="Untergruppe")
    code: str = Field(min_length=1, description="Anlagetyp-Code")
    description: str = Field(default="", description="Bezeichnung des Anlagetyps")

    @field_validator("group_id", "sub", "code", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        if isinstance(value, str):
            return value.strip()
        if value is None:
            return ""
        return value

    @property
    def key(self) -> str:
        return catalog_key(self.group_id, self.code)


class BuildingRecord(BaseModel):
    """Eintrag aus dem Gebäudeverzeichnis."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    bauwerk: str = Field(default="", description="Gebäudebezeichnung (z.B. 'Gebäude 48')")
    id_bauwerk: str = Field(default="", alias="idBauwerk", description="Externe Gebäude-ID")

    @field_validator("bauwerk", "id_bauwerk", mode="before")
    @classmethod
    def strip_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value


# =============================================================================
# Eingabe und Ergebnis
# =============================================================================

class InputRow(BaseModel):
    """Eine Eingabezeile aus dem Formular."""
    group_id: str = ""
    variant_code: str = ""
    building_label: str = ""
    room_text: str = Field(default="", description="Räume, getrennt durch Zeilenumbruch, Komma oder Semikolon")
    default_quantity: int | str | None = Field(default=1, description="Menge für Räume ohne 'xN'")

    @property
    def is_empty(self) -> bool:
        return not (self.group_id.strip() or self.variant_code.strip()
                    or self.building_label.strip() or self.room_text.strip())

    @property
    def is_complete(self) -> bool:
        return bool(self.group_id.strip() and self.variant_code.strip()
                    and self.building_label.strip() and self.room_text.strip())


class RoomToken(BaseModel):
    """Raum mit Anzahl der Anlagen."""
    model_config = ConfigDict(frozen=True)

    room: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)


class ResultRow(BaseModel):
    """Eine generierte Anlage (eine Zeile der Ergebnistabelle)."""
    model_config = ConfigDict(frozen=True)

    group_label: str
    asset_name: str
    technical_id: str
    glt_code: str
    priority: str
    cost_center: str
    building: str
    room: str
    variant_code: str
    building_external_id: str = ""
    quantity: int = 1

    def as_cells(self) -> list[str | int]:
        """Gibt die Werte in Spaltenreihenfolge der Exporte zurück."""
        return [
            self.group_label,
            self.asset_name,
            self.technical_id,
            self.glt_code,
            self.priority,
            self.cost_center,
            self.building,
            self.room,
            self.variant_code,
            self.building_external_id,
            self.quantity,
        ]


# =============================================================================
# Hilfsfunktionen
# =============================================================================

def catalog_key(group_id: str, code: str) -> str:
    """Schlüssel 'Gruppe||Code' für den Katalog-Lookup."""
    return f"{group_id}||{code}"
