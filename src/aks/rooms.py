"""Parser für Raumangaben wie 'U05', 'U06 x4' oder 'E16 x2; E23 x3'."""

from __future__ import annotations

import re

from .models import RoomToken

_SEPARATOR_RE = re.compile(r"[\n,;]+")
_TOKEN_RE = re.compile(r"^(\S+)(?:\s+x([0-9]+))?$", re.IGNORECASE)


def coerce_quantity(value: int | str | None) -> int:
    """Wandelt eine Mengenangabe in eine ganze Zahl >= 1 um (Fallback: 1)."""
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        quantity = value
    else:
        try:
            quantity = int(str(value).strip())
        except ValueError:
            return 1
    return quantity if quantity >= 1 else 1


def parse_room_tokens(raw: str, default_quantity: int | str | None = 1) -> list[RoomToken]:
    """Zerlegt den Freitext in Räume mit Menge.

    Trennzeichen sind Zeilenumbruch, Komma und Semikolon. Jeder Eintrag ist ein Raum
    ohne Leerzeichen, optional gefolgt von ' xN'. Einträge, die nicht passen, werden
    übersprungen. Ohne 'xN' gilt die Standardmenge.
    """
    fallback = coerce_quantity(default_quantity)
    tokens: list[RoomToken] = []

    for piece in _SEPARATOR_RE.split(raw or ""):
        piece = piece.strip()
        if not piece:
            continue

        match = _TOKEN_RE.match(piece)
        if not match:
            continue

        room, explicit = match.groups()
        quantity = coerce_quantity(explicit) if explicit else fallback
        tokens.append(RoomToken(room=room, quantity=quantity))

    return tokens
