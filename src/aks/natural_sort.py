"""Natürliche Sortierung für Gruppen, Codes, Gebäude und Anlagennummern.

Vergleicht Zeichenketten so, wie ein Mensch sie liest: Zahlenfolgen nach ihrem Wert
("2" vor "10"), Text ohne Berücksichtigung von Groß-/Kleinschreibung und Akzenten
("Ä" wie "a", "ß" wie "ss").
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

_CHUNK_RE = re.compile(r"([0-9]+)")


def _fold(text: str) -> str:
    """Entfernt Akzente und Groß-/Kleinschreibung."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def natural_key(value: str) -> tuple[tuple[int, int, str], ...]:
    """Sortierschlüssel für natürliche Sortierung.

    Zahlenblöcke werden vor Textblöcken einsortiert.
    """
    key: list[tuple[int, int, str]] = []
    for position, chunk in enumerate(_CHUNK_RE.split(value or "")):
        if not chunk:
            continue
        if position % 2:
            key.append((0, int(chunk), ""))
        else:
            key.append((1, 0, _fold(chunk)))
    return tuple(key)


def natural_compare(a: str, b: str) -> int:
    """Vergleicht zwei Zeichenketten natürlich (-1, 0 oder 1)."""
    key_a, key_b = natural_key(a), natural_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def natural_sorted(values: Iterable[str]) -> list[str]:
    """Sortiert Zeichenketten natürlich und stabil."""
    return sorted(values, key=natural_key)
