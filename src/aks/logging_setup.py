"""Logging-Konfiguration für App und Kommandozeile."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Richtet das Root-Logging einmalig ein.

    Das Level kommt aus dem Argument, sonst aus LOG_LEVEL (Standard: INFO).
    Streamlit führt das Skript bei jeder Interaktion neu aus, daher wird ein
    vorhandener Handler nicht erneut angelegt.
    """
    root = logging.getLogger()
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root.setLevel(resolved)

    if any(getattr(h, "_aks_handler", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._aks_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
