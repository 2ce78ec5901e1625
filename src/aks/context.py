from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .buildings import BuildingIndex, build_building_index
from .catalog import CatalogIndex, build_catalog_index
from .config import Settings
from .data_loading import load_buildings, load_catalog
from .models import FatalLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AksContext:
    """Einmal beim Start geladene, unveränderliche Stammdaten."""
    catalog: CatalogIndex
    buildings: BuildingIndex
    settings: Settings = field(default_factory=Settings)


def load_context(settings: Settings | None = None) -> AksContext:
    """Lädt Katalog und Gebäudeverzeichnis und baut beide Indizes.

    Raises:
        FatalLoadError: Wenn eine der Dateien nicht geladen werden kann
    """
    settings = settings or Settings()
    try:
        catalog = build_catalog_index(load_catalog(settings.catalog_file))
        buildings = build_building_index(load_buildings(settings.buildings_file))
    except FatalLoadError:
        logger.exception("Startup data could not be loaded")
        raise

    logger.info("Context ready: %d catalog entries, %d buildings", len(catalog), len(buildings))
    return AksContext(catalog=catalog, buildings=buildings, settings=settings)
