"""Gemeinsame Fixtures für die Tests."""

import pytest

from src.aks.buildings import build_building_index
from src.aks.catalog import build_catalog_index
from src.aks.config import Settings
from src.aks.context import AksContext
from src.aks.models import BuildingRecord, CatalogEntry


@pytest.fixture
def sample_entries():
    """Erstellt Beispiel-Katalogeinträge für Tests."""
    return [
        CatalogEntry(group_id="300", sub="10", code="AB", description="Lüftung"),
        CatalogEntry(group_id="300", sub="10", code="ZU", description="Zuluftanlage"),
        CatalogEntry(group_id="300", sub="20", code="AB10", description="Abluft groß"),
        CatalogEntry(group_id="300", sub="20", code="AB2", description="Abluft klein"),
        CatalogEntry(group_id="100", sub="20", code="HP", description="Heizungspumpe"),
        CatalogEntry(group_id="20", sub="01", code="X", description=""),
    ]


@pytest.fixture
def sample_buildings():
    """Erstellt Beispielgebäude für Tests."""
    return [
        BuildingRecord(bauwerk="Gebäude 48", id_bauwerk="B048"),
        BuildingRecord(bauwerk="Gebäude 05 (Mensa)", id_bauwerk="B005"),
        BuildingRecord(bauwerk="Gebäude 10", id_bauwerk="B010"),
        BuildingRecord(bauwerk="Gebäude 2", id_bauwerk="B002"),
    ]


@pytest.fixture
def catalog(sample_entries):
    return build_catalog_index(sample_entries)


@pytest.fixture
def buildings(sample_buildings):
    return build_building_index(sample_buildings)


@pytest.fixture
def context(catalog, buildings):
    return AksContext(catalog=catalog, buildings=buildings, settings=Settings())
