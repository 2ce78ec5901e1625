"""Tests für catalog.py"""

import pytest

from src.aks.catalog import build_catalog_index, sort_group_ids
from src.aks.models import CatalogEntry, UnknownCombination


class TestBuildCatalogIndex:
    """Tests für den Katalog-Index."""

    def test_lookup_by_group_and_code(self, catalog):
        entry = catalog.get("300", "AB")
        assert entry.description == "Lüftung"
        assert entry.sub == "10"

    def test_unknown_combination_raises(self, catalog):
        with pytest.raises(UnknownCombination, match="300\\|\\|XX"):
            catalog.get("300", "XX")

    def test_find_returns_none(self, catalog):
        assert catalog.find("999", "AB") is None

    def test_variants_sorted_naturally(self, catalog):
        codes = [e.code for e in catalog.variants("300")]
        assert codes == ["AB", "AB2", "AB10", "ZU"]

    def test_variants_of_unknown_group(self, catalog):
        assert catalog.variants("999") == ()

    def test_group_ids_numeric(self, catalog):
        assert catalog.group_ids == ("20", "100", "300")

    def test_len(self, catalog, sample_entries):
        assert len(catalog) == len(sample_entries)

    def test_duplicate_key_last_wins(self):
        index = build_catalog_index([
            CatalogEntry(group_id="300", sub="10", code="AB", description="alt"),
            CatalogEntry(group_id="300", sub="10", code="AB", description="neu"),
        ])
        assert index.get("300", "AB").description == "neu"
        assert len(index) == 1

    def test_index_is_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.by_key["300||NEW"] = None


class TestSortGroupIds:
    """Tests für die Sortierung der Gruppen."""

    def test_numeric_sort(self):
        assert sort_group_ids(["300", "100", "120", "110"]) == ["100", "110", "120", "300"]

    def test_fallback_to_natural_sort(self):
        assert sort_group_ids(["B10", "300", "B2", "a1"]) == ["300", "a1", "B2", "B10"]

    def test_empty(self):
        assert sort_group_ids([]) == []
