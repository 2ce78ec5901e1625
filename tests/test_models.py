"""Tests für models.py"""

import pytest
from pydantic import ValidationError

from src.aks.models import (
    AksError,
    BuildingRecord,
    CatalogEntry,
    EmptyResultSet,
    FatalLoadError,
    InputRow,
    ResultRow,
    RoomToken,
    UnknownCombination,
    catalog_key,
)


class TestCatalogEntry:
    """Tests für CatalogEntry."""

    def test_from_json_names(self):
        entry = CatalogEntry.model_validate({"groupId": "300", "sub": "10", "code": "AB", "description": "Lüftung"})
        assert entry.group_id == "300"
        assert entry.key == "300||AB"

    def test_numbers_are_coerced_to_text(self):
        entry = CatalogEntry.model_validate({"groupId": 300, "sub": 10, "code": "AB", "description": "Lüftung"})
        assert entry.group_id == "300"
        assert entry.sub == "10"

    def test_whitespace_is_stripped(self):
        entry = CatalogEntry(group_id=" 300 ", sub="10", code=" AB", description="Lüftung ")
        assert entry.group_id == "300"
        assert entry.code == "AB"
        assert entry.description == "Lüftung"

    def test_missing_code_fails(self):
        with pytest.raises(ValidationError):
            CatalogEntry.model_validate({"groupId": "300", "sub": "10", "description": "x"})

    def test_empty_group_fails(self):
        with pytest.raises(ValidationError):
            CatalogEntry(group_id="", sub="10", code="AB")

    def test_entry_is_immutable(self):
        entry = CatalogEntry(group_id="300", sub="10", code="AB")
        with pytest.raises(ValidationError):
            entry.code = "ZU"


class TestBuildingRecord:
    """Tests für BuildingRecord."""

    def test_from_json_names(self):
        record = BuildingRecord.model_validate({"bauwerk": "Gebäude 48", "idBauwerk": "B048"})
        assert record.bauwerk == "Gebäude 48"
        assert record.id_bauwerk == "B048"

    def test_missing_values_default_to_empty(self):
        record = BuildingRecord.model_validate({"bauwerk": None})
        assert record.bauwerk == ""
        assert record.id_bauwerk == ""


class TestInputRow:
    """Tests für InputRow."""

    def test_empty_row(self):
        assert InputRow().is_empty
        assert not InputRow().is_complete

    def test_partial_row(self):
        row = InputRow(group_id="300", room_text="U05")
        assert not row.is_empty
        assert not row.is_complete

    def test_complete_row(self):
        row = InputRow(group_id="300", variant_code="AB", building_label="Gebäude 48", room_text="U05")
        assert row.is_complete

    def test_whitespace_room_text_is_empty(self):
        row = InputRow(group_id="300", variant_code="AB", building_label="Gebäude 48", room_text="  \n ")
        assert not row.is_complete


class TestRoomToken:
    """Tests für RoomToken."""

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            RoomToken(room="U05", quantity=0)


class TestResultRow:
    """Tests für ResultRow."""

    def test_cells_in_export_order(self):
        row = ResultRow(
            group_label="300.10 Lüftung",
            asset_name="Lüftung_ID",
            technical_id="ID",
            glt_code="ID",
            priority="mittel",
            cost_center="9900048",
            building="Gebäude 48",
            room="U06",
            variant_code="AB",
            building_external_id="B048",
        )
        assert row.as_cells() == [
            "300.10 Lüftung", "Lüftung_ID", "ID", "ID", "mittel", "9900048",
            "Gebäude 48", "U06", "AB", "B048", 1,
        ]


class TestErrors:
    """Tests für die Fehlerklassen."""

    def test_unknown_combination_message(self):
        error = UnknownCombination("300", "XX")
        assert error.group_id == "300"
        assert error.variant_code == "XX"
        assert "300||XX" in str(error)

    @pytest.mark.parametrize("error_cls", [FatalLoadError, UnknownCombination, EmptyResultSet])
    def test_errors_are_value_errors(self, error_cls):
        assert issubclass(error_cls, AksError)
        assert issubclass(error_cls, ValueError)

    def test_catalog_key(self):
        assert catalog_key("300", "AB") == "300||AB"
