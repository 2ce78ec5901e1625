"""Tests für natural_sort.py"""

from src.aks.natural_sort import natural_compare, natural_key, natural_sorted


class TestNaturalSort:
    """Tests für die natürliche Sortierung."""

    def test_numbers_compare_by_value(self):
        assert natural_sorted(["10", "2", "1"]) == ["1", "2", "10"]

    def test_numbers_inside_text(self):
        assert natural_sorted(["U10", "U2", "E16"]) == ["E16", "U2", "U10"]

    def test_case_insensitive(self):
        assert natural_compare("ab", "AB") == 0
        assert natural_sorted(["b", "A", "c"]) == ["A", "b", "c"]

    def test_umlauts_compare_like_base_letters(self):
        assert natural_compare("Ä", "a") == 0
        assert natural_sorted(["Zentrale", "Ölheizung", "Abluft"]) == ["Abluft", "Ölheizung", "Zentrale"]

    def test_sharp_s(self):
        assert natural_compare("Straße", "STRASSE") == 0

    def test_digits_before_letters(self):
        assert natural_sorted(["A", "1"]) == ["1", "A"]

    def test_compare_results(self):
        assert natural_compare("2", "10") == -1
        assert natural_compare("10", "2") == 1

    def test_stable_for_equal_keys(self):
        values = ["ab", "AB", "Ab"]
        assert natural_sorted(values) == values

    def test_empty_string(self):
        assert natural_key("") == ()
        assert natural_sorted(["b", ""]) == ["", "b"]

    def test_fullwidth_digits_sort_as_text(self):
        assert natural_key("４８") == ((1, 0, "48"),)
