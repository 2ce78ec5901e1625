"""Tests für config.py"""

from pathlib import Path

from src.aks.config import Settings


class TestSettings:
    """Tests für die Einstellungen."""

    def test_defaults(self):
        settings = Settings()
        assert settings.site_prefix == "C1"
        assert settings.section_code == "01"
        assert settings.priority == "mittel"
        assert settings.cost_center_prefix == "99000"
        assert settings.catalog_file.name == "aks_catalog.json"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AKS_CATALOG_FILE", str(tmp_path / "katalog.json"))
        monkeypatch.setenv("AKS_ACCESS_PIN", "4711")
        settings = Settings.from_env()
        assert settings.catalog_file == Path(tmp_path / "katalog.json")
        assert settings.access_pin == "4711"

    def test_from_env_ignores_unset(self, monkeypatch):
        monkeypatch.delenv("AKS_ACCESS_PIN", raising=False)
        assert Settings.from_env().access_pin == "2025"
