"""Tests for configuration helpers."""
from pathlib import Path

from bijbel_api.config import PACKAGE_DATA_DIR, Settings


def test_defaults_point_at_packaged_data():
    settings = Settings()

    assert settings.data_dir == PACKAGE_DATA_DIR
    assert settings.books_catalog_path == PACKAGE_DATA_DIR / "books.json"
    assert settings.crossrefs_dir == PACKAGE_DATA_DIR / "crossrefs"
    assert settings.cache_enabled is True


def test_data_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CACHE_ENABLED", "false")

    settings = Settings()

    assert settings.data_dir == Path(tmp_path)
    assert settings.books_dir == Path(tmp_path) / "books"
    assert settings.cache_enabled is False


def test_allowed_origins_default_allows_all(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    assert Settings().allowed_origins == ["*"]


def test_allowed_origins_are_split(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://bijbel.example.nl, http://localhost:4173,")

    assert Settings().allowed_origins == ["https://bijbel.example.nl", "http://localhost:4173"]
