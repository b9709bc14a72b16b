"""
Tests for the configuration layer and startup validation.

Run:  python -m pytest core/tests/test_config.py -v
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from core.config import validators
from quill.config import (
    AppConfig,
    ContentConfig,
    DatabaseConfig,
    SecurityConfig,
)


class TestContentConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("POSTS_DEFAULT_PAGE_SIZE", raising=False)
        monkeypatch.delenv("POSTS_TRACK_VIEWS", raising=False)
        content = ContentConfig()
        assert content.default_page_size == 10
        assert content.track_views is True

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("POSTS_DEFAULT_PAGE_SIZE", "20")
        monkeypatch.setenv("POSTS_TRACK_VIEWS", "false")
        content = ContentConfig()
        assert content.default_page_size == 20
        assert content.track_views is False

    def test_non_numeric_page_size_falls_back(self, monkeypatch):
        monkeypatch.setenv("POSTS_DEFAULT_PAGE_SIZE", "lots")
        assert ContentConfig().default_page_size == 10


class TestDatabaseConfig:
    def test_sqlite_by_default(self):
        db = DatabaseConfig(url="sqlite:///db.sqlite3", name="db.sqlite3").as_django()
        assert db == {"ENGINE": "django.db.backends.sqlite3", "NAME": "db.sqlite3"}

    def test_postgres_url(self):
        db = DatabaseConfig(url="postgres://db/quill", name="quill", host="db").as_django()
        assert db["ENGINE"] == "django.db.backends.postgresql"
        assert db["NAME"] == "quill"
        assert db["HOST"] == "db"


class TestAppConfigValidate:
    def test_production_flags_dev_key(self):
        cfg = AppConfig(
            environment="production",
            debug=False,
            security=SecurityConfig(secret_key="django-insecure-x"),
        )
        assert "CRITICAL: SECRET_KEY is a development key" in cfg.validate()

    def test_bad_page_size_is_critical(self):
        cfg = AppConfig(environment="development", content=ContentConfig(default_page_size=0))
        assert "CRITICAL: POSTS_DEFAULT_PAGE_SIZE must be a positive integer" in cfg.validate()

    def test_development_skips_production_checks(self):
        cfg = AppConfig(
            environment="development",
            debug=True,
            security=SecurityConfig(secret_key="django-insecure-x"),
            content=ContentConfig(default_page_size=10, track_views=True),
        )
        assert cfg.validate() == []


class TestStartupValidation:
    def test_production_critical_raises(self, monkeypatch):
        cfg = AppConfig(
            environment="production",
            debug=False,
            security=SecurityConfig(secret_key="django-insecure-x"),
        )
        monkeypatch.setattr("quill.config.config", cfg)
        with pytest.raises(ImproperlyConfigured):
            validators.validate_config_on_startup()

    def test_development_only_logs(self, monkeypatch):
        cfg = AppConfig(environment="development", content=ContentConfig(default_page_size=0))
        monkeypatch.setattr("quill.config.config", cfg)
        validators.validate_config_on_startup()
