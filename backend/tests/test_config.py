"""
Palette Picker Backend — Configuration Tests
==============================================

What:  Environment-mode database selection and settings validation.
"""

import pytest
from pydantic import ValidationError

from palette_picker.config import DEFAULT_DATABASE_URLS, Settings
from palette_picker.database import engine_options


def make_settings(**overrides):
    # _env_file=None keeps a developer's .env out of the tests
    return Settings(_env_file=None, **overrides)


class TestDatabaseUrlSelection:

    @pytest.mark.parametrize("environment", ["development", "test", "production"])
    def test_default_url_per_environment(self, monkeypatch, environment):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = make_settings(environment=environment)

        assert settings.resolved_database_url == DEFAULT_DATABASE_URLS[environment]

    def test_explicit_url_wins(self):
        settings = make_settings(
            environment="development",
            database_url="postgresql+asyncpg://db.internal/palettes",
        )

        assert settings.resolved_database_url == "postgresql+asyncpg://db.internal/palettes"

    @pytest.mark.parametrize("prefix", ["postgres://", "postgresql://"])
    def test_platform_urls_use_asyncpg(self, prefix):
        settings = make_settings(database_url=f"{prefix}user:pw@host:5432/db")

        assert settings.database_url == "postgresql+asyncpg://user:pw@host:5432/db"

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(environment="staging")

    def test_environment_is_case_insensitive(self):
        assert make_settings(environment="Production").environment == "production"


class TestServerSettings:

    def test_port_defaults_to_3000(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert make_settings().port == 3000

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "5000")
        assert make_settings().port == 5000

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(log_level="LOUD")


class TestProductionValidation:

    def test_production_requires_database_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = make_settings(environment="production")

        with pytest.raises(ValueError, match="DATABASE_URL"):
            settings.validate_required_for_production()

    def test_production_with_database_url_passes(self):
        settings = make_settings(
            environment="production",
            database_url="postgresql+asyncpg://db/palettes",
        )

        settings.validate_required_for_production()


class TestEngineOptions:

    def test_postgres_gets_pool_sizing(self):
        options = engine_options("postgresql+asyncpg://localhost/palette_picker")

        assert "pool_size" in options
        assert options["pool_recycle"] == 3600

    def test_sqlite_keeps_default_pool(self):
        options = engine_options("sqlite+aiosqlite:///./test.db")

        assert "pool_size" not in options
        assert "max_overflow" not in options
