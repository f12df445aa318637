"""Tests for application settings."""

import os
from pathlib import Path
from unittest import mock

from product_library.config.settings import Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_default_values(self):
        """Settings have expected defaults."""
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.catalog_path == Path("data/catalog.json")
        assert settings.autosave is True
        assert settings.is_development

    def test_env_override(self):
        """Environment variables override defaults."""
        env = {"CATALOG_FILE": "/tmp/other.json", "AUTOSAVE": "false", "APP_ENV": "Production"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        assert settings.catalog_path == Path("/tmp/other.json")
        assert settings.autosave is False
        assert settings.is_production

    def test_unknown_env_falls_back(self):
        settings = Settings(_env_file=None, app_env="qa")
        assert settings.app_env == "development"

    def test_cors_origins(self):
        assert Settings(_env_file=None, cors_origins='["http://a"]').cors_origins_list == ["http://a"]
        assert Settings(_env_file=None, cors_origins="not json").cors_origins_list == ["*"]
