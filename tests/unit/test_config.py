"""Unit tests for core.config."""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings


class TestSettingsFromEnv:

    def test_defaults(self, monkeypatch):
        for name in (
            "OPENAI_API_KEY",
            "OPENAI_BASE_URL",
            "OPENAI_MODEL",
            "OPENAI_TIMEOUT",
            "REQUIREMENTS_SCHEMA_VARIANT",
            "PORT",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.openai_api_key == ""
        assert settings.openai_base_url == "https://api.openai.com/v1"
        assert settings.openai_model == "gpt-5"
        assert settings.openai_timeout == 180.0
        assert settings.schema_variant == "strict"
        assert settings.port == 5000

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env-key")
        monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("OPENAI_TIMEOUT", "42")
        monkeypatch.setenv("REQUIREMENTS_SCHEMA_VARIANT", "permissive")
        monkeypatch.setenv("PORT", "8123")

        settings = Settings.from_env()

        assert settings.openai_api_key == "sk-env-key"
        assert settings.openai_base_url == "http://localhost:8080/v1"
        assert settings.openai_model == "gpt-4o-mini"
        assert settings.openai_timeout == 42.0
        assert settings.schema_variant == "permissive"
        assert settings.port == 8123

    def test_rejects_unknown_schema_variant(self, monkeypatch):
        monkeypatch.setenv("REQUIREMENTS_SCHEMA_VARIANT", "loose")
        with pytest.raises(ValidationError):
            Settings.from_env()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_settings_fields():
    assert set(Settings.model_fields) == {
        "app_name",
        "app_version",
        "environment",
        "host",
        "port",
        "openai_api_key",
        "openai_base_url",
        "openai_model",
        "openai_timeout",
        "schema_variant",
    }
