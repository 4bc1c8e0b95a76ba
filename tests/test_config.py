"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from urlshortener.core.config import DEFAULT_CODE_ALPHABET, Settings, StoreBackend


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.URL_CODE_LENGTH == 6
    assert settings.URL_CODE_ALPHABET == DEFAULT_CODE_ALPHABET
    assert settings.URL_CODE_MAX_ATTEMPTS == 5
    assert settings.STORE_BACKEND == StoreBackend.SQL
    assert settings.BASE_URL is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.setenv("URL_CODE_LENGTH", "8")

    settings = Settings(_env_file=None)

    assert settings.STORE_BACKEND == StoreBackend.MEMORY
    assert settings.URL_CODE_LENGTH == 8


def test_cors_origins_accepts_comma_separated_string():
    settings = Settings(CORS_ORIGINS="http://a.example, http://b.example")

    assert settings.CORS_ORIGINS == ["http://a.example", "http://b.example"]


def test_base_url_is_normalized():
    assert Settings(BASE_URL="https://sho.rt/").BASE_URL == "https://sho.rt"
    assert Settings(BASE_URL="  ").BASE_URL is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"URL_CODE_LENGTH": 0},
        {"URL_CODE_MAX_ATTEMPTS": 0},
        {"URL_CODE_ALPHABET": "a"},
        {"URL_CODE_ALPHABET": "abcabc"},
    ],
)
def test_rejects_invalid_code_settings(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)
