"""Settings parsing for CORS lists."""

from __future__ import annotations

import pytest

from curation_api.core.config import DEFAULT_CORS_ORIGINS, Settings


def _settings(**overrides) -> Settings:
    return Settings(database_url="sqlite+aiosqlite://", jwt_secret_key="k", **overrides)


def test_cors_defaults_match_frontend():
    settings = _settings()
    assert settings.cors_origins == ["http://localhost:3000"]
    assert settings.cors_allow_methods == ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    assert settings.cors_allow_headers == ["Authorization", "Content-Type"]
    assert settings.cors_allow_credentials is True
    assert settings.api_prefix == "/api/v1"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('["https://a.example", " https://b.example "]', ["https://a.example", "https://b.example"]),
        ("https://a.example, https://b.example", ["https://a.example", "https://b.example"]),
        (["https://a.example", ""], ["https://a.example"]),
        ("", DEFAULT_CORS_ORIGINS),
    ],
)
def test_cors_origins_parsing(raw, expected):
    assert _settings(cors_origins=raw).cors_origins == expected


def test_cors_methods_are_upper_cased():
    assert _settings(cors_allow_methods="get,post").cors_allow_methods == ["GET", "POST"]


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://app.example")
    assert _settings().cors_origins == ["https://app.example"]
