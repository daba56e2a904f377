"""Unit tests for settings."""

import pytest

from hub.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ENVIRONMENT", "HOST", "PORT", "FRONTEND_HOST"):
        monkeypatch.delenv(name, raising=False)


def test_local_urls():
    settings = Settings(_env_file=None)

    assert settings.base_url == "http://localhost:8080"
    assert settings.frontend_url == "http://localhost:5173"
    assert settings.invite_url == "http://localhost:5173/projects/invite?token="


def test_production_urls():
    settings = Settings(
        _env_file=None,
        environment="production",
        host="api.insighthub.app",
        frontend_host="insighthub.app",
    )

    assert settings.base_url == "https://api.insighthub.app"
    assert settings.invite_url == "https://insighthub.app/projects/invite?token="


def test_nested_env(monkeypatch):
    monkeypatch.setenv("INVITATIONS__TOKEN_TTL_DAYS", "3")
    monkeypatch.setenv("AUTH__JWT_SECRET", "s3cret")

    settings = Settings(_env_file=None)

    assert settings.invitations.token_ttl_days == 3
    assert settings.auth.jwt_secret == "s3cret"
    assert settings.auth.jwt_refresh_expiry_minutes == 10080
