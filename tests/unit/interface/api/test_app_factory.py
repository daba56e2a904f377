"""Unit tests for application assembly."""

import pytest
from fastapi import FastAPI

from hub.interface.api.app import create_app
from hub.util.error import ConfigurationError
from tests.di import build_test_container


def test_default_secret_refused_in_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("AUTH__JWT_SECRET", raising=False)

    with pytest.raises(ConfigurationError) as exc_info:
        create_app()

    assert exc_info.value.setting == "AUTH__JWT_SECRET"


@pytest.mark.asyncio
async def test_production_with_secret(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("AUTH__JWT_SECRET", "a-real-secret")
    container = build_test_container()

    try:
        app = create_app(container)
    finally:
        await container.close()

    assert isinstance(app, FastAPI)
    paths = app.openapi()["paths"]
    assert "/projects/members/verify-invite" in paths
    assert "/projects/{project_id}" in paths


def test_unknown_component_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container({"cache"})
