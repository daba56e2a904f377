"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hub.config import AuthSettings, Settings
from hub.interface.api.routes import health, members, projects
from hub.interface.error import register_exception_handlers
from hub.util.di.container import create_container, setup_di
from hub.util.error import ConfigurationError
from hub.util.observability import (
    SERVICE_VERSION,
    instrument_fastapi,
    instrument_httpx,
)

DEFAULT_JWT_SECRET = AuthSettings.model_fields["jwt_secret"].default

# Vite and CRA dev servers
DEV_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]


def allowed_origins(settings: Settings) -> list[str]:
    if settings.environment in ("test", "development"):
        return sorted({settings.frontend_url, *DEV_ORIGINS})
    return [settings.frontend_url]


@asynccontextmanager
async def close_container(app: FastAPI) -> AsyncIterator[None]:
    """Close the container on shutdown; this disposes the database engine."""
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire must already be configured: ``scripts/start_app.py`` does it in
    production and ``tests/conftest.py`` under pytest.

    Args:
        container: DI container. When omitted, the production container is
            built and closed with the app; a passed container stays the
            caller's to close.

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()
    if settings.environment == "production" and (
        settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError(
            "AUTH__JWT_SECRET", "the default secret cannot be used in production"
        )

    instrument_httpx()

    app = FastAPI(
        title="InsightHub API",
        description="Projects, members and email invitations",
        version=SERVICE_VERSION,
        lifespan=close_container if container is None else None,
    )
    instrument_fastapi(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(settings),
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(app, container or create_container())
    register_exception_handlers(app)

    # /projects/members/* is registered before /projects/{project_id}
    app.include_router(health.router)
    app.include_router(members.router)
    app.include_router(projects.router)

    return app
