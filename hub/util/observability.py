"""Logfire setup and instrumentation.

Services emit spans and events directly:

    with logfire.span("membership_service.invite", project_id=str(project_id)):
        logfire.info("Invite issued", target_email=email)

Everything here runs once at startup.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hub.config import ObservabilitySettings, Settings
from hub.util.token import mask_token

SERVICE_NAME = "insighthub-api"
SERVICE_VERSION = "0.1.0"

# Endpoint arguments that carry credentials
REDACTED_ARGUMENTS = frozenset({"authorization", "auth_token"})


def should_send(observability: ObservabilitySettings) -> bool:
    """Explicit setting first, then token presence."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire.

    Console output only unless OBSERVABILITY__LOGFIRE_TOKEN is set or
    OBSERVABILITY__SEND_TO_LOGFIRE is true.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def scrub_request_attributes(
    request: Any, attributes: dict[str, Any]
) -> dict[str, Any]:
    """Strip credentials and invite tokens from FastAPI request spans.

    ``attributes["values"]`` holds the validated endpoint arguments, which
    include the Authorization header and the auth cookie.
    """
    values = {
        name: "[redacted]" if name in REDACTED_ARGUMENTS else value
        for name, value in (attributes.get("values") or {}).items()
    }
    if isinstance(values.get("token"), str):
        values["token"] = mask_token(values["token"])

    scrubbed = {**attributes, "values": values}
    scrubbed["http.route_path"] = request.url.path
    return scrubbed


def instrument_fastapi(app: FastAPI) -> None:
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=scrub_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outgoing calls to the email API."""
    logfire.instrument_httpx()
