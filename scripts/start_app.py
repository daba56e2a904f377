#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from hub.config import Settings
from hub.util.logging import setup_logging
from hub.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Logfire first so the logging handler has somewhere to send records
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting insighthub-api", port=settings.port)
    try:
        uvicorn.run(
            "hub.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            log_config=None,
        )
    except Exception as e:
        logfire.error(
            "Startup failed: {error}",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=True,
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
