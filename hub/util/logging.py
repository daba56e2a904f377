"""Route stdlib logging into Logfire.

uvicorn, SQLAlchemy and httpx log through the stdlib; sending their records
through Logfire keeps them in the same console and traces as our spans.
Call after ``configure_logfire``.
"""

import logging

import logfire

from hub.config import Settings

QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    # SQL echo is only useful while debugging
    quiet_level = logging.INFO if settings.debug else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger("hub").setLevel(level)
