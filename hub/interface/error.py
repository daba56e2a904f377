"""Interface layer errors and exception handlers.

Domain errors are mapped to HTTP statuses in one place so routes only deal
with authentication and malformed input.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hub.domain.error import (
    BadRequestError,
    DomainError,
    ForbiddenError,
    InternalError,
    NotFoundError,
)


STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    BadRequestError: status.HTTP_400_BAD_REQUEST,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as ``{"detail": message}``."""
    status_code = next(
        (
            code
            for error_type, code in STATUS_BY_ERROR.items()
            if isinstance(exc, error_type)
        ),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
