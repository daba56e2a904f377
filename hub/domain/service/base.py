"""Base service class for domain services."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager

import logfire

from hub.domain.error import DomainError, InternalError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def translate_errors(operation: str, message: str) -> Iterator[None]:
    """Let domain errors through and wrap anything else as InternalError.

    Args:
        operation: Span-style name of the failing operation, logged
        message: Generic message shown to the caller
    """
    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        logfire.error(
            "Unexpected error in {operation}",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise InternalError(message) from e
