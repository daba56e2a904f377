"""Errors raised by domain services.

The API maps each subclass to an HTTP status; see ``hub.interface.error``.
"""


class DomainError(Exception):
    """A request the domain refuses to carry out."""

    pass


class NotFoundError(DomainError):
    """A project, user, membership or token does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the caller lacks the membership or role an action needs."""

    pass


class BadRequestError(DomainError):
    """Raised for invalid input: bad tokens, duplicate acceptance, malformed targets."""

    pass


class InternalError(DomainError):
    """Raised when a store or collaborator fails unexpectedly.

    The message is generic; the cause is chained and logged, never shown to callers.
    """

    pass
