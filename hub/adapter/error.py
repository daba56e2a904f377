"""Errors from outbound integrations."""


class AdapterError(Exception):
    """An external service call failed."""

    pass


class EmailDeliveryError(AdapterError):
    """The email API refused a message or could not be reached.

    ``status_code`` is set when the API answered with an error status.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
