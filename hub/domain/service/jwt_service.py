"""Caller identity from bearer tokens."""

import logfire

from hub.config import AuthSettings
from hub.util.jwt import JWTError, TokenPayload, decode_token

from .base import Service


class JWTService(Service):
    """Verifies the JWTs that identify API callers.

    Tokens are signed by the identity service; ``scripts/issue_token.py``
    signs them for local use.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Secret, algorithm and lifetimes
        """
        self.auth_settings = auth_settings

    def verify_access_token(self, token: str) -> TokenPayload:
        """Verify a token presented with an API request.

        Args:
            token: Encoded JWT

        Returns:
            Token payload

        Raises:
            JWTError: If the token is invalid, expired, or a refresh token
        """
        with logfire.span("jwt_service.verify_access_token"):
            try:
                payload = decode_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT rejected", reason=str(e))
                raise

            if payload.type != "access":
                logfire.warn(
                    "Refresh token used as access token", user_id=payload.user_id
                )
                raise JWTError("Invalid token")

            return payload
