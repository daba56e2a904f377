"""Access token encoding and verification.

Tokens are HS256 JWTs issued by the identity service. The payload names the
user and the token type; only access tokens identify API callers, refresh
tokens are for the identity service alone.
"""

from datetime import datetime, timedelta, timezone
from typing import Literal

import jwt
from pydantic import BaseModel, ValidationError

from hub.config import AuthSettings

TokenType = Literal["access", "refresh"]


class TokenPayload(BaseModel):
    """Verified JWT claims."""

    user_id: str
    type: TokenType = "access"
    exp: datetime


class JWTError(Exception):
    """Raised when a token cannot identify a caller."""

    pass


def token_lifetime(token_type: TokenType, settings: AuthSettings) -> timedelta:
    if token_type == "refresh":
        return timedelta(minutes=settings.jwt_refresh_expiry_minutes)
    return timedelta(minutes=settings.jwt_expiry_minutes)


def create_token(
    user_id: str, settings: AuthSettings, token_type: TokenType = "access"
) -> str:
    """Sign a token for a user.

    Login lives in the identity service; this backs tooling and tests.

    Args:
        user_id: User ID
        settings: Authentication settings
        token_type: Access or refresh

    Returns:
        Encoded JWT
    """
    payload = {
        "user_id": user_id,
        "type": token_type,
        "exp": datetime.now(timezone.utc) + token_lifetime(token_type, settings),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and read its claims.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Token payload

    Raises:
        JWTError: If the token is expired, forged, or lacks a user id
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise JWTError("Invalid token")
