"""Request authentication helpers."""

from fastapi import HTTPException, status

from hub.domain.service import JWTService
from hub.util.jwt import JWTError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def authenticate(
    jwt_service: JWTService, authorization: str | None, auth_token: str | None
) -> str:
    """Resolve the caller's user ID from the request credentials.

    The Authorization header wins over the ``auth_token`` cookie.

    Args:
        jwt_service: JWT service from DI
        authorization: Authorization header value
        auth_token: JWT token from cookie

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: 401 if no valid token is present
    """
    token = bearer_token(authorization) or auth_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_access_token(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    return payload.user_id
