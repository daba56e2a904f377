"""Opaque token generation."""

import secrets
import string

TOKEN_ALPHABET = string.ascii_letters + string.digits


def generate_token(length: int = 32) -> str:
    """Generate a random alphanumeric token.

    Args:
        length: Number of characters

    Returns:
        Token drawn from [A-Za-z0-9] with a cryptographic RNG
    """
    if length < 1:
        raise ValueError("Token length must be positive")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def mask_token(token: str) -> str:
    """Shorten a token for logs and traces."""
    return token[:8] + "..."
