#!/usr/bin/env python3
"""Sign a JWT for local development.

Usage:
    python scripts/issue_token.py <user_id> [access|refresh]

Uses AUTH__JWT_SECRET from the environment, so the token is accepted by an
API started with the same settings:

    curl -H "Authorization: Bearer $(python scripts/issue_token.py $ID)" ...
"""

import sys
from typing import cast

from hub.config import Settings
from hub.util.jwt import TokenType, create_token

TOKEN_TYPES = ("access", "refresh")


def main(argv: list[str]) -> int:
    if len(argv) < 2 or (len(argv) > 2 and argv[2] not in TOKEN_TYPES):
        print(__doc__, file=sys.stderr)
        return 2

    settings = Settings()
    if settings.environment == "production":
        print("Refusing to sign tokens in production", file=sys.stderr)
        return 1

    token_type = cast(TokenType, argv[2] if len(argv) > 2 else "access")
    print(create_token(argv[1], settings.auth, token_type))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
