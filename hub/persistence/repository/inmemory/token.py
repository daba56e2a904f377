"""In-memory token repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from hub.domain.model.token import Token
from hub.domain.repository.token import TokenRepository
from hub.domain.value import ProjectId, TokenId, TokenKind, TokenValue, UserId


class InMemoryTokenRepository(TokenRepository):
    """In-memory implementation of TokenRepository for testing."""

    def __init__(self) -> None:
        self._tokens: dict[TokenId, Token] = {}

    async def save(self, token: Token) -> Token:
        """Insert a token.

        Raises:
            IntegrityError: If the value or the (project, target, kind) slot is taken
        """
        for other in self._tokens.values():
            if other.value == token.value:
                raise IntegrityError("Duplicate token value", None, Exception())
            if other.project_id != token.project_id or other.kind != token.kind:
                continue
            if (
                token.target_user_id is not None
                and other.target_user_id == token.target_user_id
            ) or (
                token.target_email is not None
                and other.target_email == token.target_email
            ):
                raise IntegrityError("Duplicate live token", None, Exception())

        self._tokens[token.id] = token
        return token

    async def find_by_value(self, value: TokenValue) -> Optional[Token]:
        """Find a token by its value."""
        for token in self._tokens.values():
            if token.value == value:
                return token
        return None

    async def find_by_email_and_project(
        self, email: str, project_id: ProjectId, kind: TokenKind = TokenKind.INVITE
    ) -> Optional[Token]:
        for token in self._tokens.values():
            if (
                token.project_id == project_id
                and token.target_email == email
                and token.kind == kind
            ):
                return token
        return None

    async def find_by_user_and_project(
        self, user_id: UserId, project_id: ProjectId, kind: TokenKind = TokenKind.INVITE
    ) -> Optional[Token]:
        for token in self._tokens.values():
            if (
                token.project_id == project_id
                and token.target_user_id == user_id
                and token.kind == kind
            ):
                return token
        return None

    async def delete(self, token_id: TokenId) -> None:
        self._tokens.pop(token_id, None)
