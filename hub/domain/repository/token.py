"""Token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.token import Token
from hub.domain.value import ProjectId, TokenId, TokenKind, TokenValue, UserId


class TokenRepository(ABC):
    """Repository for Token entity.

    Defines the contract for token persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, token: Token) -> Token:
        """Create a token.

        Args:
            token: The token to store

        Returns:
            The stored token

        Raises:
            IntegrityError: If the value, or a live token for the same
                project, target and kind, already exists
        """
        pass

    @abstractmethod
    async def find_by_value(self, value: TokenValue) -> Optional[Token]:
        """Find a token by its value.

        Used when a user opens an invite link.

        Args:
            value: The token value

        Returns:
            The token if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email_and_project(
        self, email: str, project_id: ProjectId, kind: TokenKind = TokenKind.INVITE
    ) -> Optional[Token]:
        """Find the token issued to an email address for a project.

        Args:
            email: Normalised email address
            project_id: The project's ID
            kind: Token kind

        Returns:
            The token if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_project(
        self, user_id: UserId, project_id: ProjectId, kind: TokenKind = TokenKind.INVITE
    ) -> Optional[Token]:
        """Find the token issued to a user for a project.

        Args:
            user_id: The user's ID
            project_id: The project's ID
            kind: Token kind

        Returns:
            The token if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, token_id: TokenId) -> None:
        """Delete a token.

        Args:
            token_id: The token's ID
        """
        pass
