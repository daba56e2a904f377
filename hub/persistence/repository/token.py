"""PostgreSQL implementation of Token repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import Token
from hub.domain.repository import TokenRepository
from hub.domain.value import ProjectId, TokenId, TokenKind, TokenValue, UserId
from hub.persistence.mappers import row_to_token, token_to_dict
from hub.persistence.tables import tokens_table


class PostgresTokenRepository(TokenRepository):
    """PostgreSQL implementation of TokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, token: Token) -> Token:
        """Insert a token.

        Concurrent re-invites for the same target collide on the partial
        unique indexes and raise IntegrityError.

        Args:
            token: Token to store

        Returns:
            Stored token
        """
        stmt = insert(tokens_table).values(**token_to_dict(token))
        await self.session.execute(stmt)
        await self.session.flush()
        return token

    async def find_by_value(self, value: TokenValue) -> Optional[Token]:
        stmt = select(tokens_table).where(tokens_table.c.value == value.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_token(dict(row)) if row else None

    async def find_by_email_and_project(
        self, email: str, project_id: ProjectId, kind: TokenKind = TokenKind.INVITE
    ) -> Optional[Token]:
        stmt = select(tokens_table).where(
            and_(
                tokens_table.c.project_id == project_id,
                tokens_table.c.target_email == email,
                tokens_table.c.kind == kind.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_token(dict(row)) if row else None

    async def find_by_user_and_project(
        self, user_id: UserId, project_id: ProjectId, kind: TokenKind = TokenKind.INVITE
    ) -> Optional[Token]:
        stmt = select(tokens_table).where(
            and_(
                tokens_table.c.project_id == project_id,
                tokens_table.c.target_user_id == user_id,
                tokens_table.c.kind == kind.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_token(dict(row)) if row else None

    async def delete(self, token_id: TokenId) -> None:
        stmt = delete(tokens_table).where(tokens_table.c.id == token_id)
        await self.session.execute(stmt)
        await self.session.flush()
