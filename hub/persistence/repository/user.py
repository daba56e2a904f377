"""User profiles in PostgreSQL."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import User
from hub.domain.repository import UserRepository
from hub.domain.value import UserId
from hub.persistence.mappers import row_to_user, user_to_dict
from hub.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt) -> Optional[User]:
        row = (await self.session.execute(stmt)).mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(
            select(users_table).where(users_table.c.id == user_id)
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup; addresses are stored as registered."""
        return await self._first(
            select(users_table).where(
                func.lower(users_table.c.email) == email.lower()
            )
        )

    async def save(self, user: User) -> User:
        """Insert the profile, or overwrite it if the id exists."""
        values = user_to_dict(user)
        if await self.find_by_id(user.id):
            stmt = (
                update(users_table).where(users_table.c.id == user.id).values(**values)
            )
        else:
            stmt = insert(users_table).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return user
