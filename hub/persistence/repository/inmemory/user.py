"""Dict-backed user directory for tests."""

from typing import Optional

from hub.domain.model.user import User
from hub.domain.repository.user import UserRepository
from hub.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        wanted = email.lower()
        return next(
            (user for user in self._users.values() if user.email.lower() == wanted),
            None,
        )

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
