"""User directory interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.user import User
from hub.domain.value import UserId


class UserRepository(ABC):
    """Read access to profiles owned by the identity service.

    ``save`` exists for seeding and tests.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Look up the account registered under an address.

        Args:
            email: Address in any case

        Returns:
            The user, or None if nobody registered with it
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or overwrite a profile."""
        pass
