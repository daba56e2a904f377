"""User entity.

Users are owned by the identity service; this core only reads them.
"""

from hub.domain.model.common import DomainModel
from hub.domain.value import UserId


class User(DomainModel):
    """Registered user profile."""

    id: UserId
    email: str
    name: str
