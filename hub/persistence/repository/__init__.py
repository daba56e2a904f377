"""PostgreSQL repository implementations."""

from hub.persistence.repository.membership import PostgresMembershipRepository
from hub.persistence.repository.project import PostgresProjectRepository
from hub.persistence.repository.token import PostgresTokenRepository
from hub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresMembershipRepository",
    "PostgresProjectRepository",
    "PostgresTokenRepository",
    "PostgresUserRepository",
]
