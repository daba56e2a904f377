"""Repository interfaces for InsightHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from hub.domain.repository.commit_hooks import AfterCommit, CommitHooks
from hub.domain.repository.membership import MembershipRepository
from hub.domain.repository.project import ProjectRepository
from hub.domain.repository.token import TokenRepository
from hub.domain.repository.user import UserRepository

__all__ = [
    "AfterCommit",
    "CommitHooks",
    "MembershipRepository",
    "ProjectRepository",
    "TokenRepository",
    "UserRepository",
]
