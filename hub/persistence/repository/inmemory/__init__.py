"""In-memory repository implementations for testing."""

from .commit_hooks import ImmediateCommitHooks
from .membership import InMemoryMembershipRepository
from .project import InMemoryProjectRepository
from .token import InMemoryTokenRepository
from .user import InMemoryUserRepository

__all__ = [
    "ImmediateCommitHooks",
    "InMemoryMembershipRepository",
    "InMemoryProjectRepository",
    "InMemoryTokenRepository",
    "InMemoryUserRepository",
]
