"""Domain value objects for InsightHub."""

from hub.domain.value.identifiers import (
    MembershipId,
    ProjectId,
    TokenId,
    UserId,
)
from hub.domain.value.types import (
    Email,
    MemberIdentity,
    MembershipStatus,
    ProjectName,
    RegisteredMember,
    Role,
    TokenKind,
    TokenValue,
    UnregisteredMember,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProjectId",
    "MembershipId",
    "TokenId",
    # Types
    "Email",
    "MemberIdentity",
    "MembershipStatus",
    "ProjectName",
    "RegisteredMember",
    "Role",
    "TokenKind",
    "TokenValue",
    "UnregisteredMember",
]
