"""Entity identifiers. All are UUIDs; the NewTypes keep them apart."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)
MembershipId = NewType("MembershipId", UUID)
TokenId = NewType("TokenId", UUID)
