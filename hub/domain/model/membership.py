"""Membership entity.

A membership links a project to a member, who is either a registered user or,
until they sign up and accept, a bare email address.
"""

from datetime import datetime
from typing import Optional

from hub.domain.model.common import DomainModel
from hub.domain.value import (
    MemberIdentity,
    MembershipId,
    MembershipStatus,
    ProjectId,
    RegisteredMember,
    Role,
    UserId,
)


class Membership(DomainModel):
    """Membership entity.

    Business rules:
    - Unique per (project, user) and per (project, email)
    - Invites create MEMBER/PENDING rows; accepting moves them to ACCEPTED
    - Email-keyed rows are rebound to the user id on acceptance
    """

    id: MembershipId
    project_id: ProjectId
    identity: MemberIdentity
    email: str  # Contact address, present for both identity variants
    role: Role = Role.MEMBER
    status: MembershipStatus = MembershipStatus.PENDING
    accepted_at: Optional[datetime] = None

    @property
    def user_id(self) -> UserId | None:
        """User id for registered members, None while keyed by email."""
        if isinstance(self.identity, RegisteredMember):
            return self.identity.user_id
        return None

    @property
    def is_accepted_admin(self) -> bool:
        return self.role == Role.ADMIN and self.status == MembershipStatus.ACCEPTED
