"""In-memory membership repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from hub.domain.model.common import utcnow
from hub.domain.model.membership import Membership
from hub.domain.repository.membership import MembershipRepository
from hub.domain.value import MembershipStatus, ProjectId, UserId


class InMemoryMembershipRepository(MembershipRepository):
    """In-memory implementation of MembershipRepository for testing."""

    def __init__(self) -> None:
        self._memberships: list[Membership] = []

    async def save(self, membership: Membership) -> Membership:
        """Save a membership (create or update).

        Raises:
            IntegrityError: If another row has the same project and user or email
        """
        for other in self._memberships:
            if other.id == membership.id or other.project_id != membership.project_id:
                continue
            same_user = (
                membership.user_id is not None and other.user_id == membership.user_id
            )
            if same_user or other.email == membership.email:
                raise IntegrityError("Duplicate project membership", None, Exception())

        for i, existing in enumerate(self._memberships):
            if existing.id == membership.id:
                self._memberships[i] = membership
                return membership

        self._memberships.append(membership)
        return membership

    async def find_by_project_and_user(
        self, user_id: UserId, project_id: ProjectId
    ) -> Optional[Membership]:
        for membership in self._memberships:
            if membership.project_id == project_id and membership.user_id == user_id:
                return membership
        return None

    async def find_by_project_and_email(
        self, email: str, project_id: ProjectId
    ) -> Optional[Membership]:
        for membership in self._memberships:
            if membership.project_id == project_id and membership.email == email:
                return membership
        return None

    async def list_by_project(self, project_id: ProjectId) -> list[Membership]:
        matches = [m for m in self._memberships if m.project_id == project_id]
        matches.sort(key=lambda m: m.created_at)
        return matches

    async def list_by_user(
        self, user_id: UserId, status: MembershipStatus | None = None
    ) -> list[Membership]:
        matches = []
        for membership in self._memberships:
            if membership.user_id != user_id:
                continue
            if status is None or membership.status == status:
                matches.append(membership)
        matches.sort(key=lambda m: m.created_at)
        return matches

    async def update_status(
        self, user_id: UserId, project_id: ProjectId, status: MembershipStatus
    ) -> None:
        for i, membership in enumerate(self._memberships):
            if membership.project_id == project_id and membership.user_id == user_id:
                update: dict = {"status": status}
                if status == MembershipStatus.ACCEPTED:
                    update["accepted_at"] = utcnow()
                self._memberships[i] = membership.model_copy(update=update)

    async def delete_by_email(self, project_id: ProjectId, email: str) -> int:
        kept = [
            m
            for m in self._memberships
            if not (m.project_id == project_id and m.email == email)
        ]
        removed = len(self._memberships) - len(kept)
        self._memberships = kept
        return removed
