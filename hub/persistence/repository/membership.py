"""PostgreSQL implementation of Membership repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import Membership
from hub.domain.model.common import utcnow
from hub.domain.repository import MembershipRepository
from hub.domain.value import MembershipStatus, ProjectId, UserId
from hub.persistence.mappers import membership_to_dict, row_to_membership
from hub.persistence.tables import project_members_table


class PostgresMembershipRepository(MembershipRepository):
    """PostgreSQL implementation of MembershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _exists(self, membership: Membership) -> bool:
        stmt = select(project_members_table.c.id).where(
            project_members_table.c.id == membership.id
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, membership: Membership) -> Membership:
        """Save a membership (create or update).

        Args:
            membership: Membership to save

        Returns:
            Saved membership
        """
        membership_dict = membership_to_dict(membership)

        if await self._exists(membership):
            stmt = (
                update(project_members_table)
                .where(project_members_table.c.id == membership.id)
                .values(**membership_dict)
            )
        else:
            stmt = insert(project_members_table).values(**membership_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return membership

    async def find_by_project_and_user(
        self, user_id: UserId, project_id: ProjectId
    ) -> Optional[Membership]:
        stmt = select(project_members_table).where(
            and_(
                project_members_table.c.project_id == project_id,
                project_members_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_membership(dict(row)) if row else None

    async def find_by_project_and_email(
        self, email: str, project_id: ProjectId
    ) -> Optional[Membership]:
        stmt = select(project_members_table).where(
            and_(
                project_members_table.c.project_id == project_id,
                project_members_table.c.email == email,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_membership(dict(row)) if row else None

    async def list_by_project(self, project_id: ProjectId) -> list[Membership]:
        stmt = (
            select(project_members_table)
            .where(project_members_table.c.project_id == project_id)
            .order_by(project_members_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_membership(dict(row)) for row in result.mappings().all()]

    async def list_by_user(
        self, user_id: UserId, status: MembershipStatus | None = None
    ) -> list[Membership]:
        stmt = (
            select(project_members_table)
            .where(project_members_table.c.user_id == user_id)
            .order_by(project_members_table.c.created_at.asc())
        )

        if status:
            stmt = stmt.where(project_members_table.c.status == status.value)

        result = await self.session.execute(stmt)
        return [row_to_membership(dict(row)) for row in result.mappings().all()]

    async def update_status(
        self, user_id: UserId, project_id: ProjectId, status: MembershipStatus
    ) -> None:
        """Set a membership's status, stamping accepted_at on acceptance.

        Args:
            user_id: Member user ID
            project_id: Project ID
            status: New status
        """
        values: dict = {"status": status.value}
        if status == MembershipStatus.ACCEPTED:
            values["accepted_at"] = utcnow()

        stmt = (
            update(project_members_table)
            .where(
                and_(
                    project_members_table.c.project_id == project_id,
                    project_members_table.c.user_id == user_id,
                )
            )
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_email(self, project_id: ProjectId, email: str) -> int:
        stmt = delete(project_members_table).where(
            and_(
                project_members_table.c.project_id == project_id,
                project_members_table.c.email == email,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
