"""PostgreSQL implementation of Project repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hub.domain.model import Project
from hub.domain.repository import ProjectRepository
from hub.domain.value import ProjectId, UserId
from hub.persistence.mappers import project_to_dict, row_to_project
from hub.persistence.tables import projects_table


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> list[Project]:
        stmt = (
            select(projects_table)
            .where(projects_table.c.owner_id == user_id)
            .order_by(projects_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        Args:
            project: Project to save

        Returns:
            Saved project
        """
        project_dict = project_to_dict(project)
        existing = await self.find_by_id(project.id)

        if existing:
            stmt = (
                update(projects_table)
                .where(projects_table.c.id == project.id)
                .values(**project_dict)
            )
        else:
            stmt = insert(projects_table).values(**project_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return project

    async def delete(self, project_id: ProjectId) -> None:
        # Memberships and tokens go with it through ON DELETE CASCADE
        stmt = delete(projects_table).where(projects_table.c.id == project_id)
        await self.session.execute(stmt)
        await self.session.flush()
