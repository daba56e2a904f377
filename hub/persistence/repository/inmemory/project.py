"""In-memory project repository for testing."""

from typing import Optional

from hub.domain.model.project import Project
from hub.domain.repository.project import ProjectRepository
from hub.domain.value import ProjectId, UserId


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self) -> None:
        self._projects: dict[ProjectId, Project] = {}

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return self._projects.get(project_id)

    async def find_by_user(self, user_id: UserId) -> list[Project]:
        """Find projects created by a user, oldest first."""
        owned = [p for p in self._projects.values() if p.owner_id == user_id]
        owned.sort(key=lambda p: p.created_at)
        return owned

    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        self._projects[project.id] = project
        return project

    async def delete(self, project_id: ProjectId) -> None:
        """Delete a project.

        No cascade: rows pointing at the project stay behind, as they
        would if the FK were missing.
        """
        self._projects.pop(project_id, None)
