"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.project import Project
from hub.domain.value import ProjectId, UserId


class ProjectRepository(ABC):
    """Repository for Project aggregate.

    Defines the contract for project persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Project]:
        """Find projects created by a user, oldest first.

        Args:
            user_id: The owner's ID

        Returns:
            List of projects
        """
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        Args:
            project: The project to save

        Returns:
            The saved project
        """
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> None:
        """Delete a project.

        Memberships and tokens are removed by the store (FK cascade).

        Args:
            project_id: The project's unique identifier
        """
        pass
