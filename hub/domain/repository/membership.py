"""Membership repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.membership import Membership
from hub.domain.value import MembershipStatus, ProjectId, UserId


class MembershipRepository(ABC):
    """Repository for Membership entity.

    Defines the contract for membership persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, membership: Membership) -> Membership:
        """Save a membership (create or update by ID).

        Args:
            membership: The membership to save

        Returns:
            The saved membership

        Raises:
            IntegrityError: If another row already exists for this project and
                user or email
        """
        pass

    @abstractmethod
    async def find_by_project_and_user(
        self, user_id: UserId, project_id: ProjectId
    ) -> Optional[Membership]:
        """Find the membership of a registered user in a project.

        Args:
            user_id: The user's ID
            project_id: The project's ID

        Returns:
            The membership if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_project_and_email(
        self, email: str, project_id: ProjectId
    ) -> Optional[Membership]:
        """Find the membership with this contact email in a project.

        Matches both email-keyed and user-keyed rows.

        Args:
            email: Normalised email address
            project_id: The project's ID

        Returns:
            The membership if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_project(self, project_id: ProjectId) -> list[Membership]:
        """List a project's memberships, oldest first.

        Args:
            project_id: The project's ID

        Returns:
            List of memberships
        """
        pass

    @abstractmethod
    async def list_by_user(
        self, user_id: UserId, status: MembershipStatus | None = None
    ) -> list[Membership]:
        """List a user's memberships across projects.

        Args:
            user_id: The user's ID
            status: Optional status filter

        Returns:
            List of memberships
        """
        pass

    @abstractmethod
    async def update_status(
        self, user_id: UserId, project_id: ProjectId, status: MembershipStatus
    ) -> None:
        """Set the status of a registered user's membership.

        Args:
            user_id: The user's ID
            project_id: The project's ID
            status: New status
        """
        pass

    @abstractmethod
    async def delete_by_email(self, project_id: ProjectId, email: str) -> int:
        """Delete every membership of a project with this contact email.

        Args:
            project_id: The project's ID
            email: Normalised email address

        Returns:
            Number of rows deleted (0 when the address was not a member)
        """
        pass
