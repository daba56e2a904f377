"""Project authorization domain service."""

import logfire

from hub.domain.error import ForbiddenError, NotFoundError
from hub.domain.model import Membership, Project, User
from hub.domain.repository import (
    MembershipRepository,
    ProjectRepository,
    UserRepository,
)
from hub.domain.value import MembershipStatus, ProjectId, UserId

from .base import Service


class AuthorizationService(Service):
    """Answers whether a caller may act on a project.

    ``require_admin`` is the single gate for invite, removal, rename and
    delete. Invite acceptance does not go through it: the invitee is checked
    against the token target instead.
    """

    def __init__(
        self,
        project_repository: ProjectRepository,
        membership_repository: MembershipRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize authorization service.

        Args:
            project_repository: Project repository
            membership_repository: Membership repository
            user_repository: User repository
        """
        self.project_repository = project_repository
        self.membership_repository = membership_repository
        self.user_repository = user_repository

    async def require_admin(
        self, project_id: ProjectId, caller_id: UserId
    ) -> tuple[Project, User]:
        """Check the caller is an accepted ADMIN of the project.

        Args:
            project_id: Project to act on
            caller_id: Authenticated caller

        Returns:
            The project and the admin's profile

        Raises:
            NotFoundError: If the project or the caller's profile is missing
            ForbiddenError: If the caller is not an accepted admin
        """
        with logfire.span(
            "authorization_service.require_admin",
            project_id=str(project_id),
            caller_id=str(caller_id),
        ):
            project = await self._get_project(project_id)

            membership = await self.membership_repository.find_by_project_and_user(
                caller_id, project_id
            )
            if membership is None:
                logfire.warn(
                    "Caller is not a member of project",
                    project_id=str(project_id),
                    caller_id=str(caller_id),
                )
                raise ForbiddenError("You are not a member of this project")

            if not membership.is_accepted_admin:
                logfire.warn(
                    "Caller is not an admin of project",
                    project_id=str(project_id),
                    caller_id=str(caller_id),
                    role=membership.role.value,
                    status=membership.status.value,
                )
                raise ForbiddenError(
                    "You do not have permission to perform this action. "
                    "Only project admins can perform this action"
                )

            admin = await self.user_repository.find_by_id(caller_id)
            if admin is None:
                logfire.error("Admin profile missing", caller_id=str(caller_id))
                raise NotFoundError("User", str(caller_id))

            return project, admin

    async def require_member(
        self, project_id: ProjectId, caller_id: UserId
    ) -> tuple[Project, Membership]:
        """Check the caller holds an accepted membership of any role.

        Args:
            project_id: Project to read
            caller_id: Authenticated caller

        Returns:
            The project and the caller's membership

        Raises:
            NotFoundError: If the project is missing
            ForbiddenError: If the caller has no accepted membership
        """
        with logfire.span(
            "authorization_service.require_member",
            project_id=str(project_id),
            caller_id=str(caller_id),
        ):
            project = await self._get_project(project_id)

            membership = await self.membership_repository.find_by_project_and_user(
                caller_id, project_id
            )
            if membership is None or membership.status != MembershipStatus.ACCEPTED:
                logfire.warn(
                    "Caller may not view project",
                    project_id=str(project_id),
                    caller_id=str(caller_id),
                )
                raise ForbiddenError("You are not a member of this project")

            return project, membership

    async def _get_project(self, project_id: ProjectId) -> Project:
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            logfire.warn("Project not found", project_id=str(project_id))
            raise NotFoundError("Project", str(project_id))
        return project
