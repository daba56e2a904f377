"""Project domain service."""

from dataclasses import dataclass, field
from uuid import uuid4

import logfire
from pydantic import ValidationError

from hub.domain.error import BadRequestError
from hub.domain.model import Membership, Project
from hub.domain.model.common import utcnow
from hub.domain.repository import (
    MembershipRepository,
    ProjectRepository,
    UserRepository,
)
from hub.domain.value import (
    MembershipId,
    MembershipStatus,
    ProjectId,
    ProjectName,
    RegisteredMember,
    Role,
    UserId,
)

from .authorization_service import AuthorizationService
from .base import Service, translate_errors


@dataclass
class MemberView:
    """A roster entry as shown to project members."""

    project_id: ProjectId
    email: str
    name: str | None
    role: Role
    status: MembershipStatus


@dataclass
class ProjectView:
    """A project together with its roster."""

    project: Project
    members: list[MemberView] = field(default_factory=list)


def parse_project_name(value: str) -> ProjectName:
    try:
        return ProjectName(value)
    except ValidationError:
        raise BadRequestError("Project name must be 1-100 characters")


class ProjectService(Service):
    """Domain service for project operations."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        membership_repository: MembershipRepository,
        user_repository: UserRepository,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            membership_repository: Membership repository
            user_repository: User repository
            authorization_service: Admin and member gates
        """
        self.project_repository = project_repository
        self.membership_repository = membership_repository
        self.user_repository = user_repository
        self.authorization_service = authorization_service

    async def create(self, name: str, caller_id: UserId) -> ProjectView:
        """Create a project with the caller as its only admin.

        Args:
            name: Project name
            caller_id: Creating user

        Returns:
            The new project with its single-member roster

        Raises:
            BadRequestError: If the name is invalid or the caller has no profile
            InternalError: If a store fails
        """
        with logfire.span(
            "project_service.create", caller_id=str(caller_id), name=name
        ):
            with translate_errors(
                "project_service.create",
                "There was an error creating the project. Please try again later",
            ):
                project_name = parse_project_name(name)
                creator = await self.user_repository.find_by_id(caller_id)
                if creator is None:
                    logfire.warn("Creator profile missing", caller_id=str(caller_id))
                    raise BadRequestError(f"User {caller_id} does not exist")

                project = await self.project_repository.save(
                    Project(
                        id=ProjectId(uuid4()),
                        name=project_name,
                        owner_id=caller_id,
                    )
                )
                await self.membership_repository.save(
                    Membership(
                        id=MembershipId(uuid4()),
                        project_id=project.id,
                        identity=RegisteredMember(user_id=caller_id),
                        email=creator.email.lower(),
                        role=Role.ADMIN,
                        status=MembershipStatus.ACCEPTED,
                        accepted_at=project.created_at,
                    )
                )

                logfire.info(
                    "Project created",
                    project_id=str(project.id),
                    caller_id=str(caller_id),
                )
                return await self._view(project)

    async def find_by_id(self, project_id: ProjectId, caller_id: UserId) -> ProjectView:
        """Get a project the caller is an accepted member of.

        Raises:
            NotFoundError: If the project is missing
            ForbiddenError: If the caller is not an accepted member
            InternalError: If a store fails
        """
        with logfire.span(
            "project_service.find_by_id",
            project_id=str(project_id),
            caller_id=str(caller_id),
        ):
            with translate_errors(
                "project_service.find_by_id",
                "There was an error loading the project. Please try again later",
            ):
                project, _ = await self.authorization_service.require_member(
                    project_id, caller_id
                )
                return await self._view(project)

    async def find_by_user(self, caller_id: UserId) -> list[ProjectView]:
        """List projects the caller owns or has accepted membership in.

        Args:
            caller_id: Authenticated caller

        Returns:
            Projects with rosters, oldest first
        """
        with logfire.span("project_service.find_by_user", caller_id=str(caller_id)):
            with translate_errors(
                "project_service.find_by_user",
                "There was an error loading your projects. Please try again later",
            ):
                projects = {
                    p.id: p for p in await self.project_repository.find_by_user(caller_id)
                }
                memberships = await self.membership_repository.list_by_user(
                    caller_id, MembershipStatus.ACCEPTED
                )
                for membership in memberships:
                    if membership.project_id in projects:
                        continue
                    project = await self.project_repository.find_by_id(
                        membership.project_id
                    )
                    if project is not None:
                        projects[project.id] = project

                ordered = sorted(projects.values(), key=lambda p: p.created_at)
                logfire.info(
                    "Projects listed", caller_id=str(caller_id), count=len(ordered)
                )
                return [await self._view(project) for project in ordered]

    async def update(
        self, project_id: ProjectId, caller_id: UserId, name: str
    ) -> ProjectView:
        """Rename a project.

        Args:
            project_id: Project to rename
            caller_id: Acting admin
            name: New name

        Returns:
            The updated project

        Raises:
            NotFoundError: If the project is missing
            ForbiddenError: If the caller is not an admin
            BadRequestError: If the name is invalid
            InternalError: If a store fails
        """
        with logfire.span(
            "project_service.update",
            project_id=str(project_id),
            caller_id=str(caller_id),
        ):
            with translate_errors(
                "project_service.update",
                "There was an error updating the project. Please try again later",
            ):
                project, _ = await self.authorization_service.require_admin(
                    project_id, caller_id
                )
                updated = project.model_copy(
                    update={"name": parse_project_name(name), "updated_at": utcnow()}
                )
                saved = await self.project_repository.save(updated)
                logfire.info("Project renamed", project_id=str(project_id))
                return await self._view(saved)

    async def delete(self, project_id: ProjectId, caller_id: UserId) -> None:
        """Delete a project.

        Raises:
            NotFoundError: If the project is missing
            ForbiddenError: If the caller is not an admin
            InternalError: If a store fails
        """
        with logfire.span(
            "project_service.delete",
            project_id=str(project_id),
            caller_id=str(caller_id),
        ):
            with translate_errors(
                "project_service.delete",
                "There was an error deleting the project. Please try again later",
            ):
                await self.authorization_service.require_admin(project_id, caller_id)
                await self.project_repository.delete(project_id)
                logfire.info("Project deleted", project_id=str(project_id))

    async def _view(self, project: Project) -> ProjectView:
        members = []
        for membership in await self.membership_repository.list_by_project(project.id):
            name = None
            if membership.user_id is not None:
                user = await self.user_repository.find_by_id(membership.user_id)
                name = user.name if user else None
            members.append(
                MemberView(
                    project_id=project.id,
                    email=membership.email,
                    name=name,
                    role=membership.role,
                    status=membership.status,
                )
            )
        return ProjectView(project=project, members=members)
