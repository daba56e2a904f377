"""Invite member use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.domain.service import MembershipService
from hub.domain.value import ProjectId, UserId


class InviteMemberRequest(BaseModel):
    """Invite member request."""

    project_id: str
    user_id: str  # Inviting admin
    email: str


class InviteMemberResponse(BaseModel):
    """Invite member response.

    The token is never returned; it only travels by email.
    """

    message: str


class InviteMemberUseCase(BaseUseCase[InviteMemberRequest, InviteMemberResponse]):
    """Use case for inviting someone to a project by email."""

    def __init__(self, membership_service: MembershipService) -> None:
        """Initialize invite member use case.

        Args:
            membership_service: Membership domain service
        """
        self.membership_service = membership_service

    async def execute(self, request: InviteMemberRequest) -> InviteMemberResponse:
        """Invite an email address to a project.

        Args:
            request: Project, inviting admin and invitee email

        Returns:
            Acknowledgement

        Raises:
            ValueError: If an ID is not a UUID
            NotFoundError: If the project is missing
            ForbiddenError: If the caller is not an admin
            BadRequestError: If the email is malformed
        """
        project_id = ProjectId(parse_uuid(request.project_id))
        user_id = UserId(parse_uuid(request.user_id))
        message = await self.membership_service.invite(
            user_id, project_id, request.email
        )
        return InviteMemberResponse(message=message)
