"""Accept invite use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.domain.service import MembershipService
from hub.domain.value import UserId


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    token: str
    user_id: str  # Authenticated invitee


class AcceptInviteResponse(BaseModel):
    """Accept invite response."""

    message: str


class AcceptInviteUseCase(BaseUseCase[AcceptInviteRequest, AcceptInviteResponse]):
    """Use case for accepting a project invitation.

    Any authenticated user may call this; the token decides whether they
    are the intended recipient.
    """

    def __init__(self, membership_service: MembershipService) -> None:
        self.membership_service = membership_service

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Accept an invitation.

        Raises:
            ValueError: If the user ID is not a UUID
            BadRequestError: If the token is invalid or meant for someone else
            NotFoundError: If the project is gone
        """
        user_id = UserId(parse_uuid(request.user_id))
        message = await self.membership_service.accept(request.token, user_id)
        return AcceptInviteResponse(message=message)
