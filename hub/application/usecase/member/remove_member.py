"""Remove member use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.domain.service import MembershipService
from hub.domain.value import ProjectId, UserId


class RemoveMemberRequest(BaseModel):
    """Remove member request."""

    project_id: str
    user_id: str  # Acting admin
    email: str


class RemoveMemberResponse(BaseModel):
    """Remove member response."""

    message: str


class RemoveMemberUseCase(BaseUseCase[RemoveMemberRequest, RemoveMemberResponse]):
    """Use case for removing a member or pending invitee."""

    def __init__(self, membership_service: MembershipService) -> None:
        self.membership_service = membership_service

    async def execute(self, request: RemoveMemberRequest) -> RemoveMemberResponse:
        project_id = ProjectId(parse_uuid(request.project_id))
        user_id = UserId(parse_uuid(request.user_id))
        message = await self.membership_service.remove(
            user_id, project_id, request.email
        )
        return RemoveMemberResponse(message=message)
