"""Verify invite use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase
from hub.domain.service import MembershipService
from hub.util.token import mask_token


class VerifyInviteRequest(BaseModel):
    """Verify invite request."""

    token: str


class VerifyInviteResponse(BaseModel):
    """Verify invite response.

    ``is_user`` tells the frontend whether to route the invitee to login
    or to registration.
    """

    is_verified: bool
    is_user: bool


class VerifyInviteUseCase(BaseUseCase[VerifyInviteRequest, VerifyInviteResponse]):
    """Use case for checking an invite link before acceptance.

    Unauthenticated: the invitee may not have an account yet.
    """

    def __init__(self, membership_service: MembershipService) -> None:
        """Initialize verify invite use case.

        Args:
            membership_service: Membership domain service
        """
        self.membership_service = membership_service

    async def execute(self, request: VerifyInviteRequest) -> VerifyInviteResponse:
        """Verify an invite token.

        Args:
            request: Token from the invite link

        Returns:
            Verification result

        Raises:
            BadRequestError: If the token is missing, expired, or not an invite
        """
        with logfire.span("verify_invite.execute", token=mask_token(request.token)):
            result = await self.membership_service.verify(request.token)
            return VerifyInviteResponse(
                is_verified=result.is_verified, is_user=result.is_user
            )
