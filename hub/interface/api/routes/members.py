"""Project member and invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel

from hub.application.usecase.member import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    InviteMemberRequest,
    InviteMemberResponse,
    InviteMemberUseCase,
    RemoveMemberRequest,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    VerifyInviteRequest,
    VerifyInviteResponse,
    VerifyInviteUseCase,
)
from hub.domain.service import JWTService
from hub.interface.api.auth import authenticate

router = APIRouter(prefix="/projects", tags=["members"], route_class=DishkaRoute)


class InviteMemberAPIRequest(BaseModel):
    """API request body for inviting a member."""

    email: str


@router.get("/members/verify-invite", response_model=VerifyInviteResponse)
async def verify_invite(
    verify_invite_use_case: FromDishka[VerifyInviteUseCase],
    token: str = Query(...),
) -> VerifyInviteResponse:
    """Check an invite link before login or registration.

    No authentication: the invitee may not have an account yet.

    Args:
        verify_invite_use_case: Verify invite use case from DI
        token: Invite token from the link

    Returns:
        Whether the token is valid and bound to an existing account
    """
    return await verify_invite_use_case.execute(VerifyInviteRequest(token=token))


@router.post("/members/accept", response_model=AcceptInviteResponse)
async def accept_invite(
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str = Query(...),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AcceptInviteResponse:
    """Accept an invitation as the authenticated invitee.

    Raises:
        HTTPException: If not authenticated
    """
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await accept_invite_use_case.execute(
            AcceptInviteRequest(token=token, user_id=user_id)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{project_id}/members", response_model=InviteMemberResponse)
async def invite_member(
    project_id: str,
    request: InviteMemberAPIRequest,
    invite_member_use_case: FromDishka[InviteMemberUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> InviteMemberResponse:
    """Invite someone to a project by email (admins only).

    Args:
        project_id: Project ID
        request: Invitee email
        invite_member_use_case: Invite member use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Acknowledgement message

    Raises:
        HTTPException: If not authenticated or the ID is malformed
    """
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await invite_member_use_case.execute(
            InviteMemberRequest(
                project_id=project_id, user_id=user_id, email=request.email
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{project_id}/members", response_model=RemoveMemberResponse)
async def remove_member(
    project_id: str,
    remove_member_use_case: FromDishka[RemoveMemberUseCase],
    jwt_service: FromDishka[JWTService],
    member_email: str = Query(...),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveMemberResponse:
    """Remove a member or pending invitee (admins only)."""
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await remove_member_use_case.execute(
            RemoveMemberRequest(
                project_id=project_id, user_id=user_id, email=member_email
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
