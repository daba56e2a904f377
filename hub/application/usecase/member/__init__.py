"""Membership use cases."""

from hub.application.usecase.member.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
)
from hub.application.usecase.member.invite_member import (
    InviteMemberRequest,
    InviteMemberResponse,
    InviteMemberUseCase,
)
from hub.application.usecase.member.remove_member import (
    RemoveMemberRequest,
    RemoveMemberResponse,
    RemoveMemberUseCase,
)
from hub.application.usecase.member.verify_invite import (
    VerifyInviteRequest,
    VerifyInviteResponse,
    VerifyInviteUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "InviteMemberRequest",
    "InviteMemberResponse",
    "InviteMemberUseCase",
    "RemoveMemberRequest",
    "RemoveMemberResponse",
    "RemoveMemberUseCase",
    "VerifyInviteRequest",
    "VerifyInviteResponse",
    "VerifyInviteUseCase",
]
