"""Membership domain service.

Owns the invitation lifecycle: issuing invite tokens, accepting them,
verifying them for the client, and removing members.
"""

from dataclasses import dataclass
from functools import partial
from typing import cast
from datetime import timedelta
from uuid import uuid4

import logfire
from pydantic import ValidationError

from hub.config import InvitationSettings
from hub.domain.error import BadRequestError, NotFoundError
from hub.domain.model import Membership, Token, User
from hub.domain.model.common import utcnow
from hub.domain.repository import (
    CommitHooks,
    MembershipRepository,
    ProjectRepository,
    TokenRepository,
    UserRepository,
)
from hub.domain.value import (
    Email,
    MembershipId,
    MembershipStatus,
    ProjectId,
    RegisteredMember,
    Role,
    TokenId,
    TokenKind,
    TokenValue,
    UnregisteredMember,
    UserId,
)
from hub.util.token import generate_token, mask_token

from .authorization_service import AuthorizationService
from .base import Service, translate_errors
from .notifier import InviteNotifier

INVALID_TOKEN_MESSAGE = (
    "Invalid or expired token. Please ask the project admin to invite you again"
)
WRONG_RECIPIENT_MESSAGE = "You can only accept invitations that were sent to you"


@dataclass
class TokenVerification:
    """Result of checking an invite token before acceptance.

    ``is_user`` tells the client whether to send the invitee to login
    (token bound to an account) or to registration (bound to an email).
    """

    is_verified: bool
    is_user: bool


def parse_email(value: str) -> str:
    """Normalise an email address or raise BadRequestError."""
    try:
        return Email(value).root
    except ValidationError:
        raise BadRequestError(f"Invalid email address: {value}")


class MembershipService(Service):
    """Domain service for project membership and invitations."""

    def __init__(
        self,
        membership_repository: MembershipRepository,
        token_repository: TokenRepository,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        authorization_service: AuthorizationService,
        notifier: InviteNotifier,
        commit_hooks: CommitHooks,
        invitation_settings: InvitationSettings,
    ) -> None:
        """Initialize membership service.

        Args:
            membership_repository: Membership repository
            token_repository: Token repository
            project_repository: Project repository
            user_repository: User repository
            authorization_service: Admin gate
            notifier: Invitation email sender
            commit_hooks: Defers the email until the invite is committed
            invitation_settings: Token lifetime and length
        """
        self.membership_repository = membership_repository
        self.token_repository = token_repository
        self.project_repository = project_repository
        self.user_repository = user_repository
        self.authorization_service = authorization_service
        self.notifier = notifier
        self.commit_hooks = commit_hooks
        self.invitation_settings = invitation_settings

    async def invite(
        self, caller_id: UserId, project_id: ProjectId, target_email: str
    ) -> str:
        """Invite an email address to a project.

        Re-inviting the same target replaces its previous token. The new
        token is only delivered by email, never returned. The email is sent
        after the request commits.

        Args:
            caller_id: Inviting admin
            project_id: Project to invite into
            target_email: Invitee address, registered or not

        Returns:
            Acknowledgement message

        Raises:
            NotFoundError: If the project or admin profile is missing
            ForbiddenError: If the caller is not an admin of the project
            BadRequestError: If the email is malformed
            InternalError: If a store fails
        """
        with logfire.span(
            "membership_service.invite",
            caller_id=str(caller_id),
            project_id=str(project_id),
            target_email=target_email,
        ):
            with translate_errors(
                "membership_service.invite",
                f"There was an error inviting {target_email} to this project. "
                "Please try again later",
            ):
                project, admin = await self.authorization_service.require_admin(
                    project_id, caller_id
                )
                email = parse_email(target_email)
                invitee = await self.user_repository.find_by_email(email)

                await self._revoke_invite_tokens(project_id, email, invitee)

                token = Token(
                    id=TokenId(uuid4()),
                    value=TokenValue(
                        generate_token(self.invitation_settings.token_length)
                    ),
                    kind=TokenKind.INVITE,
                    project_id=project_id,
                    target_user_id=invitee.id if invitee else None,
                    target_email=None if invitee else email,
                    expires_at=utcnow()
                    + timedelta(days=self.invitation_settings.token_ttl_days),
                )
                await self.token_repository.save(token)
                await self._ensure_pending_membership(project_id, email, invitee)

                logfire.info(
                    "Invite issued",
                    project_id=str(project_id),
                    target_email=email,
                    registered=invitee is not None,
                    token=mask_token(token.value.root),
                )

            # Email only once the token and membership are durable
            await self.commit_hooks.after_commit(
                partial(self._notify, email, admin.name, project.name.root, token)
            )
            return f"Invitation sent to {email}"

    async def accept(self, token: str, accepter_id: UserId) -> str:
        """Accept an invitation on behalf of the caller.

        The caller must be the token's target; being an admin is irrelevant.

        Args:
            token: Invite token value
            accepter_id: Authenticated caller

        Returns:
            Acknowledgement message

        Raises:
            BadRequestError: If the token is invalid, expired, meant for someone
                else, has no matching invitation, or was already accepted
            NotFoundError: If the project or the caller's profile is missing
            InternalError: If a store fails
        """
        with logfire.span(
            "membership_service.accept",
            token=mask_token(token),
            accepter_id=str(accepter_id),
        ):
            with translate_errors(
                "membership_service.accept",
                "There was an error accepting the invitation. Please try again later",
            ):
                invite = await self._load_valid_invite(token)
                contact_email = await self._resolve_target(invite, accepter_id)

                # Token validation guarantees INVITE tokens name a project
                project_id = cast(ProjectId, invite.project_id)
                project = await self.project_repository.find_by_id(project_id)
                if project is None:
                    logfire.error(
                        "Invite references missing project",
                        project_id=str(project_id),
                    )
                    raise NotFoundError("Project", str(project_id))

                membership = await self._find_invited_membership(
                    project.id, accepter_id, contact_email
                )
                if membership is None:
                    logfire.warn(
                        "No invitation found for accepter",
                        project_id=str(project.id),
                        accepter_id=str(accepter_id),
                    )
                    raise BadRequestError(
                        f"User {accepter_id} has no invitation to project {project.id}"
                    )

                if membership.status == MembershipStatus.ACCEPTED:
                    logfire.warn(
                        "Invitation already accepted",
                        project_id=str(project.id),
                        accepter_id=str(accepter_id),
                    )
                    raise BadRequestError(
                        f"User {accepter_id} is already a member of project {project.id}"
                    )

                if membership.user_id is None:
                    # Invitee registered after being invited by email
                    await self.membership_repository.save(
                        membership.model_copy(
                            update={"identity": RegisteredMember(user_id=accepter_id)}
                        )
                    )

                await self.membership_repository.update_status(
                    accepter_id, project.id, MembershipStatus.ACCEPTED
                )
                await self.token_repository.delete(invite.id)

                logfire.info(
                    "Invitation accepted",
                    project_id=str(project.id),
                    accepter_id=str(accepter_id),
                )
                return "Invitation accepted"

    async def remove(
        self, caller_id: UserId, project_id: ProjectId, target_email: str
    ) -> str:
        """Remove a member (or pending invitee) from a project.

        Removing an address that is not a member succeeds. Live invite
        tokens for the address are revoked as well.

        Args:
            caller_id: Acting admin
            project_id: Project to remove from
            target_email: Member address

        Returns:
            Acknowledgement message naming the project

        Raises:
            NotFoundError: If the project or admin profile is missing
            ForbiddenError: If the caller is not an admin of the project
            BadRequestError: If the email is malformed
            InternalError: If a store fails
        """
        with logfire.span(
            "membership_service.remove",
            caller_id=str(caller_id),
            project_id=str(project_id),
            target_email=target_email,
        ):
            with translate_errors(
                "membership_service.remove",
                f"There was an error removing member {target_email} from this "
                "project. Please try again later",
            ):
                project, _ = await self.authorization_service.require_admin(
                    project_id, caller_id
                )
                email = parse_email(target_email)

                removed = await self.membership_repository.delete_by_email(
                    project_id, email
                )
                invitee = await self.user_repository.find_by_email(email)
                await self._revoke_invite_tokens(project_id, email, invitee)

                logfire.info(
                    "Members removed",
                    project_id=str(project_id),
                    target_email=email,
                    removed=removed,
                )
                return f"Member {email} removed from project {project.name.root}"

    async def verify(self, token: str) -> TokenVerification:
        """Check an invite token without consuming it.

        Args:
            token: Invite token value

        Returns:
            Verification result

        Raises:
            BadRequestError: If the token is missing, expired, or not an invite
            InternalError: If the store fails
        """
        with logfire.span("membership_service.verify", token=mask_token(token)):
            with translate_errors(
                "membership_service.verify",
                "There was an error verifying the invitation. Please try again later",
            ):
                invite = await self._load_valid_invite(token)
                return TokenVerification(
                    is_verified=True, is_user=invite.target_user_id is not None
                )

    async def _load_valid_invite(self, token: str) -> Token:
        try:
            value = TokenValue(token)
        except ValidationError:
            raise BadRequestError(INVALID_TOKEN_MESSAGE)

        invite = await self.token_repository.find_by_value(value)
        if invite is None or not invite.is_valid_invite():
            logfire.warn(
                "Invite token rejected",
                token=mask_token(token),
                found=invite is not None,
            )
            raise BadRequestError(INVALID_TOKEN_MESSAGE)
        return invite

    async def _resolve_target(self, invite: Token, accepter_id: UserId) -> str | None:
        """Check the accepter is the invite target.

        Returns:
            The target email for email-bound invites, None for user-bound ones
        """
        if invite.target_user_id is not None:
            if invite.target_user_id != accepter_id:
                logfire.warn(
                    "Invite accepted by wrong user",
                    accepter_id=str(accepter_id),
                    target_user_id=str(invite.target_user_id),
                )
                raise BadRequestError(WRONG_RECIPIENT_MESSAGE)
            return None

        accepter = await self.user_repository.find_by_id(accepter_id)
        if accepter is None:
            raise NotFoundError("User", str(accepter_id))
        if accepter.email.lower() != invite.target_email:
            logfire.warn(
                "Invite email does not match accepter",
                accepter_id=str(accepter_id),
            )
            raise BadRequestError(WRONG_RECIPIENT_MESSAGE)
        return invite.target_email

    async def _find_invited_membership(
        self, project_id: ProjectId, user_id: UserId, contact_email: str | None
    ) -> Membership | None:
        membership = await self.membership_repository.find_by_project_and_user(
            user_id, project_id
        )
        if membership is not None or contact_email is None:
            return membership

        membership = await self.membership_repository.find_by_project_and_email(
            contact_email, project_id
        )
        if membership is not None and membership.user_id in (None, user_id):
            return membership
        return None

    async def _ensure_pending_membership(
        self, project_id: ProjectId, email: str, invitee: User | None
    ) -> Membership:
        """Create a MEMBER/PENDING row unless the target already has one."""
        existing = None
        if invitee is not None:
            existing = await self.membership_repository.find_by_project_and_user(
                invitee.id, project_id
            )
        if existing is None:
            existing = await self.membership_repository.find_by_project_and_email(
                email, project_id
            )

        if existing is not None:
            if invitee is not None and existing.user_id is None:
                # Email-keyed invitee has since registered
                return await self.membership_repository.save(
                    existing.model_copy(
                        update={"identity": RegisteredMember(user_id=invitee.id)}
                    )
                )
            logfire.info(
                "Membership already exists",
                project_id=str(project_id),
                email=email,
                status=existing.status.value,
            )
            return existing

        membership = Membership(
            id=MembershipId(uuid4()),
            project_id=project_id,
            identity=(
                RegisteredMember(user_id=invitee.id)
                if invitee is not None
                else UnregisteredMember(email=email)
            ),
            email=email,
            role=Role.MEMBER,
            status=MembershipStatus.PENDING,
        )
        return await self.membership_repository.save(membership)

    async def _revoke_invite_tokens(
        self, project_id: ProjectId, email: str, invitee: User | None
    ) -> None:
        """Delete live invite tokens for this target in the project."""
        stale = [await self.token_repository.find_by_email_and_project(email, project_id)]
        if invitee is not None:
            stale.append(
                await self.token_repository.find_by_user_and_project(
                    invitee.id, project_id
                )
            )
        for token in stale:
            if token is not None:
                await self.token_repository.delete(token.id)
                logfire.info(
                    "Invite token revoked",
                    project_id=str(project_id),
                    token=mask_token(token.value.root),
                )

    async def _notify(
        self, email: str, inviter_name: str, project_name: str, token: Token
    ) -> None:
        """Send the invite email; failures are logged, never raised."""
        try:
            await self.notifier.send_invite(
                email, inviter_name, project_name, token.value.root
            )
        except Exception as e:
            logfire.error(
                "Invite notification failed",
                target_email=email,
                project_id=str(token.project_id),
                error=str(e),
                error_type=type(e).__name__,
            )
