"""Token entity.

Tokens are opaque, single-use credentials. Invite tokens bind a project to
either a user id or an email address and expire after a fixed window.
"""

from datetime import datetime
from typing import Optional

from pydantic import model_validator

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import ProjectId, TokenId, TokenKind, TokenValue, UserId


class Token(DomainModel):
    """Stored token.

    Business rules:
    - An INVITE token targets exactly one of a user id or an email
    - At most one live INVITE token per (project, target)
    - Expired tokens are invalid even before they are deleted
    """

    id: TokenId
    value: TokenValue
    kind: TokenKind
    project_id: Optional[ProjectId] = None
    target_user_id: Optional[UserId] = None
    target_email: Optional[str] = None
    expires_at: datetime

    @model_validator(mode="after")
    def check_invite_target(self) -> "Token":
        """Invite tokens must name exactly one target."""
        if self.kind == TokenKind.INVITE:
            if (self.target_user_id is None) == (self.target_email is None):
                raise ValueError(
                    "Invite tokens must target exactly one of a user id or an email"
                )
            if self.project_id is None:
                raise ValueError("Invite tokens must reference a project")
        return self

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utcnow()) > self.expires_at

    def is_valid_invite(self, now: datetime | None = None) -> bool:
        """Whether this token can still be used to verify or accept an invite."""
        return self.kind == TokenKind.INVITE and not self.is_expired(now)
