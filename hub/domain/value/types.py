"""Enums, validated primitives and member identities."""

import re
from enum import Enum
from typing import Annotated, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from hub.domain.value.identifiers import UserId

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, compared by value."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Value object wrapping one primitive, read through ``.root``."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


class Role(str, Enum):
    """Role of a member within a project."""

    ADMIN = "admin"
    MEMBER = "member"


class MembershipStatus(str, Enum):
    """Status of a project membership."""

    PENDING = "pending"
    ACCEPTED = "accepted"


class TokenKind(str, Enum):
    """What a stored token grants."""

    INVITE = "invite"
    PASSWORD_RESET = "password_reset"
    OTHER = "other"


class Email(RootValueObject[str]):
    """Normalised email address (trimmed, lower-case)."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalise and validate the address shape."""
        v = v.strip().lower()
        if len(v) > 255 or not EMAIL_PATTERN.match(v):
            raise ValueError(f"Invalid email address: {v!r}")
        return v


class TokenValue(RootValueObject[str]):
    """Opaque token value delivered to users."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v


class ProjectName(RootValueObject[str]):
    """Display name of a project, 1-100 characters."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Project name must be 1-100 characters")
        return v


class RegisteredMember(ValueObject):
    """Membership identity of a user who has an account."""

    kind: Literal["registered"] = "registered"
    user_id: UserId


class UnregisteredMember(ValueObject):
    """Membership identity of an invitee known only by email.

    Rebound to a RegisteredMember when the invitee accepts.
    """

    kind: Literal["unregistered"] = "unregistered"
    email: str


MemberIdentity = Annotated[
    Union[RegisteredMember, UnregisteredMember], Field(discriminator="kind")
]
