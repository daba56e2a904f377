"""Row <-> entity conversion for the Core tables.

Entities are frozen pydantic models, so rows are mapped by hand rather than
through the ORM. The membership identity is stored as nullable
``user_id`` plus ``email`` columns.
"""

from typing import Any, Dict
from uuid import UUID

from hub.domain.model import Membership, Project, Token, User
from hub.domain.value import (
    MembershipId,
    MembershipStatus,
    ProjectId,
    ProjectName,
    RegisteredMember,
    Role,
    TokenId,
    TokenKind,
    TokenValue,
    UnregisteredMember,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        name=row["name"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return user.model_dump()


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model.

    Args:
        row: Database row as dict

    Returns:
        Project domain model
    """
    return Project(
        id=ProjectId(_uuid(row["id"])),
        name=ProjectName(row["name"]),
        owner_id=UserId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    # ProjectName dumps to its root string
    return project.model_dump()


def row_to_membership(row: Dict[str, Any]) -> Membership:
    """Convert database row to Membership domain model.

    A NULL ``user_id`` marks a member known only by email.

    Args:
        row: Database row as dict

    Returns:
        Membership domain model
    """
    user_id = _optional_uuid(row.get("user_id"))
    return Membership(
        id=MembershipId(_uuid(row["id"])),
        project_id=ProjectId(_uuid(row["project_id"])),
        identity=(
            RegisteredMember(user_id=UserId(user_id))
            if user_id
            else UnregisteredMember(email=row["email"])
        ),
        email=row["email"],
        role=Role(row["role"]),
        status=MembershipStatus(row["status"]),
        created_at=row["created_at"],
        accepted_at=row.get("accepted_at"),
    )


def membership_to_dict(membership: Membership) -> Dict[str, Any]:
    """Convert Membership domain model to database dict.

    Args:
        membership: Membership domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": membership.id,
        "project_id": membership.project_id,
        "user_id": membership.user_id,
        "email": membership.email,
        "role": membership.role.value,
        "status": membership.status.value,
        "created_at": membership.created_at,
        "accepted_at": membership.accepted_at,
    }


def row_to_token(row: Dict[str, Any]) -> Token:
    """Convert database row to Token domain model.

    Args:
        row: Database row as dict

    Returns:
        Token domain model
    """
    project_id = _optional_uuid(row.get("project_id"))
    target_user_id = _optional_uuid(row.get("target_user_id"))
    return Token(
        id=TokenId(_uuid(row["id"])),
        value=TokenValue(row["value"]),
        kind=TokenKind(row["kind"]),
        project_id=ProjectId(project_id) if project_id else None,
        target_user_id=UserId(target_user_id) if target_user_id else None,
        target_email=row.get("target_email"),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
    )


def token_to_dict(token: Token) -> Dict[str, Any]:
    return {
        "id": token.id,
        "value": token.value.root,
        "kind": token.kind.value,
        "project_id": token.project_id,
        "target_user_id": token.target_user_id,
        "target_email": token.target_email,
        "expires_at": token.expires_at,
        "created_at": token.created_at,
    }
