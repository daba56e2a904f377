"""Unit tests for row <-> entity mapping."""

from datetime import timedelta
from uuid import uuid4

from hub.domain.model import Membership, Project, Token, User
from hub.domain.model.common import utcnow
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
from hub.persistence.mappers import (
    membership_to_dict,
    project_to_dict,
    row_to_membership,
    row_to_project,
    row_to_token,
    row_to_user,
    token_to_dict,
    user_to_dict,
)


def _membership(identity, email="bob@example.com") -> Membership:
    return Membership(
        id=MembershipId(uuid4()),
        project_id=ProjectId(uuid4()),
        identity=identity,
        email=email,
    )


class TestMembershipMapping:
    def test_unregistered_member_has_null_user_id(self):
        membership = _membership(UnregisteredMember(email="bob@example.com"))

        row = membership_to_dict(membership)

        assert row["user_id"] is None
        assert row["email"] == "bob@example.com"
        assert row["role"] == "member"
        assert row["status"] == "pending"
        assert row_to_membership(row) == membership

    def test_registered_member_keeps_user_id(self):
        user_id = UserId(uuid4())
        membership = _membership(RegisteredMember(user_id=user_id)).model_copy(
            update={
                "role": Role.ADMIN,
                "status": MembershipStatus.ACCEPTED,
                "accepted_at": utcnow(),
            }
        )

        row = membership_to_dict(membership)

        assert row["user_id"] == user_id
        restored = row_to_membership(row)
        assert restored.identity == RegisteredMember(user_id=user_id)
        assert restored == membership

    def test_string_ids_from_driver(self):
        """Rows may carry UUIDs as strings."""
        user_id = uuid4()
        row = membership_to_dict(_membership(UnregisteredMember(email="x@y.io")))
        row.update(
            id=str(row["id"]),
            project_id=str(row["project_id"]),
            user_id=str(user_id),
        )

        restored = row_to_membership(row)

        assert restored.identity == RegisteredMember(user_id=UserId(user_id))
        assert restored.user_id == user_id


class TestTokenMapping:
    def test_email_invite(self):
        token = Token(
            id=TokenId(uuid4()),
            value=TokenValue("abc123"),
            kind=TokenKind.INVITE,
            project_id=ProjectId(uuid4()),
            target_email="bob@example.com",
            expires_at=utcnow() + timedelta(days=15),
        )

        row = token_to_dict(token)

        assert row["value"] == "abc123"
        assert row["kind"] == "invite"
        assert row["target_user_id"] is None
        assert row_to_token(row) == token

    def test_user_invite(self):
        token = Token(
            id=TokenId(uuid4()),
            value=TokenValue("def456"),
            kind=TokenKind.INVITE,
            project_id=ProjectId(uuid4()),
            target_user_id=UserId(uuid4()),
            expires_at=utcnow() + timedelta(days=15),
        )

        assert row_to_token(token_to_dict(token)) == token


def test_project_round_trip():
    project = Project(
        id=ProjectId(uuid4()),
        name=ProjectName("Apollo"),
        owner_id=UserId(uuid4()),
    )

    row = project_to_dict(project)

    assert row["name"] == "Apollo"
    assert row_to_project(row) == project


def test_user_round_trip():
    user = User(id=UserId(uuid4()), email="alice@example.com", name="Alice")

    assert row_to_user(user_to_dict(user)) == user
