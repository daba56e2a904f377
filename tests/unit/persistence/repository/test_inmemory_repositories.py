"""Unit tests for in-memory repositories used by the test container."""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from hub.domain.model import Membership, Token
from hub.domain.model.common import utcnow
from hub.domain.value import (
    MembershipId,
    MembershipStatus,
    ProjectId,
    RegisteredMember,
    TokenId,
    TokenKind,
    TokenValue,
    UnregisteredMember,
    UserId,
)
from hub.persistence.repository.inmemory import (
    InMemoryMembershipRepository,
    InMemoryTokenRepository,
)


def _membership(project_id, email, user_id=None) -> Membership:
    return Membership(
        id=MembershipId(uuid4()),
        project_id=project_id,
        identity=(
            RegisteredMember(user_id=user_id)
            if user_id
            else UnregisteredMember(email=email)
        ),
        email=email,
    )


def _invite(project_id, value="tok", email=None, user_id=None) -> Token:
    return Token(
        id=TokenId(uuid4()),
        value=TokenValue(value),
        kind=TokenKind.INVITE,
        project_id=project_id,
        target_email=email,
        target_user_id=user_id,
        expires_at=utcnow() + timedelta(days=1),
    )


class TestInMemoryMembershipRepository:
    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self):
        """Two rows for the same address in one project violate uniqueness."""
        repo = InMemoryMembershipRepository()
        project_id = ProjectId(uuid4())
        await repo.save(_membership(project_id, "bob@example.com"))

        with pytest.raises(IntegrityError):
            await repo.save(_membership(project_id, "bob@example.com"))

    @pytest.mark.asyncio
    async def test_duplicate_user_rejected(self):
        repo = InMemoryMembershipRepository()
        project_id = ProjectId(uuid4())
        user_id = UserId(uuid4())
        await repo.save(_membership(project_id, "bob@example.com", user_id))

        with pytest.raises(IntegrityError):
            await repo.save(_membership(project_id, "robert@example.com", user_id))

    @pytest.mark.asyncio
    async def test_same_email_in_other_project_allowed(self):
        repo = InMemoryMembershipRepository()
        await repo.save(_membership(ProjectId(uuid4()), "bob@example.com"))
        await repo.save(_membership(ProjectId(uuid4()), "bob@example.com"))

    @pytest.mark.asyncio
    async def test_update_status_sets_accepted_at(self):
        # Arrange
        repo = InMemoryMembershipRepository()
        project_id = ProjectId(uuid4())
        user_id = UserId(uuid4())
        await repo.save(_membership(project_id, "bob@example.com", user_id))

        # Act
        await repo.update_status(user_id, project_id, MembershipStatus.ACCEPTED)

        # Assert
        membership = await repo.find_by_project_and_user(user_id, project_id)
        assert membership.status == MembershipStatus.ACCEPTED
        assert membership.accepted_at is not None

    @pytest.mark.asyncio
    async def test_list_by_user_filters_status(self):
        repo = InMemoryMembershipRepository()
        user_id = UserId(uuid4())
        accepted_project = ProjectId(uuid4())
        await repo.save(_membership(accepted_project, "bob@example.com", user_id))
        await repo.save(_membership(ProjectId(uuid4()), "bob@example.com", user_id))
        await repo.update_status(user_id, accepted_project, MembershipStatus.ACCEPTED)

        accepted = await repo.list_by_user(user_id, MembershipStatus.ACCEPTED)

        assert [m.project_id for m in accepted] == [accepted_project]
        assert len(await repo.list_by_user(user_id)) == 2

    @pytest.mark.asyncio
    async def test_delete_by_email_counts_rows(self):
        repo = InMemoryMembershipRepository()
        project_id = ProjectId(uuid4())
        await repo.save(_membership(project_id, "bob@example.com"))

        assert await repo.delete_by_email(project_id, "bob@example.com") == 1
        assert await repo.delete_by_email(project_id, "bob@example.com") == 0


class TestInMemoryTokenRepository:
    @pytest.mark.asyncio
    async def test_duplicate_value_rejected(self):
        repo = InMemoryTokenRepository()
        await repo.save(_invite(ProjectId(uuid4()), "same", email="a@example.com"))

        with pytest.raises(IntegrityError):
            await repo.save(_invite(ProjectId(uuid4()), "same", email="b@example.com"))

    @pytest.mark.asyncio
    async def test_second_live_invite_for_target_rejected(self):
        """Only one live invite per project and target."""
        repo = InMemoryTokenRepository()
        project_id = ProjectId(uuid4())
        await repo.save(_invite(project_id, "first", email="bob@example.com"))

        with pytest.raises(IntegrityError):
            await repo.save(_invite(project_id, "second", email="bob@example.com"))

    @pytest.mark.asyncio
    async def test_lookup_by_target(self):
        # Arrange
        repo = InMemoryTokenRepository()
        project_id = ProjectId(uuid4())
        user_id = UserId(uuid4())
        by_email = await repo.save(_invite(project_id, "e", email="bob@example.com"))
        by_user = await repo.save(_invite(project_id, "u", user_id=user_id))

        # Act & Assert
        assert await repo.find_by_email_and_project("bob@example.com", project_id) == (
            by_email
        )
        assert await repo.find_by_user_and_project(user_id, project_id) == by_user
        assert (
            await repo.find_by_email_and_project(
                "bob@example.com", project_id, TokenKind.OTHER
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = InMemoryTokenRepository()
        token = await repo.save(_invite(ProjectId(uuid4()), email="bob@example.com"))

        await repo.delete(token.id)

        assert await repo.find_by_value(token.value) is None
