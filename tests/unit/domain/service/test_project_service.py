"""Unit tests for ProjectService."""

from uuid import uuid4

import pytest

from hub.domain.error import BadRequestError, ForbiddenError, NotFoundError
from hub.domain.repository import MembershipRepository, ProjectRepository
from hub.domain.service import MembershipService, ProjectService
from hub.domain.value import MembershipStatus, ProjectId, Role, UserId
from tests.factories import create_project, create_user, get_mailbox
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateProject:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_project_makes_creator_admin(self, unit_env):
        """The creator becomes the sole ADMIN/ACCEPTED member."""
        # Arrange
        service = await unit_env.get(ProjectService)
        membership_repo = await unit_env.get(MembershipRepository)
        alice = await create_user(unit_env, "Alice", email="Alice@Example.com")

        # Act
        view = await service.create("  Apollo  ", alice.id)

        # Assert
        assert view.project.name.root == "Apollo"
        assert view.project.owner_id == alice.id
        assert len(view.members) == 1
        member = view.members[0]
        assert member.email == "alice@example.com"
        assert member.name == "Alice"
        assert member.role == Role.ADMIN
        assert member.status == MembershipStatus.ACCEPTED

        membership = await membership_repo.find_by_project_and_user(
            alice.id, view.project.id
        )
        assert membership.accepted_at == view.project.created_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    async def test_create_project_invalid_name(self, unit_env, name):
        """Names must be 1-100 characters after trimming."""
        service = await unit_env.get(ProjectService)
        alice = await create_user(unit_env, "Alice")

        with pytest.raises(BadRequestError, match="1-100 characters"):
            await service.create(name, alice.id)

    @pytest.mark.asyncio
    async def test_create_project_unknown_user(self, unit_env):
        """A caller with no profile cannot create projects."""
        service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        stranger = UserId(uuid4())

        with pytest.raises(BadRequestError, match="does not exist"):
            await service.create("Apollo", stranger)

        assert await project_repo.find_by_user(stranger) == []


class TestReadProjects:
    """Tests for find_by_id and find_by_user."""

    @pytest.mark.asyncio
    async def test_find_by_id_lists_roster(self, unit_env):
        """The roster shows registered names and bare invitee addresses."""
        # Arrange
        service = await unit_env.get(ProjectService)
        membership_service = await unit_env.get(MembershipService)
        alice = await create_user(unit_env, "Alice")
        view = await create_project(unit_env, alice)
        await membership_service.invite(alice.id, view.project.id, "bob@example.com")

        # Act
        result = await service.find_by_id(view.project.id, alice.id)

        # Assert
        assert [(m.email, m.name, m.status) for m in result.members] == [
            ("alice@example.com", "Alice", MembershipStatus.ACCEPTED),
            ("bob@example.com", None, MembershipStatus.PENDING),
        ]

    @pytest.mark.asyncio
    async def test_find_by_id_requires_accepted_membership(self, unit_env):
        """Pending invitees and strangers cannot read a project."""
        # Arrange
        service = await unit_env.get(ProjectService)
        membership_service = await unit_env.get(MembershipService)
        alice = await create_user(unit_env, "Alice")
        bob = await create_user(unit_env, "Bob")
        mallory = await create_user(unit_env, "Mallory")
        view = await create_project(unit_env, alice)
        await membership_service.invite(alice.id, view.project.id, bob.email)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.find_by_id(view.project.id, bob.id)
        with pytest.raises(ForbiddenError):
            await service.find_by_id(view.project.id, mallory.id)

    @pytest.mark.asyncio
    async def test_find_by_id_missing_project(self, unit_env):
        """An unknown project id raises NotFoundError."""
        service = await unit_env.get(ProjectService)
        alice = await create_user(unit_env, "Alice")

        with pytest.raises(NotFoundError):
            await service.find_by_id(ProjectId(uuid4()), alice.id)

    @pytest.mark.asyncio
    async def test_find_by_user_includes_joined_projects(self, unit_env):
        """Owned and accepted projects are listed; pending ones are not."""
        # Arrange
        service = await unit_env.get(ProjectService)
        membership_service = await unit_env.get(MembershipService)
        mailbox = await get_mailbox(unit_env)
        alice = await create_user(unit_env, "Alice")
        bob = await create_user(unit_env, "Bob")

        owned = await create_project(unit_env, bob, "Bob's notes")
        joined = await create_project(unit_env, alice, "Apollo")
        pending = await create_project(unit_env, alice, "Gemini")
        await membership_service.invite(alice.id, joined.project.id, bob.email)
        await membership_service.accept(mailbox.last_token_for(bob.email), bob.id)
        await membership_service.invite(alice.id, pending.project.id, bob.email)

        # Act
        views = await service.find_by_user(bob.id)

        # Assert
        assert [v.project.id for v in views] == [owned.project.id, joined.project.id]

    @pytest.mark.asyncio
    async def test_find_by_user_without_projects(self, unit_env):
        service = await unit_env.get(ProjectService)
        alice = await create_user(unit_env, "Alice")

        assert await service.find_by_user(alice.id) == []


class TestUpdateProject:
    """Tests for update method."""

    @pytest.mark.asyncio
    async def test_admin_renames_project(self, unit_env):
        """An admin can rename; updated_at moves forward."""
        # Arrange
        service = await unit_env.get(ProjectService)
        alice = await create_user(unit_env, "Alice")
        view = await create_project(unit_env, alice)

        # Act
        result = await service.update(view.project.id, alice.id, "Artemis")

        # Assert
        assert result.project.name.root == "Artemis"
        assert result.project.updated_at >= view.project.updated_at
        assert result.project.created_at == view.project.created_at

        reloaded = await service.find_by_id(view.project.id, alice.id)
        assert reloaded.project.name.root == "Artemis"

    @pytest.mark.asyncio
    async def test_member_cannot_rename(self, unit_env):
        """Accepted MEMBERs are forbidden from renaming."""
        # Arrange
        service = await unit_env.get(ProjectService)
        membership_service = await unit_env.get(MembershipService)
        mailbox = await get_mailbox(unit_env)
        alice = await create_user(unit_env, "Alice")
        bob = await create_user(unit_env, "Bob")
        view = await create_project(unit_env, alice)
        await membership_service.invite(alice.id, view.project.id, bob.email)
        await membership_service.accept(mailbox.last_token_for(bob.email), bob.id)

        # Act & Assert
        with pytest.raises(ForbiddenError, match="Only project admins"):
            await service.update(view.project.id, bob.id, "Hijacked")

    @pytest.mark.asyncio
    async def test_rename_to_invalid_name(self, unit_env):
        service = await unit_env.get(ProjectService)
        alice = await create_user(unit_env, "Alice")
        view = await create_project(unit_env, alice)

        with pytest.raises(BadRequestError):
            await service.update(view.project.id, alice.id, "")


class TestDeleteProject:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_admin_deletes_project(self, unit_env):
        """After deletion the project can no longer be found."""
        # Arrange
        service = await unit_env.get(ProjectService)
        alice = await create_user(unit_env, "Alice")
        view = await create_project(unit_env, alice)

        # Act
        await service.delete(view.project.id, alice.id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.find_by_id(view.project.id, alice.id)

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        service = await unit_env.get(ProjectService)
        alice = await create_user(unit_env, "Alice")
        mallory = await create_user(unit_env, "Mallory")
        view = await create_project(unit_env, alice)

        with pytest.raises(ForbiddenError):
            await service.delete(view.project.id, mallory.id)
