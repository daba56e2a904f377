"""Tests for project use cases."""

from uuid import uuid4

import pytest

from hub.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    ListProjectsRequest,
    ListProjectsUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from hub.domain.error import NotFoundError
from hub.domain.value import MembershipStatus, Role
from tests.factories import create_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProjectUseCases:
    """Request/response mapping for the project CRUD use cases."""

    @pytest.mark.asyncio
    async def test_create_then_get(self, unit_env):
        """A created project is readable by its creator with a one-row roster."""
        # Arrange
        create = await unit_env.get(CreateProjectUseCase)
        get = await unit_env.get(GetProjectUseCase)
        alice = await create_user(unit_env, "Alice")

        # Act
        created = await create.execute(
            CreateProjectRequest(user_id=str(alice.id), name="Apollo")
        )
        fetched = await get.execute(
            GetProjectRequest(project_id=created.id, user_id=str(alice.id))
        )

        # Assert
        assert fetched.id == created.id
        assert fetched.name == "Apollo"
        assert fetched.owner_id == str(alice.id)
        assert len(fetched.members) == 1
        assert fetched.members[0].project_id == created.id
        assert fetched.members[0].role == Role.ADMIN
        assert fetched.members[0].status == MembershipStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_list_update_delete(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateProjectUseCase)
        list_projects = await unit_env.get(ListProjectsUseCase)
        update = await unit_env.get(UpdateProjectUseCase)
        delete = await unit_env.get(DeleteProjectUseCase)
        get = await unit_env.get(GetProjectUseCase)
        alice = await create_user(unit_env, "Alice")
        user_id = str(alice.id)
        created = await create.execute(
            CreateProjectRequest(user_id=user_id, name="Apollo")
        )

        # Act
        updated = await update.execute(
            UpdateProjectRequest(project_id=created.id, user_id=user_id, name="Artemis")
        )
        listed = await list_projects.execute(ListProjectsRequest(user_id=user_id))
        deleted = await delete.execute(
            DeleteProjectRequest(project_id=created.id, user_id=user_id)
        )

        # Assert
        assert updated.name == "Artemis"
        assert [p.name for p in listed.projects] == ["Artemis"]
        assert deleted.message == "Project deleted"
        with pytest.raises(NotFoundError):
            await get.execute(GetProjectRequest(project_id=created.id, user_id=user_id))

    @pytest.mark.asyncio
    async def test_malformed_project_id(self, unit_env):
        """IDs that are not UUIDs raise ValueError for the route to map to 400."""
        get = await unit_env.get(GetProjectUseCase)

        with pytest.raises(ValueError):
            await get.execute(
                GetProjectRequest(project_id="not-a-uuid", user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_user_id(self, unit_env):
        create = await unit_env.get(CreateProjectUseCase)

        with pytest.raises(ValueError):
            await create.execute(CreateProjectRequest(user_id="nope", name="Apollo"))
