"""Helpers for building test data through the DI container."""

from uuid import uuid4

from dishka import AsyncContainer

from hub.adapter.email import EmailNotifier, MockEmailNotifier
from hub.config import AuthSettings
from hub.domain.model import User
from hub.domain.repository import UserRepository
from hub.domain.service import ProjectService, ProjectView
from hub.domain.value import UserId
from hub.util.jwt import create_token


async def create_user(
    env: AsyncContainer, name: str = "Alice", email: str | None = None
) -> User:
    """Save a user profile in the user directory."""
    repo = await env.get(UserRepository)
    user = User(
        id=UserId(uuid4()),
        email=email or f"{name.lower()}@example.com",
        name=name,
    )
    return await repo.save(user)


async def create_project(
    env: AsyncContainer, owner: User, name: str = "Apollo"
) -> ProjectView:
    """Create a project administered by ``owner``."""
    project_service = await env.get(ProjectService)
    return await project_service.create(name, owner.id)


async def get_mailbox(env: AsyncContainer) -> MockEmailNotifier:
    notifier = await env.get(EmailNotifier)
    assert isinstance(notifier, MockEmailNotifier)
    return notifier


def auth_headers(user: User, auth_settings: AuthSettings) -> dict[str, str]:
    """Authorization header for a user, signed with the app's secret."""
    token = create_token(str(user.id), auth_settings)
    return {"Authorization": f"Bearer {token}"}
