"""End-to-end tests for project and membership endpoints."""

import httpx
import pytest
import pytest_asyncio

from hub.config import AuthSettings
from hub.domain.repository import TokenRepository
from hub.interface.api.app import create_app
from hub.util.jwt import create_token
from tests.di import build_test_container
from tests.factories import auth_headers, create_user, get_mailbox


@pytest_asyncio.fixture
async def container():
    """Test container shared by the app and the test body."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client talking to the app in-process."""
    app_instance = create_app(container)
    transport = httpx.ASGITransport(app=app_instance)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def _register(container, name, email=None):
    """Create a user profile and return it with its auth headers."""
    async with container() as env:
        user = await create_user(env, name, email)
    auth_settings = await container.get(AuthSettings)
    return user, auth_headers(user, auth_settings)


async def _create_project(client, headers, name="Apollo") -> dict:
    response = await client.post("/projects", json={"name": name}, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestAuthentication:
    """Requests without valid credentials are rejected."""

    @pytest.mark.asyncio
    async def test_health_is_public(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_create_project_without_auth(self, client):
        """Should return 401 when not authenticated."""
        response = await client.post("/projects", json={"name": "Apollo"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    @pytest.mark.asyncio
    async def test_invalid_token(self, client):
        response = await client.get(
            "/projects", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    @pytest.mark.asyncio
    async def test_cookie_auth(self, client, container):
        """The auth_token cookie is accepted when no header is sent."""
        # Arrange
        alice, _ = await _register(container, "Alice")
        auth_settings = await container.get(AuthSettings)
        client.cookies.set("auth_token", create_token(str(alice.id), auth_settings))

        # Act
        response = await client.get("/projects")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"projects": []}

    @pytest.mark.asyncio
    async def test_accept_requires_auth(self, client):
        response = await client.post("/projects/members/accept", params={"token": "x"})

        assert response.status_code == 401


class TestProjectEndpoints:
    """CRUD over /projects."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, client, container):
        # Arrange
        _, headers = await _register(container, "Alice")

        # Act
        created = await _create_project(client, headers)
        listed = await client.get("/projects", headers=headers)

        # Assert
        assert created["name"] == "Apollo"
        assert created["members"] == [
            {
                "project_id": created["id"],
                "email": "alice@example.com",
                "name": "Alice",
                "role": "admin",
                "status": "accepted",
            }
        ]
        assert [p["id"] for p in listed.json()["projects"]] == [created["id"]]

    @pytest.mark.asyncio
    async def test_invalid_name(self, client, container):
        _, headers = await _register(container, "Alice")

        response = await client.post("/projects", json={"name": ""}, headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Project name must be 1-100 characters"

    @pytest.mark.asyncio
    async def test_rename_and_delete(self, client, container):
        # Arrange
        _, headers = await _register(container, "Alice")
        project = await _create_project(client, headers)
        url = f"/projects/{project['id']}"

        # Act
        renamed = await client.put(url, json={"name": "Artemis"}, headers=headers)
        deleted = await client.delete(url, headers=headers)
        missing = await client.get(url, headers=headers)

        # Assert
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "Artemis"
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Project deleted"}
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_stranger_cannot_read(self, client, container):
        _, alice_headers = await _register(container, "Alice")
        _, mallory_headers = await _register(container, "Mallory")
        project = await _create_project(client, alice_headers)

        response = await client.get(
            f"/projects/{project['id']}", headers=mallory_headers
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "You are not a member of this project"

    @pytest.mark.asyncio
    async def test_malformed_project_id(self, client, container):
        _, headers = await _register(container, "Alice")

        response = await client.get("/projects/not-a-uuid", headers=headers)

        assert response.status_code == 400


class TestInvitationFlow:
    """Invite, verify, accept and remove over HTTP."""

    @pytest.mark.asyncio
    async def test_invite_unregistered_then_register_and_accept(
        self, client, container
    ):
        """An address without an account is invited, signs up, then accepts."""
        # Arrange
        _, alice_headers = await _register(container, "Alice")
        project = await _create_project(client, alice_headers)
        mailbox = await get_mailbox(container)

        # Act - invite
        invited = await client.post(
            f"/projects/{project['id']}/members",
            json={"email": "bob@example.com"},
            headers=alice_headers,
        )
        token = mailbox.last_token_for("bob@example.com")

        # Act - verify without authentication
        verified = await client.get(
            "/projects/members/verify-invite", params={"token": token}
        )

        # Act - Bob registers and accepts
        _, bob_headers = await _register(container, "Bob")
        accepted = await client.post(
            "/projects/members/accept", params={"token": token}, headers=bob_headers
        )

        # Assert
        assert invited.status_code == 200
        assert invited.json() == {"message": "Invitation sent to bob@example.com"}
        assert verified.json() == {"is_verified": True, "is_user": False}
        assert accepted.status_code == 200
        assert accepted.json() == {"message": "Invitation accepted"}

        roster = await client.get(f"/projects/{project['id']}", headers=bob_headers)
        assert roster.status_code == 200
        assert {(m["email"], m["status"]) for m in roster.json()["members"]} == {
            ("alice@example.com", "accepted"),
            ("bob@example.com", "accepted"),
        }

        reused = await client.get(
            "/projects/members/verify-invite", params={"token": token}
        )
        assert reused.status_code == 400
        assert reused.json()["detail"].startswith("Invalid or expired token")

    @pytest.mark.asyncio
    async def test_accept_by_wrong_user(self, client, container):
        # Arrange
        _, alice_headers = await _register(container, "Alice")
        carol, _ = await _register(container, "Carol")
        _, mallory_headers = await _register(container, "Mallory")
        project = await _create_project(client, alice_headers)
        mailbox = await get_mailbox(container)
        await client.post(
            f"/projects/{project['id']}/members",
            json={"email": carol.email},
            headers=alice_headers,
        )

        # Act
        response = await client.post(
            "/projects/members/accept",
            params={"token": mailbox.last_token_for(carol.email)},
            headers=mallory_headers,
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"] == (
            "You can only accept invitations that were sent to you"
        )

    @pytest.mark.asyncio
    async def test_member_cannot_invite_or_remove(self, client, container):
        """Scenario: an accepted non-admin gets 403 and nothing changes."""
        # Arrange
        _, alice_headers = await _register(container, "Alice")
        bob, bob_headers = await _register(container, "Bob")
        project = await _create_project(client, alice_headers)
        members_url = f"/projects/{project['id']}/members"
        mailbox = await get_mailbox(container)
        await client.post(members_url, json={"email": bob.email}, headers=alice_headers)
        await client.post(
            "/projects/members/accept",
            params={"token": mailbox.last_token_for(bob.email)},
            headers=bob_headers,
        )

        # Act
        invite = await client.post(
            members_url, json={"email": "eve@example.com"}, headers=bob_headers
        )
        remove = await client.delete(
            members_url,
            params={"member_email": "alice@example.com"},
            headers=bob_headers,
        )

        # Assert
        assert invite.status_code == 403
        assert remove.status_code == 403
        roster = await client.get(f"/projects/{project['id']}", headers=alice_headers)
        assert len(roster.json()["members"]) == 2

    @pytest.mark.asyncio
    async def test_invite_into_missing_project(self, client, container):
        _, headers = await _register(container, "Alice")

        response = await client.post(
            "/projects/00000000-0000-0000-0000-000000000000/members",
            json={"email": "bob@example.com"},
            headers=headers,
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invite_malformed_email(self, client, container):
        _, headers = await _register(container, "Alice")
        project = await _create_project(client, headers)

        response = await client.post(
            f"/projects/{project['id']}/members",
            json={"email": "bob"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid email address: bob"

    @pytest.mark.asyncio
    async def test_remove_member(self, client, container):
        # Arrange
        _, headers = await _register(container, "Alice")
        project = await _create_project(client, headers)
        members_url = f"/projects/{project['id']}/members"
        await client.post(members_url, json={"email": "bob@example.com"}, headers=headers)

        # Act
        response = await client.delete(
            members_url, params={"member_email": "bob@example.com"}, headers=headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "message": "Member bob@example.com removed from project Apollo"
        }
        roster = await client.get(f"/projects/{project['id']}", headers=headers)
        assert [m["email"] for m in roster.json()["members"]] == ["alice@example.com"]

    @pytest.mark.asyncio
    async def test_store_failure_returns_500(self, client, container, monkeypatch):
        """Unexpected failures surface as a generic 500."""
        # Arrange
        _, headers = await _register(container, "Alice")
        project = await _create_project(client, headers)
        token_repo = await container.get(TokenRepository)

        async def broken_save(token):
            raise RuntimeError("disk full")

        monkeypatch.setattr(token_repo, "save", broken_save)

        # Act
        response = await client.post(
            f"/projects/{project['id']}/members",
            json={"email": "bob@example.com"},
            headers=headers,
        )

        # Assert
        assert response.status_code == 500
        assert "disk full" not in response.json()["detail"]
