"""Invitation email clients.

Invitations are rendered as HTML and posted to an HTTP email API.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from html import escape

import httpx
import logfire

from hub.adapter.error import EmailDeliveryError
from hub.config import EmailSettings
from hub.domain.service.notifier import InviteNotifier

INVITE_SUBJECT = "Project Invite"


def render_invite_body(inviter_name: str, project_name: str, invite_link: str) -> str:
    """Render the HTML body of a project invitation."""
    year = datetime.now(timezone.utc).year
    return f"""
      <div style="font-family: Arial, sans-serif; max-width: 480px; margin: 0 auto; padding: 32px; background-color: #ffffff; border-radius: 8px;">
        <h2 style="color: #333333;">Project Invitation</h2>
        <p style="font-size: 16px; color: #555555;">
          Hello,<br><br>
          {escape(inviter_name)} has invited you to join the project <strong>{escape(project_name)}</strong>. To accept the invitation, please click the link below:
        </p>
        <div style="font-size: 18px; font-weight: bold; color: #2b6cb0; text-align: center;">
          <a href="{escape(invite_link, quote=True)}" style="color: #2b6cb0; text-decoration: none;">Accept invitation</a>
        </div>
        <p style="font-size: 14px; color: #999999; text-align: center; margin-top: 32px;">
          &copy; {year} InsightHub App. All rights reserved.
        </p>
      </div>
    """


class EmailNotifier(InviteNotifier):
    """Base class for email notifiers.

    Provides type distinction for dependency injection.
    """

    pass


class HttpEmailNotifier(EmailNotifier):
    """Sends invitations through an HTTP email API."""

    def __init__(
        self,
        settings: EmailSettings,
        invite_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize email notifier.

        Args:
            settings: Email API settings
            invite_url: Frontend URL prefix the token is appended to
            transport: Optional httpx transport, used by tests
        """
        self.settings = settings
        self.invite_url = invite_url
        self.transport = transport

    async def send_invite(
        self, to_email: str, inviter_name: str, project_name: str, token: str
    ) -> None:
        """Send a project invitation email.

        Raises:
            EmailDeliveryError: If the email API fails
        """
        invite_link = f"{self.invite_url}{token}"
        body = render_invite_body(inviter_name, project_name, invite_link)

        if not self.settings.enabled:
            logfire.info(
                "Email disabled, invitation not sent",
                to_email=to_email,
                project_name=project_name,
            )
            return

        headers = {}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.settings.api_url,
                    json={
                        "from": self.settings.sender,
                        "to": to_email,
                        "subject": INVITE_SUBJECT,
                        "html": body,
                    },
                    headers=headers,
                    timeout=self.settings.timeout,
                )

                if response.status_code >= 300:
                    logfire.error(
                        "Email API rejected invitation",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise EmailDeliveryError(
                        f"Email API returned {response.status_code}",
                        status_code=response.status_code,
                    )

        except httpx.HTTPError as e:
            logfire.error("Email API HTTP error", error=str(e))
            raise EmailDeliveryError(f"HTTP error sending invitation: {e}")

        logfire.info("Invitation email sent", to_email=to_email)


@dataclass
class SentEmail:
    to_email: str
    inviter_name: str
    project_name: str
    token: str


class MockEmailNotifier(EmailNotifier):
    """Mock notifier for testing.

    Records invitations instead of sending them. Set ``fail`` to make
    every send raise.
    """

    def __init__(self) -> None:
        self.sent: list[SentEmail] = []
        self.fail = False

    async def send_invite(
        self, to_email: str, inviter_name: str, project_name: str, token: str
    ) -> None:
        if self.fail:
            raise EmailDeliveryError("Mock email failure")
        self.sent.append(SentEmail(to_email, inviter_name, project_name, token))

    def last_token_for(self, to_email: str) -> str | None:
        """Token of the most recent invitation sent to an address."""
        for email in reversed(self.sent):
            if email.to_email == to_email:
                return email.token
        return None
