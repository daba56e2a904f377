"""Invitation notifier port."""

from abc import ABC, abstractmethod


class InviteNotifier(ABC):
    """Delivers invitation tokens to invitees.

    Implementations live in the adapter layer. Failures are raised to the
    caller, which treats delivery as best effort.
    """

    @abstractmethod
    async def send_invite(
        self, to_email: str, inviter_name: str, project_name: str, token: str
    ) -> None:
        """Send a project invitation.

        Args:
            to_email: Invitee address
            inviter_name: Display name of the inviting admin
            project_name: Name of the project
            token: Invite token value to embed in the link
        """
        pass
