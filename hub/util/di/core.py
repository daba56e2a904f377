"""Settings providers, shared by production and test containers."""

from dishka import Scope, provide

from hub.config import (
    AuthSettings,
    EmailSettings,
    InvitationSettings,
    Settings,
)
from hub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Reads ``Settings`` once per container and exposes its sections.

    Services depend on the section they use, so tests can reason about a
    single settings group.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def invitations(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide
    def email(self, settings: Settings) -> EmailSettings:
        return settings.email
