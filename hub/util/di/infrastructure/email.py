"""Email infrastructure providers."""

from dishka import Scope, provide

from hub.adapter.email import EmailNotifier, HttpEmailNotifier
from hub.config import Settings
from hub.util.error import ConfigurationError
from hub.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_notifier(self, settings: Settings) -> EmailNotifier:
        """Provide HTTP email notifier.

        Raises:
            ConfigurationError: If the email API URL is not configured
        """
        if settings.email.enabled and not settings.email.api_url:
            raise ConfigurationError(
                "EMAIL__API_URL", "required while email sending is enabled"
            )

        return HttpEmailNotifier(
            settings=settings.email, invite_url=settings.invite_url
        )
