"""Domain layer DI providers."""

from dishka import Scope, provide

from hub.adapter.email import EmailNotifier
from hub.config import AuthSettings, InvitationSettings
from hub.domain.repository import (
    CommitHooks,
    MembershipRepository,
    ProjectRepository,
    TokenRepository,
    UserRepository,
)
from hub.domain.service import (
    AuthorizationService,
    JWTService,
    MembershipService,
    ProjectService,
)
from hub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, built per request on top of that request's repositories.

    The membership service receives whichever ``EmailNotifier`` the email
    component provides.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authorization_service(
        self,
        project_repository: ProjectRepository,
        membership_repository: MembershipRepository,
        user_repository: UserRepository,
    ) -> AuthorizationService:
        return AuthorizationService(
            project_repository=project_repository,
            membership_repository=membership_repository,
            user_repository=user_repository,
        )

    @provide
    def get_project_service(
        self,
        project_repository: ProjectRepository,
        membership_repository: MembershipRepository,
        user_repository: UserRepository,
        authorization_service: AuthorizationService,
    ) -> ProjectService:
        return ProjectService(
            project_repository=project_repository,
            membership_repository=membership_repository,
            user_repository=user_repository,
            authorization_service=authorization_service,
        )

    @provide
    def get_membership_service(
        self,
        membership_repository: MembershipRepository,
        token_repository: TokenRepository,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        authorization_service: AuthorizationService,
        notifier: EmailNotifier,
        commit_hooks: CommitHooks,
        invitation_settings: InvitationSettings,
    ) -> MembershipService:
        return MembershipService(
            membership_repository=membership_repository,
            token_repository=token_repository,
            project_repository=project_repository,
            user_repository=user_repository,
            authorization_service=authorization_service,
            notifier=notifier,
            commit_hooks=commit_hooks,
            invitation_settings=invitation_settings,
        )
