"""Use case providers.

Use cases take a single domain service, so dishka builds them from their
constructor annotations.
"""

from dishka import Scope, provide

from hub.application.usecase.member import (
    AcceptInviteUseCase,
    InviteMemberUseCase,
    RemoveMemberUseCase,
    VerifyInviteUseCase,
)
from hub.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from hub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    scope = Scope.REQUEST

    create_project = provide(CreateProjectUseCase)
    get_project = provide(GetProjectUseCase)
    list_projects = provide(ListProjectsUseCase)
    update_project = provide(UpdateProjectUseCase)
    delete_project = provide(DeleteProjectUseCase)

    invite_member = provide(InviteMemberUseCase)
    accept_invite = provide(AcceptInviteUseCase)
    remove_member = provide(RemoveMemberUseCase)
    verify_invite = provide(VerifyInviteUseCase)
