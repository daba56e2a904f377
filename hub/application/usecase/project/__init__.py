"""Project use cases."""

from hub.application.usecase.project.common import MemberResponse, ProjectResponse
from hub.application.usecase.project.create_project import (
    CreateProjectRequest,
    CreateProjectUseCase,
)
from hub.application.usecase.project.delete_project import (
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
)
from hub.application.usecase.project.get_project import (
    GetProjectRequest,
    GetProjectUseCase,
)
from hub.application.usecase.project.list_projects import (
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
)
from hub.application.usecase.project.update_project import (
    UpdateProjectRequest,
    UpdateProjectUseCase,
)

__all__ = [
    "CreateProjectRequest",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectResponse",
    "DeleteProjectUseCase",
    "GetProjectRequest",
    "GetProjectUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "MemberResponse",
    "ProjectResponse",
    "UpdateProjectRequest",
    "UpdateProjectUseCase",
]
