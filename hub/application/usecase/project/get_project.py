"""Get project use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.application.usecase.project.common import ProjectResponse
from hub.domain.service import ProjectService
from hub.domain.value import ProjectId, UserId


class GetProjectRequest(BaseModel):
    """Get project request."""

    project_id: str
    user_id: str


class GetProjectUseCase(BaseUseCase[GetProjectRequest, ProjectResponse]):
    """Use case for reading a single project with its roster."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: GetProjectRequest) -> ProjectResponse:
        """Get a project the caller belongs to.

        Raises:
            ValueError: If an ID is not a UUID
            NotFoundError: If the project is missing
            ForbiddenError: If the caller is not an accepted member
        """
        project_id = ProjectId(parse_uuid(request.project_id))
        user_id = UserId(parse_uuid(request.user_id))
        view = await self.project_service.find_by_id(project_id, user_id)
        return ProjectResponse.from_view(view)
