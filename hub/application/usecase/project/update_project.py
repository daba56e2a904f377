"""Update project use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.application.usecase.project.common import ProjectResponse
from hub.domain.service import ProjectService
from hub.domain.value import ProjectId, UserId


class UpdateProjectRequest(BaseModel):
    """Update project request."""

    project_id: str
    user_id: str  # Must be an admin
    name: str


class UpdateProjectUseCase(BaseUseCase[UpdateProjectRequest, ProjectResponse]):
    """Use case for renaming a project."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize update project use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: UpdateProjectRequest) -> ProjectResponse:
        """Rename a project.

        Args:
            request: Project ID, caller ID and new name

        Returns:
            Updated project

        Raises:
            ValueError: If an ID is not a UUID
            NotFoundError: If the project is missing
            ForbiddenError: If the caller is not an admin
            BadRequestError: If the name is invalid
        """
        project_id = ProjectId(parse_uuid(request.project_id))
        user_id = UserId(parse_uuid(request.user_id))
        view = await self.project_service.update(project_id, user_id, request.name)
        return ProjectResponse.from_view(view)
