"""Create project use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.application.usecase.project.common import ProjectResponse
from hub.domain.service import ProjectService
from hub.domain.value import UserId


class CreateProjectRequest(BaseModel):
    """Create project request."""

    user_id: str  # Creator, becomes the first admin
    name: str


class CreateProjectUseCase(BaseUseCase[CreateProjectRequest, ProjectResponse]):
    """Use case for creating a project."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize create project use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: CreateProjectRequest) -> ProjectResponse:
        """Create a project owned and administered by the caller.

        Args:
            request: Creator ID and project name

        Returns:
            The created project

        Raises:
            ValueError: If the user ID is not a UUID
            BadRequestError: If the name is invalid or the caller has no profile
        """
        user_id = UserId(parse_uuid(request.user_id))
        view = await self.project_service.create(request.name, user_id)
        return ProjectResponse.from_view(view)
