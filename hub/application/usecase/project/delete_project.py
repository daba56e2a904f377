"""Delete project use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.domain.service import ProjectService
from hub.domain.value import ProjectId, UserId


class DeleteProjectRequest(BaseModel):
    """Delete project request."""

    project_id: str
    user_id: str  # Must be an admin


class DeleteProjectResponse(BaseModel):
    """Delete project response."""

    message: str


class DeleteProjectUseCase(BaseUseCase[DeleteProjectRequest, DeleteProjectResponse]):
    """Use case for deleting a project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: DeleteProjectRequest) -> DeleteProjectResponse:
        """Delete a project.

        Raises:
            ValueError: If an ID is not a UUID
            NotFoundError: If the project is missing
            ForbiddenError: If the caller is not an admin
        """
        project_id = ProjectId(parse_uuid(request.project_id))
        user_id = UserId(parse_uuid(request.user_id))
        await self.project_service.delete(project_id, user_id)
        return DeleteProjectResponse(message="Project deleted")
