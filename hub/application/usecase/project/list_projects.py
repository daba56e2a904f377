"""List projects use case."""

from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, parse_uuid
from hub.application.usecase.project.common import ProjectResponse
from hub.domain.service import ProjectService
from hub.domain.value import UserId


class ListProjectsRequest(BaseModel):
    """List projects request."""

    user_id: str


class ListProjectsResponse(BaseModel):
    """List projects response."""

    projects: list[ProjectResponse]


class ListProjectsUseCase(BaseUseCase[ListProjectsRequest, ListProjectsResponse]):
    """Use case for listing the caller's projects."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        user_id = UserId(parse_uuid(request.user_id))
        views = await self.project_service.find_by_user(user_id)
        return ListProjectsResponse(
            projects=[ProjectResponse.from_view(view) for view in views]
        )
