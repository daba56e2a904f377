"""Project routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel

from hub.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
    ProjectResponse,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from hub.domain.service import JWTService
from hub.interface.api.auth import authenticate

router = APIRouter(prefix="/projects", tags=["projects"], route_class=DishkaRoute)


class ProjectAPIRequest(BaseModel):
    """API request body for creating or renaming a project."""

    name: str


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: ProjectAPIRequest,
    create_project_use_case: FromDishka[CreateProjectUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ProjectResponse:
    """Create a project with the caller as admin.

    Raises:
        HTTPException: If not authenticated or the request is malformed
    """
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await create_project_use_case.execute(
            CreateProjectRequest(user_id=user_id, name=request.name)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListProjectsResponse:
    """List projects the caller owns or has joined."""
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await list_projects_use_case.execute(
            ListProjectsRequest(user_id=user_id)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    get_project_use_case: FromDishka[GetProjectUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ProjectResponse:
    """Get a project and its roster.

    Args:
        project_id: Project ID
        get_project_use_case: Get project use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Project with members

    Raises:
        HTTPException: If not authenticated or the ID is malformed
    """
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await get_project_use_case.execute(
            GetProjectRequest(project_id=project_id, user_id=user_id)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    request: ProjectAPIRequest,
    update_project_use_case: FromDishka[UpdateProjectUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ProjectResponse:
    """Rename a project (admins only)."""
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await update_project_use_case.execute(
            UpdateProjectRequest(
                project_id=project_id, user_id=user_id, name=request.name
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(
    project_id: str,
    delete_project_use_case: FromDishka[DeleteProjectUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteProjectResponse:
    """Delete a project (admins only)."""
    user_id = authenticate(jwt_service, authorization, auth_token)

    try:
        return await delete_project_use_case.execute(
            DeleteProjectRequest(project_id=project_id, user_id=user_id)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
