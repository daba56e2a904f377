"""Response models shared by project use cases."""

from datetime import datetime

from pydantic import BaseModel

from hub.domain.service import ProjectView
from hub.domain.value import MembershipStatus, Role


class MemberResponse(BaseModel):
    """Roster entry."""

    project_id: str
    email: str
    name: str | None
    role: Role
    status: MembershipStatus


class ProjectResponse(BaseModel):
    """Project with its roster."""

    id: str
    name: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    members: list[MemberResponse]

    @classmethod
    def from_view(cls, view: ProjectView) -> "ProjectResponse":
        project = view.project
        return cls(
            id=str(project.id),
            name=project.name.root,
            owner_id=str(project.owner_id),
            created_at=project.created_at,
            updated_at=project.updated_at,
            members=[
                MemberResponse(
                    project_id=str(member.project_id),
                    email=member.email,
                    name=member.name,
                    role=member.role,
                    status=member.status,
                )
                for member in view.members
            ],
        )
