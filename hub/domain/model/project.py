"""Project aggregate root."""

from datetime import datetime

from pydantic import Field

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import ProjectId, ProjectName, UserId


class Project(DomainModel):
    """Project aggregate root.

    Business rules:
    - Created together with exactly one ADMIN membership for the creator
    - Only ADMIN members may rename or delete it
    """

    id: ProjectId
    name: ProjectName
    owner_id: UserId  # Creator; admins are tracked through memberships
    updated_at: datetime = Field(default_factory=utcnow)
