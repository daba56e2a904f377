"""Domain model entities for InsightHub."""

from hub.domain.model.membership import Membership
from hub.domain.model.project import Project
from hub.domain.model.token import Token
from hub.domain.model.user import User

__all__ = [
    "Membership",
    "Project",
    "Token",
    "User",
]
