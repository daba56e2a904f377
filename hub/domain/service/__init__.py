"""Domain services."""

from .authorization_service import AuthorizationService
from .base import Service, translate_errors
from .jwt_service import JWTService
from .membership_service import MembershipService, TokenVerification
from .notifier import InviteNotifier
from .project_service import MemberView, ProjectService, ProjectView

__all__ = [
    "AuthorizationService",
    "InviteNotifier",
    "JWTService",
    "MemberView",
    "MembershipService",
    "ProjectService",
    "ProjectView",
    "Service",
    "TokenVerification",
    "translate_errors",
]
