"""Shared base for domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Immutable entity stamped with its creation time.

    Changes go through ``model_copy(update=...)`` and a repository save.
    """

    model_config = ConfigDict(frozen=True)

    created_at: datetime = Field(default_factory=utcnow)
