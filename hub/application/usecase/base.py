"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


def parse_uuid(value: str) -> UUID:
    """Parse an identifier taken from a path, query or token claim.

    Raises:
        ValueError: If the value is not a UUID; routes map this to 400
    """
    return UUID(value)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API action: parse identifiers, call a domain service, shape the reply."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
