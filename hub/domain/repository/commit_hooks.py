"""Work that must wait until the current writes are durable."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

AfterCommit = Callable[[], Awaitable[None]]


class CommitHooks(ABC):
    """Schedules side effects, such as emails, behind the request's commit.

    Callbacks run once the writes made so far in the request are committed,
    and never if the transaction rolls back.
    """

    @abstractmethod
    async def after_commit(self, callback: AfterCommit) -> None:
        pass
