"""Commit hooks for the PostgreSQL transaction."""

import logfire

from hub.domain.repository import AfterCommit, CommitHooks


class DeferredCommitHooks(CommitHooks):
    """Holds callbacks until ``transaction()`` has committed the session."""

    def __init__(self) -> None:
        self._callbacks: list[AfterCommit] = []

    async def after_commit(self, callback: AfterCommit) -> None:
        self._callbacks.append(callback)

    def discard(self) -> None:
        self._callbacks.clear()

    async def run(self) -> None:
        """Run and drop the queued callbacks.

        The data is already committed, so a failing callback is logged and
        the rest still run.
        """
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            try:
                await callback()
            except Exception as e:
                logfire.error(
                    "After-commit callback failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    _exc_info=True,
                )
