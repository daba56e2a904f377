"""Commit hooks for the in-memory stores."""

from hub.domain.repository import AfterCommit, CommitHooks


class ImmediateCommitHooks(CommitHooks):
    """Runs callbacks straight away.

    In-memory writes are visible as soon as they are made.
    """

    async def after_commit(self, callback: AfterCommit) -> None:
        await callback()
