"""Unit tests for the request transaction context manager."""

import pytest

from inkwell.domain.service import AfterCommitHooks
from inkwell.persistence.database import transaction


class RecordingSession:
    """Session double that records how its transaction ended."""

    def __init__(self, log: list[str]) -> None:
        self.log = log

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def commit(self) -> None:
        self.log.append("commit")

    async def rollback(self) -> None:
        self.log.append("rollback")


def make_factory(log: list[str]):
    return lambda: RecordingSession(log)


class TestTransaction:
    """Tests for transaction."""

    @pytest.mark.asyncio
    async def test_hooks_run_after_commit(self):
        """Cache invalidation registered mid-request runs only after commit."""
        # Arrange
        log: list[str] = []
        after_commit = AfterCommitHooks()

        async def invalidate() -> None:
            log.append("invalidate")

        # Act
        async with transaction(make_factory(log), after_commit):
            after_commit.add(invalidate)
            log.append("write")

        # Assert
        assert log == ["write", "commit", "invalidate"]

    @pytest.mark.asyncio
    async def test_rollback_discards_hooks(self):
        """A failed request rolls back and never invalidates."""
        # Arrange
        log: list[str] = []
        after_commit = AfterCommitHooks()

        async def invalidate() -> None:
            log.append("invalidate")

        # Act
        with pytest.raises(RuntimeError):
            async with transaction(make_factory(log), after_commit):
                after_commit.add(invalidate)
                raise RuntimeError("boom")

        # Assert
        assert log == ["rollback"]

    @pytest.mark.asyncio
    async def test_hooks_run_once(self):
        """Running the hooks clears them."""
        # Arrange
        calls: list[str] = []
        after_commit = AfterCommitHooks()

        async def invalidate() -> None:
            calls.append("invalidate")

        after_commit.add(invalidate)

        # Act
        await after_commit.run()
        await after_commit.run()

        # Assert
        assert calls == ["invalidate"]
