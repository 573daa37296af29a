"""In-memory commenter statistics repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from inkwell.domain.model.commenter_stats import CommenterStats
from inkwell.domain.repository.commenter_stats import CommenterStatsRepository
from inkwell.domain.value import UserId


class InMemoryCommenterStatsRepository(CommenterStatsRepository):
    """In-memory implementation of CommenterStatsRepository for testing."""

    def __init__(self) -> None:
        self._rows: dict[tuple[UserId, UserId], CommenterStats] = {}

    async def find(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        """Find the ledger row for a pair."""
        return self._rows.get((post_author_id, commenter_id))

    async def find_many(
        self, post_author_id: UserId, commenter_ids: Sequence[UserId]
    ) -> list[CommenterStats]:
        """Find ledger rows for many commenters of one author."""
        return [
            self._rows[(post_author_id, cid)]
            for cid in commenter_ids
            if (post_author_id, cid) in self._rows
        ]

    async def increment(
        self, post_author_id: UserId, commenter_id: UserId, at: datetime
    ) -> None:
        """Create the row or add one to it."""
        key = (post_author_id, commenter_id)
        existing = self._rows.get(key)
        count = existing.comment_count + 1 if existing else 1
        self._rows[key] = CommenterStats(
            post_author_id=post_author_id,
            commenter_id=commenter_id,
            comment_count=count,
            last_comment_at=at,
        )

    async def decrement(
        self, post_author_id: UserId, commenter_id: UserId, amount: int = 1
    ) -> None:
        """Subtract from the row, deleting it at zero."""
        key = (post_author_id, commenter_id)
        existing = self._rows.get(key)
        if existing is None:
            return
        if existing.comment_count <= amount:
            del self._rows[key]
        else:
            self._rows[key] = existing.model_copy(
                update={"comment_count": existing.comment_count - amount}
            )

    async def find_top(
        self, post_author_id: UserId, min_count: int, limit: int
    ) -> list[CommenterStats]:
        """Find an author's most active commenters."""
        rows = [
            row
            for (author_id, _), row in self._rows.items()
            if author_id == post_author_id and row.comment_count >= min_count
        ]
        rows.sort(key=lambda r: (r.comment_count, r.last_comment_at), reverse=True)
        return rows[:limit]
