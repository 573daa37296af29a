"""Commenter statistics repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from inkwell.domain.model.commenter_stats import CommenterStats
from inkwell.domain.value import UserId


class CommenterStatsRepository(ABC):
    """Repository for the commenter statistics ledger.

    Increments and decrements must be atomic at the store level so that
    concurrent comments by the same commenter never lose an update.
    """

    @abstractmethod
    async def find(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        """Find the ledger row for a (post author, commenter) pair."""
        pass

    @abstractmethod
    async def find_many(
        self, post_author_id: UserId, commenter_ids: Sequence[UserId]
    ) -> List[CommenterStats]:
        """Find ledger rows for many commenters of one author (batch query)."""
        pass

    @abstractmethod
    async def increment(
        self, post_author_id: UserId, commenter_id: UserId, at: datetime
    ) -> None:
        """Atomically create the row or add one to its count.

        Args:
            post_author_id: Author of the commented post
            commenter_id: Author of the comment
            at: Time of the comment (stored as last_comment_at)
        """
        pass

    @abstractmethod
    async def decrement(
        self, post_author_id: UserId, commenter_id: UserId, amount: int = 1
    ) -> None:
        """Atomically subtract from the count, deleting the row at zero.

        Missing rows are ignored.
        """
        pass

    @abstractmethod
    async def find_top(
        self, post_author_id: UserId, min_count: int, limit: int
    ) -> List[CommenterStats]:
        """Find an author's commenters with at least ``min_count`` comments.

        Returns:
            Ledger rows ordered by comment_count descending
        """
        pass
