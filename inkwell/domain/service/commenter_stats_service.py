"""Commenter statistics ledger domain service."""

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable

import logfire

from inkwell.domain.model import CommenterStats
from inkwell.domain.repository import CommenterStatsRepository
from inkwell.domain.value import UserId

from .base import Service


class CommenterStatsService(Service):
    """Maintains the per-(post author, commenter) comment counters.

    A commenter is one of an author's top commenters once they have left at
    least ``threshold`` comments on that author's posts. Authors never
    accrue standing on their own posts.
    """

    def __init__(
        self, stats_repository: CommenterStatsRepository, threshold: int = 5
    ) -> None:
        """Initialize commenter stats service.

        Args:
            stats_repository: Ledger repository
            threshold: Comment count at which a commenter becomes a top commenter
        """
        self.stats_repository = stats_repository
        self.threshold = threshold

    async def record_comment(self, commenter_id: UserId, post_author_id: UserId) -> None:
        """Count a new comment by ``commenter_id`` on one of the author's posts."""
        if commenter_id == post_author_id:
            return

        with logfire.span(
            "commenter_stats_service.record_comment",
            commenter_id=str(commenter_id),
            post_author_id=str(post_author_id),
        ):
            await self.stats_repository.increment(
                post_author_id, commenter_id, at=datetime.now(timezone.utc)
            )

    async def record_removal(
        self, commenter_id: UserId, post_author_id: UserId, count: int = 1
    ) -> None:
        """Walk back ``count`` deleted comments by ``commenter_id``."""
        if commenter_id == post_author_id or count <= 0:
            return

        with logfire.span(
            "commenter_stats_service.record_removal",
            commenter_id=str(commenter_id),
            post_author_id=str(post_author_id),
            count=count,
        ):
            await self.stats_repository.decrement(
                post_author_id, commenter_id, amount=count
            )

    async def record_removals(
        self, commenter_ids: Iterable[UserId], post_author_id: UserId
    ) -> None:
        """Walk back one comment per entry of ``commenter_ids``.

        Used by the soft-delete cascade, where one deletion can remove
        comments by several commenters.
        """
        for commenter_id, count in Counter(commenter_ids).items():
            await self.record_removal(commenter_id, post_author_id, count=count)

    async def is_top_commenter(self, commenter_id: UserId, post_author_id: UserId) -> bool:
        """Check whether a commenter is one of the author's top commenters."""
        if commenter_id == post_author_id:
            return False

        stats = await self.stats_repository.find(post_author_id, commenter_id)
        return stats is not None and stats.comment_count >= self.threshold

    async def batch_is_top_commenter(
        self, commenter_ids: Iterable[UserId], post_author_id: UserId
    ) -> dict[UserId, bool]:
        """Check many commenters against one author with a single lookup.

        The author is excluded from the result; every other requested
        commenter defaults to False when no ledger row exists.
        """
        unique_ids = [cid for cid in dict.fromkeys(commenter_ids) if cid != post_author_id]
        if not unique_ids:
            return {}

        rows = await self.stats_repository.find_many(post_author_id, unique_ids)

        result = {cid: False for cid in unique_ids}
        for row in rows:
            result[row.commenter_id] = row.comment_count >= self.threshold
        return result

    async def get_top_commenters(
        self, post_author_id: UserId, limit: int = 10
    ) -> list[CommenterStats]:
        """List an author's top commenters, most active first."""
        with logfire.span(
            "commenter_stats_service.get_top_commenters",
            post_author_id=str(post_author_id),
            limit=limit,
        ):
            return await self.stats_repository.find_top(
                post_author_id, min_count=self.threshold, limit=limit
            )
