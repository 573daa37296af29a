"""Commenter statistics ledger entry.

Denormalized counter of how many comments a commenter has left on a given
author's posts. Maintained incrementally and rebuildable from comment history.
"""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import UserId


class CommenterStats(DomainModel):
    """Ledger row for a (post author, commenter) pair.

    Business rules:
    - Never exists for a commenter on their own posts
    - Removed instead of being left at zero
    """

    post_author_id: UserId
    commenter_id: UserId
    comment_count: int = Field(ge=0)
    last_comment_at: datetime
