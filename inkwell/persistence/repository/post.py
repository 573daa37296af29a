"""PostgreSQL implementation of Post repository."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import CommentId, PostId
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find many posts by ID."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(list(post_ids)))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = insert(posts_table).values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def _update(self, post_id: PostId, **values) -> Optional[Post]:
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(updated_at=datetime.now(timezone.utc), **values)
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_post(row._asdict())

    async def update_allow_comments(
        self, post_id: PostId, allow_comments: bool
    ) -> Optional[Post]:
        """Enable or disable comments on a post."""
        return await self._update(post_id, allow_comments=allow_comments)

    async def update_pinned_comment(
        self, post_id: PostId, comment_id: Optional[CommentId]
    ) -> Optional[Post]:
        """Pin a comment to the top of a post (None to unpin)."""
        return await self._update(post_id, pinned_comment_id=comment_id)
