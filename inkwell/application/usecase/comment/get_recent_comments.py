"""Get recent comments use case (global feed)."""

from collections import defaultdict

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.common import CommentItem, Pagination
from inkwell.domain.service import (
    CacheService,
    CommentLikeService,
    CommentService,
    CommenterStatsService,
    PostService,
    UserService,
)
from inkwell.domain.value import UserId


class FeedPostItem(BaseModel):
    """Post summary attached to a feed entry."""

    id: str
    title: str
    slug: str
    author_id: str


class RecentCommentItem(CommentItem):
    """Feed entry: a top-level comment with its post."""

    post: FeedPostItem


class GetRecentCommentsRequest(BaseModel):
    """Get recent comments request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class GetRecentCommentsResponse(BaseModel):
    """Get recent comments response."""

    comments: list[RecentCommentItem]
    pagination: Pagination


class GetRecentCommentsUseCase:
    """Use case for the site-wide feed of recent top-level comments."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> None:
        """Initialize get recent comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            like_service: Like counts
            stats_service: Commenter ledger service
            cache_service: Post cache service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.like_service = like_service
        self.stats_service = stats_service
        self.cache_service = cache_service

    async def execute(
        self, request: GetRecentCommentsRequest
    ) -> GetRecentCommentsResponse:
        """Execute feed flow.

        Pages are served from the cache when present. Otherwise the page is
        assembled with one batched lookup each for posts, authors and likes,
        plus one ledger lookup per distinct post author, then cached.

        Args:
            request: Page and page size

        Returns:
            Feed page with pagination block
        """
        cached = await self.cache_service.get_recent_comments(
            request.page, request.limit
        )
        if cached is not None:
            logfire.debug("Recent comments served from cache", page=request.page)
            return GetRecentCommentsResponse.model_validate_json(cached)

        comments, total = await self.comment_service.get_recent_comments(
            request.page, request.limit
        )

        posts = await self.post_service.get_posts_by_ids(c.post_id for c in comments)
        authors = await self.user_service.get_users_by_ids(c.user_id for c in comments)
        like_counts = await self.like_service.count_likes_for_comments(
            c.id for c in comments
        )

        commenters_by_post_author: dict[UserId, list[UserId]] = defaultdict(list)
        for comment in comments:
            post = posts.get(comment.post_id)
            if post is not None:
                commenters_by_post_author[post.author_id].append(comment.user_id)

        top_flags: dict[tuple[UserId, UserId], bool] = {}
        for post_author_id, commenter_ids in commenters_by_post_author.items():
            flags = await self.stats_service.batch_is_top_commenter(
                commenter_ids, post_author_id
            )
            for commenter_id, is_top in flags.items():
                top_flags[(post_author_id, commenter_id)] = is_top

        items = []
        for comment in comments:
            post = posts.get(comment.post_id)
            author = authors.get(comment.user_id)
            if post is None or author is None:
                continue
            base = CommentItem.build(
                comment,
                author,
                like_count=like_counts.get(comment.id, 0),
                is_top_commenter=top_flags.get((post.author_id, comment.user_id), False),
            )
            items.append(
                RecentCommentItem(
                    **base.model_dump(),
                    post=FeedPostItem(
                        id=str(post.id),
                        title=post.title,
                        slug=post.slug.root,
                        author_id=str(post.author_id),
                    ),
                )
            )

        response = GetRecentCommentsResponse(
            comments=items,
            pagination=Pagination.of(request.page, request.limit, total),
        )
        await self.cache_service.store_recent_comments(
            request.page, request.limit, response.model_dump_json()
        )
        return response
