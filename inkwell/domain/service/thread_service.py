"""Comment thread assembly domain service."""

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass, field

import logfire

from inkwell.domain.model import Comment, Post
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import AuthorSummary, CommentId, UserId

from .base import Service
from .comment_like_service import CommentLikeService
from .commenter_stats_service import CommenterStatsService
from .user_service import UserService


@dataclass
class CommentNode:
    """Node in a post's comment tree.

    Holds a visible comment, its author summary, derived like count and
    top-commenter flag, and its visible replies oldest first.
    """

    comment: Comment
    author: AuthorSummary
    like_count: int
    is_top_commenter: bool
    replies: list["CommentNode"] = field(default_factory=list)


class ThreadService(Service):
    """Builds the nested comment tree shown under a post."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        max_thread_depth: int = 5,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            user_service: User lookups for authors
            like_service: Like counts
            stats_service: Top-commenter ledger
            max_thread_depth: Deepest level included in the tree
        """
        self.comment_repository = comment_repository
        self.user_service = user_service
        self.like_service = like_service
        self.stats_service = stats_service
        self.max_thread_depth = max_thread_depth

    async def build_thread(
        self, post: Post, viewer_id: UserId | None = None
    ) -> list[CommentNode]:
        """Assemble a post's comments into a tree.

        Algorithm:
        1. Fetch every live comment of the post in one query (oldest first)
        2. Fetch their authors in one query and drop deactivated authors
        3. Drop HIDDEN comments unless the viewer wrote the post
        4. Count likes and check top-commenter standing in one batch each
        5. Index survivors by parent and build the tree from the top-level
           comments down to the depth cap

        A comment that is filtered out takes its whole subtree with it,
        since its replies are only reachable through it.

        Args:
            post: Live post
            viewer_id: Current user, if authenticated

        Returns:
            Top-level comment nodes, oldest first
        """
        with logfire.span(
            "thread_service.build_thread",
            post_id=str(post.id),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            comments = await self.comment_repository.find_by_post(post.id)

            authors = await self.user_service.get_users_by_ids(
                c.user_id for c in comments
            )
            viewer_is_post_author = post.is_authored_by(viewer_id)

            visible = [
                c
                for c in comments
                if c.user_id in authors
                and authors[c.user_id].is_active
                and (viewer_is_post_author or c.moderation_status.is_visible)
            ]

            like_counts = await self.like_service.count_likes_for_comments(
                c.id for c in visible
            )
            top_commenters = await self.stats_service.batch_is_top_commenter(
                (c.user_id for c in visible), post.author_id
            )

            children: dict[CommentId | None, list[Comment]] = defaultdict(list)
            for comment in visible:
                children[comment.parent_id].append(comment)

            def build_node(comment: Comment, depth: int) -> CommentNode:
                """Build a node and its replies down to the depth cap."""
                author = authors[comment.user_id]
                node = CommentNode(
                    comment=comment,
                    author=AuthorSummary(id=author.id, username=author.username),
                    like_count=like_counts.get(comment.id, 0),
                    is_top_commenter=top_commenters.get(comment.user_id, False),
                )
                if depth < self.max_thread_depth:
                    node.replies = [
                        build_node(reply, depth + 1)
                        for reply in children.get(comment.id, [])
                    ]
                return node

            roots = [build_node(comment, 0) for comment in children.get(None, [])]

            logfire.info(
                "Comment thread built",
                post_id=str(post.id),
                fetched=len(comments),
                visible=len(visible),
                top_level=len(roots),
            )
            return roots


def iter_nodes(nodes: list[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node in a forest of comment nodes, depth first."""
    stack = list(nodes)
    while stack:
        node = stack.pop()
        yield node
        stack.extend(node.replies)


def count_nodes(nodes: list[CommentNode]) -> int:
    """Count every node in a forest of comment nodes."""
    return sum(1 for _ in iter_nodes(nodes))
