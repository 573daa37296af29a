"""Comment domain service."""

from collections import defaultdict
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from inkwell.domain.error import (
    InvalidModerationActionError,
    NotAuthorizedError,
    NotFoundError,
    ThreadDepthExceededError,
    ValidationError,
)
from inkwell.domain.model import Comment, Post
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import (
    CommentId,
    ModerationAction,
    ModerationStatus,
    PostId,
    UserId,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_thread_depth: int = 5,
        max_content_length: int = 5000,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_thread_depth: Deepest nesting level a reply may sit at
            max_content_length: Longest accepted comment text
        """
        self.comment_repository = comment_repository
        self.max_thread_depth = max_thread_depth
        self.max_content_length = max_content_length

    async def get_thread_depth(self, comment_id: CommentId) -> int:
        """Compute how deeply a comment is nested.

        Walks parent links upward, counting hops. A top-level comment has
        depth 0. The walk stops at the depth cap, so the result is
        ``min(actual depth, max_thread_depth)``. Deleted ancestors are still
        followed; a missing comment or parent ends the walk.

        Args:
            comment_id: Comment to measure

        Returns:
            Depth of the comment, capped
        """
        with logfire.span(
            "comment_service.get_thread_depth", comment_id=str(comment_id)
        ):
            depth = 0
            current = await self.comment_repository.find_by_id(comment_id)
            while (
                current is not None
                and current.parent_id is not None
                and depth < self.max_thread_depth
            ):
                depth += 1
                current = await self.comment_repository.find_by_id(current.parent_id)
            return depth

    async def get_live_comment_in_post(
        self, post_id: PostId, comment_id: CommentId
    ) -> Comment:
        """Get a comment that exists, is not deleted and belongs to the post.

        Raises:
            NotFoundError: Otherwise
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted or comment.post_id != post_id:
            logfire.warn(
                "Comment not found in post",
                comment_id=str(comment_id),
                post_id=str(post_id),
            )
            raise NotFoundError("Comment", str(comment_id))
        return comment

    def validate_content(self, content: str) -> str:
        """Trim comment text and check its length.

        Raises:
            ValidationError: If the text is blank or too long
        """
        content = content.strip()
        if not content:
            raise ValidationError("Comment content cannot be empty")
        if len(content) > self.max_content_length:
            raise ValidationError(
                f"Comment content must be at most {self.max_content_length} characters"
            )
        return content

    async def create_comment(
        self,
        post: Post,
        author_id: UserId,
        content: str,
        parent: Comment | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post: Live post accepting comments
            author_id: Author user ID
            content: Comment text
            parent: Live comment of the same post being replied to
                (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the content is blank or too long
            ThreadDepthExceededError: If the parent already sits at the depth cap
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post.id),
            author_id=str(author_id),
            parent_id=str(parent.id) if parent else None,
        ):
            content = self.validate_content(content)

            if parent is not None:
                parent_depth = await self.get_thread_depth(parent.id)
                if parent_depth >= self.max_thread_depth:
                    logfire.warn(
                        "Reply rejected at depth cap",
                        parent_id=str(parent.id),
                        depth=parent_depth,
                    )
                    raise ThreadDepthExceededError(self.max_thread_depth)

            now = datetime.now(timezone.utc)
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                user_id=author_id,
                content=content,
                parent_id=parent.id if parent else None,
                moderation_status=ModerationStatus.PENDING,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post.id),
                is_reply=parent is not None,
            )
            return saved

    async def update_content(
        self, comment: Comment, user_id: UserId, content: str
    ) -> Comment:
        """Replace the text of a comment.

        Raises:
            NotAuthorizedError: If the user did not write the comment
            NotFoundError: If the comment was deleted meanwhile
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment.id),
            content_length=len(content),
        ):
            if comment.user_id != user_id:
                raise NotAuthorizedError("You can only edit your own comments")

            content = self.validate_content(content)
            updated = await self.comment_repository.update_content(comment.id, content)
            if updated is None:
                logfire.warn(
                    "Comment not found or deleted for update",
                    comment_id=str(comment.id),
                )
                raise NotFoundError("Comment", str(comment.id))

            logfire.info("Comment updated", comment_id=str(comment.id))
            return updated

    async def delete_comment(self, comment: Comment, user_id: UserId) -> list[Comment]:
        """Soft delete a comment together with every live reply beneath it.

        The whole subtree receives the same deletion timestamp.

        Args:
            comment: Live comment to delete
            user_id: Acting user (must be the comment's author)

        Returns:
            The comments that were deleted, target first

        Raises:
            NotAuthorizedError: If the user did not write the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
        ):
            if comment.user_id != user_id:
                raise NotAuthorizedError("You can only delete your own comments")

            live = await self.comment_repository.find_by_post(comment.post_id)
            children: dict[CommentId, list[Comment]] = defaultdict(list)
            for candidate in live:
                if candidate.parent_id is not None:
                    children[candidate.parent_id].append(candidate)

            subtree = [comment]
            index = 0
            while index < len(subtree):
                subtree.extend(children.get(subtree[index].id, []))
                index += 1

            deleted_at = datetime.now(timezone.utc)
            count = await self.comment_repository.soft_delete_many(
                [c.id for c in subtree], deleted_at
            )

            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment.id),
                deleted=count,
            )
            return subtree

    async def moderate(
        self, post: Post, comment: Comment, user_id: UserId, action: str
    ) -> Comment:
        """Approve or hide a comment on the user's own post.

        Hiding withholds the comment from readers but does not delete it.

        Args:
            post: Post the comment belongs to
            comment: Live comment of the post
            user_id: Acting user
            action: "approve" or "hide"

        Returns:
            Updated comment

        Raises:
            NotAuthorizedError: If the user is not the post author
            InvalidModerationActionError: If the action is unknown
        """
        with logfire.span(
            "comment_service.moderate",
            post_id=str(post.id),
            comment_id=str(comment.id),
            action=action,
        ):
            if not post.is_authored_by(user_id):
                raise NotAuthorizedError("Only the post author can moderate comments")

            try:
                moderation_action = ModerationAction(action)
            except ValueError:
                raise InvalidModerationActionError(action)

            updated = await self.comment_repository.update_moderation_status(
                comment.id, moderation_action.target_status
            )
            if updated is None:
                raise NotFoundError("Comment", str(comment.id))

            logfire.info(
                "Comment moderated",
                comment_id=str(comment.id),
                status=updated.moderation_status.value,
            )
            return updated

    async def get_moderation_queue(
        self,
        post: Post,
        user_id: UserId,
        status: ModerationStatus | None = None,
    ) -> list[Comment]:
        """List a post's live comments for its author, newest first.

        Raises:
            NotAuthorizedError: If the user is not the post author
        """
        with logfire.span(
            "comment_service.get_moderation_queue",
            post_id=str(post.id),
            status=status.value if status else None,
        ):
            if not post.is_authored_by(user_id):
                raise NotAuthorizedError("Only the post author can moderate comments")

            comments = await self.comment_repository.find_by_post(
                post.id, status=status
            )
            comments.reverse()
            logfire.info(
                "Moderation queue loaded", post_id=str(post.id), count=len(comments)
            )
            return comments

    async def get_recent_comments(
        self, page: int, limit: int
    ) -> tuple[list[Comment], int]:
        """Page through the global feed of recent top-level comments.

        Returns:
            Comments for the page and the total number of feed entries
        """
        with logfire.span(
            "comment_service.get_recent_comments", page=page, limit=limit
        ):
            offset = (page - 1) * limit
            comments = await self.comment_repository.find_recent_top_level(
                limit=limit, offset=offset
            )
            total = await self.comment_repository.count_recent_top_level()
            return comments, total
