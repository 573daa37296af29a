"""Get comments use case."""

from pydantic import BaseModel

from inkwell.application.usecase.common import AuthorItem, CommentItem
from inkwell.domain.service import (
    CommentNode,
    PostService,
    ThreadService,
    count_nodes,
    iter_nodes,
)
from inkwell.domain.value import PostId, UserId, parse_id


class CommentTreeItem(CommentItem):
    """Comment with its nested replies."""

    replies: list["CommentTreeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentTreeItem":
        comment = node.comment
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            user_id=str(comment.user_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            moderation_status=comment.moderation_status,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=AuthorItem(id=str(node.author.id), username=node.author.username.root),
            like_count=node.like_count,
            is_top_commenter=node.is_top_commenter,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # User ID from the verified token, if any


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    pinned_comment_id: str | None
    comments: list[CommentTreeItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting a post's comments as a nested tree."""

    def __init__(self, post_service: PostService, thread_service: ThreadService) -> None:
        """Initialize get comments use case.

        Args:
            post_service: Post domain service
            thread_service: Thread assembly service
        """
        self.post_service = post_service
        self.thread_service = thread_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID and optional viewer

        Returns:
            Top-level comments with nested replies, oldest first

        Raises:
            NotFoundError: If the post is missing or deleted
            CommentsDisabledError: If the post has comments turned off
        """
        post = await self.post_service.get_commentable_post(
            PostId(parse_id(request.post_id))
        )
        viewer_id = UserId(parse_id(request.viewer_id)) if request.viewer_id else None

        nodes = await self.thread_service.build_thread(post, viewer_id)

        # A pin the viewer cannot see is not disclosed
        visible_ids = {node.comment.id for node in iter_nodes(nodes)}
        pinned_id = (
            post.pinned_comment_id
            if post.pinned_comment_id in visible_ids
            else None
        )

        return GetCommentsResponse(
            post_id=str(post.id),
            pinned_comment_id=str(pinned_id) if pinned_id else None,
            comments=[CommentTreeItem.from_node(node) for node in nodes],
            total=count_nodes(nodes),
        )
