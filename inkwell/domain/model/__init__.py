"""Domain model entities for Inkwell."""

from inkwell.domain.model.comment import Comment
from inkwell.domain.model.comment_like import CommentLike
from inkwell.domain.model.comment_report import CommentReport
from inkwell.domain.model.commenter_stats import CommenterStats
from inkwell.domain.model.notification import Notification
from inkwell.domain.model.post import Post
from inkwell.domain.model.user import User

__all__ = [
    "Comment",
    "CommentLike",
    "CommentReport",
    "CommenterStats",
    "Notification",
    "Post",
    "User",
]
