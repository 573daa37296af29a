"""Post comment-settings use cases."""

from .update_comment_settings import (
    UpdateCommentSettingsRequest,
    UpdateCommentSettingsResponse,
    UpdateCommentSettingsUseCase,
)

__all__ = [
    "UpdateCommentSettingsRequest",
    "UpdateCommentSettingsResponse",
    "UpdateCommentSettingsUseCase",
]
