"""User-facing commenter use cases."""

from .get_top_commenters import (
    GetTopCommentersRequest,
    GetTopCommentersResponse,
    GetTopCommentersUseCase,
)

__all__ = [
    "GetTopCommentersRequest",
    "GetTopCommentersResponse",
    "GetTopCommentersUseCase",
]
