"""User domain service."""

from typing import Iterable

import logfire

from inkwell.domain.error import AuthenticationRequiredError, NotFoundError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_active_user(self, user_id: UserId | None) -> User:
        """Resolve the acting principal.

        Args:
            user_id: User ID taken from a verified token, if any

        Returns:
            The active user

        Raises:
            AuthenticationRequiredError: If there is no principal, or it no
                longer exists or has been deactivated
        """
        if user_id is None:
            raise AuthenticationRequiredError()

        with logfire.span("user_service.get_active_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user or not user.is_active:
                logfire.warn("Inactive or unknown principal", user_id=str(user_id))
                raise AuthenticationRequiredError("User not found or deactivated")
            return user

    async def get_users_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Fetch many users in one query.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user for the users that exist
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}
