"""
Service for managing users.

Users are created, updated and deleted in response to identity provider
events, so updates and deletion are keyed by the provider's id (clerk_id).
"""

import logging
from typing import Union
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from evently.exceptions import UserNotFoundError
from evently.repositories.user import UserRepository
from evently.schemas.common import to_uuid
from evently.schemas.user import CreateUserParams, UpdateUserParams, UserResponse
from evently.utils.errors import handle_error
from evently.utils.revalidation import Revalidator, revalidate_path

logger = logging.getLogger(__name__)

class UserService:
    """Service for user accounts."""

    def __init__(self, db_session: AsyncSession, revalidate: Revalidator = revalidate_path):
        """Initialize the service.

        Args:
            db_session: The database session
            revalidate: Called with each page path whose content changed
        """
        self.db_session = db_session
        self.users = UserRepository(db_session)
        self.revalidate = revalidate

    async def create_user(self, user: CreateUserParams) -> UserResponse:
        """
        Create a user.

        Args:
            user: Identity data for the new user

        Returns:
            The created user
        """
        try:
            new_user = await self.users.create(user.model_dump())
            logger.info(f"Created user {new_user.id} ({new_user.clerk_id})")
            return UserResponse.model_validate(new_user)
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "create_user")

    async def get_user_by_id(self, user_id: Union[str, UUID]) -> UserResponse:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        try:
            user = await self.users.get_by_id(to_uuid(user_id, "user id"))
            if not user:
                raise UserNotFoundError("User not found")
            return UserResponse.model_validate(user)
        except Exception as e:
            handle_error(e, "get_user_by_id")

    async def update_user(self, clerk_id: str, user: UpdateUserParams) -> UserResponse:
        """
        Update the profile fields of the user with ``clerk_id``.

        Only fields present in ``user`` are written.

        Raises:
            UserNotFoundError: If no user has this clerk_id
        """
        try:
            updated_user = await self.users.update_by_clerk_id(
                clerk_id, user.model_dump(exclude_unset=True)
            )
            if not updated_user:
                raise UserNotFoundError("User update failed")
            return UserResponse.model_validate(updated_user)
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "update_user")

    async def delete_user(self, clerk_id: str) -> UserResponse:
        """
        Delete the user with ``clerk_id``.

        The user's events keep existing without an organizer and the user's
        orders keep existing without a buyer. Revalidates the home page.

        Returns:
            The deleted user

        Raises:
            UserNotFoundError: If no user has this clerk_id
        """
        try:
            user_to_delete = await self.users.get_by_clerk_id(clerk_id)
            if not user_to_delete:
                raise UserNotFoundError("User not found")

            deleted_user = UserResponse.model_validate(user_to_delete)
            await self.users.unlink_relationships(user_to_delete.id)
            await self.users.delete(user_to_delete.id)
            self.revalidate("/")

            logger.info(f"Deleted user {deleted_user.id} ({clerk_id})")
            return deleted_user
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "delete_user")
