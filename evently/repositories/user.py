"""
Repository for User model operations.
"""

from typing import Any, Dict, Optional
from uuid import UUID
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from evently.repositories.base import BaseRepository
from evently.models.user import User
from evently.models.event import Event
from evently.models.order import Order

logger = logging.getLogger(__name__)

class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_by_clerk_id(self, clerk_id: str) -> Optional[User]:
        """
        Get a user by the identity provider's id.

        Args:
            clerk_id (str): External identity id

        Returns:
            Optional[User]: User if found, None otherwise
        """
        result = await self.db.execute(select(User).where(User.clerk_id == clerk_id))
        return result.scalar_one_or_none()

    async def update_by_clerk_id(self, clerk_id: str, data: Dict[str, Any]) -> Optional[User]:
        """Apply ``data`` to the user with ``clerk_id`` and commit."""
        user = await self.get_by_clerk_id(clerk_id)
        if user:
            self._apply(user, data)
            await self.db.commit()
            await self.db.refresh(user)
        return user

    async def unlink_relationships(self, user_id: UUID) -> None:
        """
        Clear references to a user from events and orders.

        The user's events lose their organizer and the user's orders lose
        their buyer. Changes are flushed, not committed.
        """
        await self.db.execute(
            update(Event).where(Event.organizer_id == user_id).values(organizer_id=None)
        )
        await self.db.execute(
            update(Order).where(Order.buyer_id == user_id).values(buyer_id=None)
        )
        await self.db.flush()
        logger.debug(f"Unlinked events and orders from user {user_id}")
