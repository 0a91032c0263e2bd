"""
Repository for Order model operations.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from evently.repositories.base import BaseRepository, contains_pattern
from evently.repositories.event import populate_options
from evently.models.order import Order
from evently.models.event import Event
from evently.models.user import User

class OrderRepository(BaseRepository[Order]):
    """Repository for Order database operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Order)

    async def get_by_stripe_id(self, stripe_id: str) -> Optional[Order]:
        result = await self.db.execute(select(Order).where(Order.stripe_id == stripe_id))
        return result.scalar_one_or_none()

    async def search_by_event(self, event_id: UUID, search_string: str = "") -> List[dict]:
        """
        List an event's orders whose buyer name contains ``search_string``.

        Buyer and event are inner-joined, so orders that lost their buyer or
        event are left out. The buyer is flattened to "first last".

        Args:
            event_id (UUID): Event to list orders for
            search_string (str): Case-insensitive fragment of the buyer's full name

        Returns:
            List[dict]: Rows with id, total_amount, created_at, event_title,
            event_id and buyer
        """
        buyer_name = User.first_name + " " + User.last_name
        stmt = (
            select(
                Order.id,
                Order.total_amount,
                Order.created_at,
                Event.title.label("event_title"),
                Event.id.label("event_id"),
                buyer_name.label("buyer"),
            )
            .join(User, Order.buyer_id == User.id)
            .join(Event, Order.event_id == Event.id)
            .where(Event.id == event_id)
            .where(buyer_name.ilike(contains_pattern(search_string), escape="\\"))
            .order_by(Order.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def find_by_buyer(self, buyer_id: UUID, skip: int, limit: int) -> List[Order]:
        """One page of a buyer's orders, newest first, with the event and its organizer loaded."""
        options = [selectinload(Order.event).options(*populate_options())]
        return await self.find_page([Order.buyer_id == buyer_id], skip=skip, limit=limit, options=options)
