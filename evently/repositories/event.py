"""
Repository for Event model operations.

Every read goes through ``populate_options`` so that the organizer and the
category are loaded together with the event.
"""

from typing import Any, List, Optional, Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import ColumnElement

from evently.repositories.base import BaseRepository, contains_pattern
from evently.models.event import Event

def populate_options() -> List[Any]:
    """Loader options embedding the organizer and the category."""
    return [
        selectinload(Event.organizer),
        selectinload(Event.category),
    ]

class EventRepository(BaseRepository[Event]):
    """Repository for Event database operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Event)

    async def get_populated(self, event_id: Any) -> Optional[Event]:
        """Get an event with organizer and category loaded."""
        stmt = (
            select(Event)
            .where(Event.id == event_id)
            .options(*populate_options())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def find_populated_page(
        self,
        conditions: Sequence[ColumnElement],
        skip: int,
        limit: int,
    ) -> List[Event]:
        """One page of events, newest first, with organizer and category loaded."""
        return await self.find_page(conditions, skip=skip, limit=limit, options=populate_options())

    @staticmethod
    def title_contains(query: str) -> ColumnElement:
        """Case-insensitive substring match on the title."""
        return Event.title.ilike(contains_pattern(query), escape="\\")
