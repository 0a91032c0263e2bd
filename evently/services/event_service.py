"""
Service for managing events.
This module handles the logic for:
- Creating events for an organizer
- Reading a single event with its organizer and category
- Searching and paginating the public listing
- Related events of a category and events of an organizer
- Updating and deleting events
"""

import logging
from typing import List, Optional, Sequence, Union
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from evently.exceptions import EventNotFoundError, UnauthorizedError, UserNotFoundError
from evently.models.event import Event
from evently.repositories.category import CategoryRepository
from evently.repositories.event import EventRepository
from evently.repositories.user import UserRepository
from evently.schemas.common import Page, to_uuid
from evently.schemas.event import EventInput, EventResponse, EventUpdateInput
from evently.utils.errors import handle_error
from evently.utils.pagination import skip_amount, total_pages
from evently.utils.revalidation import Revalidator, revalidate_path

logger = logging.getLogger(__name__)

def _event_fields(event: EventInput) -> dict:
    return event.model_dump(exclude={"id"})

class EventService:
    """Service for events and their listings."""

    def __init__(self, db_session: AsyncSession, revalidate: Revalidator = revalidate_path):
        """Initialize the service.

        Args:
            db_session: The database session
            revalidate: Called with each page path whose content changed
        """
        self.db_session = db_session
        self.events = EventRepository(db_session)
        self.users = UserRepository(db_session)
        self.categories = CategoryRepository(db_session)
        self.revalidate = revalidate

    async def create_event(self, user_id: Union[str, UUID], event: EventInput, path: str) -> EventResponse:
        """
        Create an event organized by ``user_id``.

        Args:
            user_id: The organizer's user ID
            event: Event fields
            path: Page to revalidate once the event exists

        Returns:
            The created event, organizer and category populated

        Raises:
            UserNotFoundError: If the organizer does not exist
        """
        try:
            organizer_id = to_uuid(user_id, "user id")
            organizer = await self.users.get_by_id(organizer_id)
            if not organizer:
                raise UserNotFoundError("Organizer not found")

            new_event = await self.events.create({**_event_fields(event), "organizer_id": organizer_id})
            self.revalidate(path)

            logger.info(f"Created event {new_event.id} for organizer {organizer_id}")
            return EventResponse.model_validate(await self.events.get_populated(new_event.id))
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "create_event")

    async def get_event_by_id(self, event_id: Union[str, UUID]) -> EventResponse:
        """
        Get an event with its organizer and category.

        Raises:
            EventNotFoundError: If no event has this ID
        """
        try:
            event = await self.events.get_populated(to_uuid(event_id, "event id"))
            if not event:
                raise EventNotFoundError("Event not found")
            return EventResponse.model_validate(event)
        except Exception as e:
            handle_error(e, "get_event_by_id")

    async def get_all_events(
        self,
        query: Optional[str] = None,
        limit: int = 6,
        page: Union[int, str] = 1,
        category: Optional[str] = None,
    ) -> Page[EventResponse]:
        """
        Search the event listing.

        Args:
            query: Case-insensitive fragment of the title; empty means any title
            limit: Events per page
            page: 1-based page number
            category: Fragment of a category name. The first matching category
                filters the listing; when none matches no category filter applies.

        Returns:
            Page of events, newest first, with the total page count
        """
        try:
            conditions: List[ColumnElement] = []
            if query:
                conditions.append(EventRepository.title_contains(query))
            if category:
                category_match = await self.categories.get_by_name(category)
                if category_match:
                    conditions.append(Event.category_id == category_match.id)

            return await self._page(conditions, limit, page)
        except Exception as e:
            handle_error(e, "get_all_events")

    async def delete_event(self, event_id: Union[str, UUID], path: str) -> None:
        """Delete an event; ``path`` is revalidated only if something was deleted."""
        try:
            deleted_event = await self.events.delete(to_uuid(event_id, "event id"))
            if deleted_event:
                logger.info(f"Deleted event {deleted_event.id}")
                self.revalidate(path)
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "delete_event")

    async def update_event(self, user_id: Union[str, UUID], event: EventUpdateInput, path: str) -> EventResponse:
        """
        Update an event organized by ``user_id``.

        Args:
            user_id: ID of the user making the change
            event: New event fields, including the event ID
            path: Page to revalidate after the update

        Returns:
            The updated event, organizer and category populated

        Raises:
            UnauthorizedError: If the event does not exist or is organized by someone else
        """
        try:
            event_to_update = await self.events.get_by_id(event.id)
            if not event_to_update or event_to_update.organizer_id != to_uuid(user_id, "user id"):
                raise UnauthorizedError("Unauthorized or event not found")

            await self.events.update(event.id, _event_fields(event))
            self.revalidate(path)

            logger.info(f"Updated event {event.id}")
            return EventResponse.model_validate(await self.events.get_populated(event.id))
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "update_event")

    async def get_related_events_by_category(
        self,
        category_id: Union[str, UUID],
        event_id: Union[str, UUID],
        limit: int = 3,
        page: Union[int, str] = 1,
    ) -> Page[EventResponse]:
        """Events of the same category, excluding ``event_id``."""
        try:
            conditions = [
                Event.category_id == to_uuid(category_id, "category id"),
                Event.id != to_uuid(event_id, "event id"),
            ]
            return await self._page(conditions, limit, page)
        except Exception as e:
            handle_error(e, "get_related_events_by_category")

    async def get_events_by_user(
        self,
        user_id: Union[str, UUID],
        limit: int = 6,
        page: Union[int, str] = 1,
    ) -> Page[EventResponse]:
        """Events organized by ``user_id``."""
        try:
            conditions = [Event.organizer_id == to_uuid(user_id, "user id")]
            return await self._page(conditions, limit, page)
        except Exception as e:
            handle_error(e, "get_events_by_user")

    async def _page(self, conditions: Sequence[ColumnElement], limit: int, page: Union[int, str]) -> Page[EventResponse]:
        events = await self.events.find_populated_page(conditions, skip=skip_amount(page, limit), limit=limit)
        events_count = await self.events.count(conditions)
        return Page[EventResponse](
            data=[EventResponse.model_validate(event) for event in events],
            total_pages=total_pages(events_count, limit),
        )
