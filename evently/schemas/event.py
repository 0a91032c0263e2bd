"""
Pydantic models for events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict

from evently.schemas.category import CategoryResponse
from evently.schemas.user import OrganizerSummary

class EventInput(BaseModel):
    """Event fields submitted by an organizer"""
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    image_url: str
    start_date_time: datetime
    end_date_time: datetime
    category_id: UUID
    price: Optional[str] = None
    is_free: bool = False
    url: Optional[str] = None

class EventUpdateInput(EventInput):
    """Event fields plus the id of the event being edited"""
    id: UUID

class CreateEventParams(BaseModel):
    user_id: UUID
    event: EventInput
    path: str

class UpdateEventParams(BaseModel):
    user_id: UUID
    event: EventUpdateInput
    path: str

class EventResponse(BaseModel):
    """Event with its organizer and category populated"""
    id: UUID
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    image_url: str
    start_date_time: datetime
    end_date_time: datetime
    price: Optional[str] = None
    is_free: bool = False
    url: Optional[str] = None
    created_at: Optional[datetime] = None
    category_id: Optional[UUID] = None
    organizer_id: Optional[UUID] = None
    organizer: Optional[OrganizerSummary] = None
    category: Optional[CategoryResponse] = None

    model_config = ConfigDict(from_attributes=True)
