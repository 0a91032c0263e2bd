"""
Pydantic models for orders and checkout.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict

from evently.schemas.event import EventResponse

class CheckoutOrderParams(BaseModel):
    """What the buyer is paying for"""
    event_title: str
    event_id: UUID
    price: Optional[str] = None
    is_free: bool = False
    buyer_id: UUID

class CreateOrderParams(BaseModel):
    stripe_id: str
    event_id: UUID
    buyer_id: UUID
    total_amount: str
    created_at: Optional[datetime] = None

class OrderResponse(BaseModel):
    id: UUID
    stripe_id: str
    total_amount: Optional[str] = None
    created_at: Optional[datetime] = None
    event_id: Optional[UUID] = None
    buyer_id: Optional[UUID] = None

    model_config = ConfigDict(from_attributes=True)

class UserOrderResponse(OrderResponse):
    """Order with the purchased event (and its organizer) populated"""
    event: Optional[EventResponse] = None

class EventOrderItem(BaseModel):
    """Row of the per-event order listing, buyer flattened to a full name"""
    id: UUID
    total_amount: Optional[str] = None
    created_at: Optional[datetime] = None
    event_title: str
    event_id: UUID
    buyer: str
