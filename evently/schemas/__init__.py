"""
Pydantic schemas for request parameters and serialized responses.
"""

from evently.schemas.common import Page, to_uuid
from evently.schemas.user import CreateUserParams, UpdateUserParams, UserResponse, OrganizerSummary
from evently.schemas.category import CreateCategoryParams, CategoryResponse
from evently.schemas.event import (
    EventInput,
    EventUpdateInput,
    CreateEventParams,
    UpdateEventParams,
    EventResponse,
)
from evently.schemas.order import (
    CheckoutOrderParams,
    CreateOrderParams,
    OrderResponse,
    UserOrderResponse,
    EventOrderItem,
)
