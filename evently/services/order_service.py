"""
Service for ticket orders.
This module handles the logic for:
- Starting a hosted checkout for an event
- Recording orders when the payment provider confirms a checkout
- Listing an event's orders, searchable by buyer name
- Paginating a buyer's orders
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from evently.exceptions import ValidationError
from evently.repositories.order import OrderRepository
from evently.schemas.common import Page, to_uuid
from evently.schemas.order import (
    CheckoutOrderParams,
    CreateOrderParams,
    EventOrderItem,
    OrderResponse,
    UserOrderResponse,
)
from evently.services.payment import PaymentGateway
from evently.utils.config import get_settings
from evently.utils.errors import handle_error
from evently.utils.pagination import skip_amount, total_pages

logger = logging.getLogger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"

def price_in_cents(price: Optional[str], is_free: bool) -> int:
    """Unit amount charged for one ticket; free events cost nothing."""
    if is_free:
        return 0
    return int(Decimal(str(price)) * 100)

class OrderService:
    """Service for checkout and orders."""

    def __init__(self, db_session: AsyncSession, payment_gateway: Optional[PaymentGateway] = None):
        """Initialize the service.

        Args:
            db_session: The database session
            payment_gateway: Provider used by ``checkout_order``
        """
        self.db_session = db_session
        self.orders = OrderRepository(db_session)
        self.payment_gateway = payment_gateway

    async def checkout_order(self, order: CheckoutOrderParams) -> str:
        """
        Create a hosted checkout session for one ticket.

        Args:
            order: Event and buyer of the ticket

        Returns:
            The checkout URL the buyer must be redirected to

        Raises:
            Exception: Whatever the gateway raised, unchanged
        """
        try:
            settings = get_settings()
            session = await self.payment_gateway.create_checkout_session(
                line_items=[
                    {
                        "price_data": {
                            "currency": settings.CHECKOUT_CURRENCY,
                            "unit_amount": price_in_cents(order.price, order.is_free),
                            "product_data": {"name": order.event_title},
                        },
                        "quantity": 1,
                    }
                ],
                metadata={
                    "eventId": str(order.event_id),
                    "buyerId": str(order.buyer_id),
                },
                success_url=f"{settings.SERVER_URL}/profile",
                cancel_url=f"{settings.SERVER_URL}/",
            )
            return session.url
        except Exception as e:
            logger.error(f"Error in checkout_order: {e}", exc_info=True)
            raise

    async def create_order(self, order: CreateOrderParams) -> OrderResponse:
        """Record a paid order."""
        try:
            new_order = await self.orders.create(order.model_dump(exclude_none=True))
            logger.info(f"Created order {new_order.id} for event {new_order.event_id}")
            return OrderResponse.model_validate(new_order)
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "create_order")

    async def handle_checkout_completed(self, event: Dict[str, Any]) -> Optional[OrderResponse]:
        """
        Record the order for a completed checkout webhook event.

        Other event types are ignored. A session that was already recorded
        returns the existing order, so webhook retries are harmless.

        Args:
            event: Decoded webhook event

        Returns:
            The order, or None for ignored event types
        """
        if event.get("type") != CHECKOUT_COMPLETED:
            logger.debug(f"Ignoring webhook event {event.get('type')}")
            return None

        try:
            session = event["data"]["object"]
            existing = await self.orders.get_by_stripe_id(session["id"])
            if existing:
                logger.info(f"Checkout session {session['id']} already recorded")
                return OrderResponse.model_validate(existing)

            metadata = session.get("metadata") or {}
            if not metadata.get("eventId") or not metadata.get("buyerId"):
                raise ValidationError("Checkout session is missing event or buyer metadata")

            amount_total = session.get("amount_total")
            order = CreateOrderParams(
                stripe_id=session["id"],
                event_id=to_uuid(metadata["eventId"], "event id"),
                buyer_id=to_uuid(metadata["buyerId"], "buyer id"),
                total_amount=str(Decimal(amount_total) / 100) if amount_total else "0",
            )
        except Exception as e:
            handle_error(e, "handle_checkout_completed")

        return await self.create_order(order)

    async def get_orders_by_event(self, event_id: Optional[Union[str, UUID]], search_string: str = "") -> List[EventOrderItem]:
        """
        List an event's orders whose buyer name contains ``search_string``.

        Raises:
            ValidationError: If ``event_id`` is empty
        """
        try:
            if not event_id:
                raise ValidationError("Event ID is required")

            rows = await self.orders.search_by_event(to_uuid(event_id, "event id"), search_string or "")
            return [EventOrderItem.model_validate(row) for row in rows]
        except Exception as e:
            handle_error(e, "get_orders_by_event")

    async def get_orders_by_user(
        self,
        user_id: Union[str, UUID],
        limit: int = 3,
        page: Union[int, str] = 1,
    ) -> Page[UserOrderResponse]:
        """A buyer's orders, newest first, each with its event and organizer."""
        try:
            buyer_id = to_uuid(user_id, "user id")
            orders = await self.orders.find_by_buyer(buyer_id, skip=skip_amount(page, limit), limit=limit)
            orders_count = await self.orders.count([self.orders.model.buyer_id == buyer_id])

            return Page[UserOrderResponse](
                data=[UserOrderResponse.model_validate(order) for order in orders],
                total_pages=total_pages(orders_count, limit),
            )
        except Exception as e:
            handle_error(e, "get_orders_by_user")
