"""
Router for payment provider webhooks.

A completed checkout session becomes an order. The signature is verified by
the gateway before anything is written.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
import stripe

from evently.services.order_service import OrderService
from evently.services.payment import PaymentGateway, get_payment_gateway
from evently.utils.api_response import create_response, error_response
from evently.utils.database import get_db

router = APIRouter(
    prefix="/api/webhook",
    tags=["webhooks"]
)

logger = logging.getLogger(__name__)

@router.post("/stripe")
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="stripe-signature"),
    db: AsyncSession = Depends(get_db),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway)
):
    """Record the order of a completed checkout"""
    payload = await request.body()
    try:
        event = payment_gateway.construct_webhook_event(payload, stripe_signature)
    except (ValueError, stripe.SignatureVerificationError) as e:
        logger.warning(f"Rejected webhook: {e}")
        return JSONResponse(
            content=error_response(message="Webhook error", code="webhook_error", details={"reason": str(e)}),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    order = await OrderService(db, payment_gateway).handle_checkout_completed(event)
    if order is None:
        return create_response(message="Event ignored")
    return create_response(data=order, message="OK")
