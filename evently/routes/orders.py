"""
Router for checkout and order endpoints.
"""

import logging
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from evently.schemas.order import CheckoutOrderParams, CreateOrderParams
from evently.services.order_service import OrderService
from evently.services.payment import PaymentGateway, get_payment_gateway
from evently.utils.api_response import create_response
from evently.utils.database import get_db

router = APIRouter(
    prefix="/api/orders",
    tags=["orders"]
)

logger = logging.getLogger(__name__)

@router.post("/checkout")
async def checkout(
    order: CheckoutOrderParams,
    db: AsyncSession = Depends(get_db),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway)
):
    """Start a hosted checkout and redirect the buyer to it"""
    url = await OrderService(db, payment_gateway).checkout_order(order)
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)

@router.post("")
async def create_order(order: CreateOrderParams, db: AsyncSession = Depends(get_db)):
    new_order = await OrderService(db).create_order(order)
    return create_response(data=new_order, message="Order created successfully", status_code=status.HTTP_201_CREATED)

@router.get("/event/{event_id}")
async def list_orders_by_event(
    event_id: str,
    search_string: str = Query("", description="Fragment of the buyer's full name"),
    db: AsyncSession = Depends(get_db)
):
    """Orders of an event, searchable by buyer"""
    orders = await OrderService(db).get_orders_by_event(event_id, search_string)
    return create_response(data=orders)

@router.get("/user/{user_id}")
async def list_orders_by_user(
    user_id: str,
    limit: int = Query(3, gt=0),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db)
):
    """Orders bought by a user"""
    result = await OrderService(db).get_orders_by_user(user_id, limit=limit, page=page)
    return create_response(data=result)
