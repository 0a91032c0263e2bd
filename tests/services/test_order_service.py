"""
Tests for the order service: checkout, webhook orders and order listings.
"""

import logging
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio

from evently.exceptions import ValidationError
from evently.schemas.order import CheckoutOrderParams, CreateOrderParams
from evently.services import order_service as order_service_module
from evently.services.event_service import EventService
from evently.services.order_service import OrderService, price_in_cents
from evently.services.payment import CheckoutSession
from evently.services.user_service import UserService
from evently.utils.config import Settings

@pytest.fixture
def payment_gateway():
    gateway = AsyncMock()
    gateway.create_checkout_session.return_value = CheckoutSession(
        id="cs_test_123",
        url="https://checkout.stripe.com/c/pay/cs_test_123"
    )
    return gateway

@pytest.fixture
def order_service(db_session, payment_gateway):
    return OrderService(db_session, payment_gateway)

@pytest.fixture
def checkout_settings(monkeypatch):
    settings = Settings(SERVER_URL="https://evently.test", CHECKOUT_CURRENCY="usd")
    monkeypatch.setattr(order_service_module, "get_settings", lambda: settings)
    return settings

@pytest_asyncio.fixture
async def jazz(db_session, revalidate, organizer, event_input):
    return await EventService(db_session, revalidate).create_event(organizer.id, event_input(), "/")

@pytest_asyncio.fixture
async def pycon(db_session, revalidate, organizer, event_input, tech):
    return await EventService(db_session, revalidate).create_event(
        organizer.id, event_input(title="PyCon", category_id=tech.id), "/"
    )

async def place_order(order_service, event, buyer, stripe_id, total_amount="25.50"):
    return await order_service.create_order(CreateOrderParams(
        stripe_id=stripe_id,
        event_id=event.id,
        buyer_id=buyer.id,
        total_amount=total_amount
    ))

def checkout_completed(session_id, event_id, buyer_id, amount_total=2500):
    return {
        "type": "checkout.session.completed",
        "data": {
            "object": {
                "id": session_id,
                "amount_total": amount_total,
                "metadata": {"eventId": str(event_id), "buyerId": str(buyer_id)},
            }
        },
    }

def test_price_in_cents():
    assert price_in_cents("25.50", False) == 2550
    assert price_in_cents("10", False) == 1000
    assert price_in_cents("25.50", True) == 0
    assert price_in_cents(None, True) == 0

@pytest.mark.asyncio
async def test_create_order(order_service, jazz, buyer):
    order = await place_order(order_service, jazz, buyer, "cs_1")

    assert order.stripe_id == "cs_1"
    assert order.event_id == jazz.id
    assert order.buyer_id == buyer.id
    assert order.total_amount == "25.50"
    assert order.created_at is not None

@pytest.mark.asyncio
async def test_checkout_order_builds_line_item(order_service, payment_gateway, checkout_settings, jazz, buyer):
    url = await order_service.checkout_order(CheckoutOrderParams(
        event_title=jazz.title,
        event_id=jazz.id,
        price="25.50",
        is_free=False,
        buyer_id=buyer.id
    ))

    assert url == "https://checkout.stripe.com/c/pay/cs_test_123"
    kwargs = payment_gateway.create_checkout_session.await_args.kwargs
    assert kwargs["line_items"] == [{
        "price_data": {
            "currency": "usd",
            "unit_amount": 2550,
            "product_data": {"name": "Jazz Night"},
        },
        "quantity": 1,
    }]
    assert kwargs["metadata"] == {"eventId": str(jazz.id), "buyerId": str(buyer.id)}
    assert kwargs["success_url"] == "https://evently.test/profile"
    assert kwargs["cancel_url"] == "https://evently.test/"

@pytest.mark.asyncio
async def test_checkout_free_event_costs_nothing(order_service, payment_gateway, checkout_settings, jazz, buyer):
    await order_service.checkout_order(CheckoutOrderParams(
        event_title=jazz.title,
        event_id=jazz.id,
        price="25.50",
        is_free=True,
        buyer_id=buyer.id
    ))

    kwargs = payment_gateway.create_checkout_session.await_args.kwargs
    assert kwargs["line_items"][0]["price_data"]["unit_amount"] == 0

@pytest.mark.asyncio
async def test_checkout_reraises_gateway_error(order_service, payment_gateway, checkout_settings, jazz, buyer):
    payment_gateway.create_checkout_session.side_effect = RuntimeError("card network down")

    with pytest.raises(RuntimeError, match="card network down"):
        await order_service.checkout_order(CheckoutOrderParams(
            event_title=jazz.title,
            event_id=jazz.id,
            price="25.50",
            buyer_id=buyer.id
        ))

@pytest.mark.asyncio
async def test_checkout_completed_records_order(order_service, jazz, buyer):
    order = await order_service.handle_checkout_completed(checkout_completed("cs_2", jazz.id, buyer.id))

    assert order.stripe_id == "cs_2"
    assert order.total_amount == "25"
    assert order.event_id == jazz.id
    assert order.buyer_id == buyer.id

@pytest.mark.asyncio
async def test_checkout_completed_is_idempotent(order_service, jazz, buyer):
    event = checkout_completed("cs_3", jazz.id, buyer.id, amount_total=2550)

    first = await order_service.handle_checkout_completed(event)
    second = await order_service.handle_checkout_completed(event)

    assert first.total_amount == "25.5"
    assert second.id == first.id
    assert (await order_service.get_orders_by_user(buyer.id)).total_pages == 1

@pytest.mark.asyncio
async def test_checkout_completed_free_event(order_service, jazz, buyer):
    order = await order_service.handle_checkout_completed(
        checkout_completed("cs_free", jazz.id, buyer.id, amount_total=0)
    )
    assert order.total_amount == "0"

@pytest.mark.asyncio
async def test_checkout_completed_requires_metadata(order_service):
    event = {"type": "checkout.session.completed", "data": {"object": {"id": "cs_4", "metadata": {}}}}

    with pytest.raises(ValidationError):
        await order_service.handle_checkout_completed(event)

@pytest.mark.asyncio
async def test_other_webhook_events_are_ignored(order_service):
    assert await order_service.handle_checkout_completed({"type": "payment_intent.created"}) is None

@pytest.mark.asyncio
async def test_get_orders_by_event_searches_buyer_name(order_service, jazz, pycon, buyer, second_buyer):
    await place_order(order_service, jazz, buyer, "cs_alice")
    await place_order(order_service, jazz, second_buyer, "cs_bob")
    await place_order(order_service, pycon, buyer, "cs_alice_pycon")

    matches = await order_service.get_orders_by_event(str(jazz.id), "smi")

    assert len(matches) == 1
    assert matches[0].buyer == "Alice Smith"
    assert matches[0].event_title == "Jazz Night"
    assert matches[0].event_id == jazz.id
    assert matches[0].total_amount == "25.50"

    everyone = await order_service.get_orders_by_event(jazz.id, "")
    assert sorted(order.buyer for order in everyone) == ["Alice Smith", "Bob Jones"]

    full_name = await order_service.get_orders_by_event(jazz.id, "BOB JONES")
    assert [order.buyer for order in full_name] == ["Bob Jones"]

@pytest.mark.asyncio
async def test_get_orders_by_event_requires_id(order_service):
    with pytest.raises(ValidationError, match="Event ID is required"):
        await order_service.get_orders_by_event("", "")
    with pytest.raises(ValidationError, match="Event ID is required"):
        await order_service.get_orders_by_event(None)

@pytest.mark.asyncio
async def test_get_orders_by_event_skips_deleted_buyers(db_session, revalidate, order_service, jazz, buyer, second_buyer):
    await place_order(order_service, jazz, buyer, "cs_alice")
    await place_order(order_service, jazz, second_buyer, "cs_bob")

    await UserService(db_session, revalidate).delete_user(second_buyer.clerk_id)

    orders = await order_service.get_orders_by_event(jazz.id)
    assert [order.buyer for order in orders] == ["Alice Smith"]

@pytest.mark.asyncio
async def test_get_orders_by_event_unknown_event(order_service):
    assert await order_service.get_orders_by_event(uuid4()) == []

@pytest.mark.asyncio
async def test_get_orders_by_user(order_service, jazz, pycon, buyer, second_buyer, organizer):
    """Test paging of a buyer's orders with the event and organizer populated."""
    await place_order(order_service, jazz, buyer, "cs_1")
    await place_order(order_service, pycon, buyer, "cs_2")
    await place_order(order_service, jazz, buyer, "cs_3")
    await place_order(order_service, jazz, second_buyer, "cs_other")

    first_page = await order_service.get_orders_by_user(str(buyer.id), limit=2, page=1)
    second_page = await order_service.get_orders_by_user(buyer.id, limit=2, page=2)

    assert first_page.total_pages == 2
    assert [order.stripe_id for order in first_page.data] == ["cs_3", "cs_2"]
    assert [order.stripe_id for order in second_page.data] == ["cs_1"]

    newest = first_page.data[0]
    assert newest.event.title == "Jazz Night"
    assert newest.event.organizer.id == organizer.id
    assert first_page.data[1].event.category.name == "Tech"

@pytest.mark.asyncio
async def test_get_orders_by_user_invalid_id(order_service):
    with pytest.raises(ValidationError):
        await order_service.get_orders_by_user("not-a-uuid")

@pytest.mark.asyncio
async def test_checkout_completed_malformed_metadata_is_logged(order_service, jazz, caplog):
    event = checkout_completed("cs_bad", "nope", uuid4())

    with caplog.at_level(logging.ERROR):
        with pytest.raises(ValidationError, match="Invalid event id: nope"):
            await order_service.handle_checkout_completed(event)

    assert "Error in handle_checkout_completed" in caplog.text
    assert await order_service.orders.get_by_stripe_id("cs_bad") is None
