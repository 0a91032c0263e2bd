"""
Test configuration and fixtures for integration tests.

Requests go through the real application with the database session and the
payment gateway replaced by test doubles.
"""

from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from evently.main import app
from evently.services.payment import CheckoutSession, get_payment_gateway
from evently.utils.database import get_db

def override_get_db(db_session: AsyncSession):
    """Create a callable dependency override for get_db."""
    async def _get_test_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, it's handled by the fixture
    return _get_test_db

@pytest.fixture
def payment_gateway() -> Mock:
    """Gateway double: checkout returns a fixed session, webhooks are set per test."""
    gateway = Mock()
    gateway.create_checkout_session = AsyncMock(return_value=CheckoutSession(
        id="cs_test_123",
        url="https://checkout.stripe.com/c/pay/cs_test_123"
    ))
    return gateway

@pytest_asyncio.fixture
async def client(db_session, payment_gateway):
    """HTTP client bound to the application."""
    app.dependency_overrides[get_db] = override_get_db(db_session)
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
