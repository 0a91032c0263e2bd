"""
Payment gateway boundary.

Services talk to ``PaymentGateway``; ``StripeGateway`` is the production
implementation backed by the Stripe SDK. Tests substitute a mock.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import stripe

from evently.utils.config import get_settings

logger = logging.getLogger(__name__)

@dataclass
class CheckoutSession:
    """Hosted checkout session created by the provider."""
    id: str
    url: str

class PaymentGateway(ABC):
    """Interface to a hosted-checkout payment provider."""

    @abstractmethod
    async def create_checkout_session(
        self,
        line_items: List[Dict[str, Any]],
        metadata: Dict[str, str],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a one-off payment session and return where to send the buyer."""

    @abstractmethod
    def construct_webhook_event(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """Verify a webhook payload and return the decoded event."""

class StripeGateway(PaymentGateway):
    """Stripe Checkout implementation."""

    def __init__(self, api_key: str, webhook_secret: str = ""):
        self.api_key = api_key
        self.webhook_secret = webhook_secret

    async def create_checkout_session(
        self,
        line_items: List[Dict[str, Any]],
        metadata: Dict[str, str],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        # The SDK is blocking; keep it off the event loop
        session = await asyncio.to_thread(
            stripe.checkout.Session.create,
            api_key=self.api_key,
            line_items=line_items,
            metadata=metadata,
            mode="payment",
            success_url=success_url,
            cancel_url=cancel_url,
        )
        logger.info(f"Created checkout session {session.id}")
        return CheckoutSession(id=session.id, url=session.url)

    def construct_webhook_event(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        # Raises stripe.SignatureVerificationError on a bad signature
        stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        return json.loads(payload)

def get_payment_gateway() -> PaymentGateway:
    """FastAPI dependency returning the configured gateway."""
    settings = get_settings()
    return StripeGateway(settings.STRIPE_SECRET_KEY, settings.STRIPE_WEBHOOK_SECRET)
