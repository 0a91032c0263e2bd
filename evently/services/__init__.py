"""
Data-access services, one per entity, plus the payment gateway boundary.
"""

from evently.services.user_service import UserService
from evently.services.category_service import CategoryService
from evently.services.event_service import EventService
from evently.services.order_service import OrderService
from evently.services.payment import PaymentGateway, StripeGateway, CheckoutSession, get_payment_gateway

__all__ = [
    'UserService',
    'CategoryService',
    'EventService',
    'OrderService',
    'PaymentGateway',
    'StripeGateway',
    'CheckoutSession',
    'get_payment_gateway',
]
