"""
This package contains the database models for the application.
"""

from evently.models.base import Base
from evently.models.user import User
from evently.models.category import Category
from evently.models.event import Event
from evently.models.order import Order

__all__ = ['Base', 'User', 'Category', 'Event', 'Order']
