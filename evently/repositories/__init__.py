"""
This package contains repository implementations for database operations.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns.
"""

from evently.repositories.user import UserRepository
from evently.repositories.category import CategoryRepository
from evently.repositories.event import EventRepository
from evently.repositories.order import OrderRepository

__all__ = ['UserRepository', 'CategoryRepository', 'EventRepository', 'OrderRepository']
