from uuid import uuid4
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from evently.models.base import Base, utcnow
from evently.models.custom_types import UUIDType

class Order(Base):
    """
    Model for a ticket purchase.

    Attributes:
        id (UUID): Primary key
        stripe_id (str): Checkout session id from the payment provider
        total_amount (str): Amount paid, in dollars
        created_at (datetime): Purchase timestamp
        event_id (UUID): Foreign key to events
        buyer_id (UUID): Foreign key to users, cleared when the buyer is deleted
    """
    __tablename__ = "orders"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    stripe_id = Column(String, unique=True, nullable=False)
    total_amount = Column(String)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    event_id = Column(UUIDType, ForeignKey("events.id"))
    buyer_id = Column(UUIDType, ForeignKey("users.id"), nullable=True)

    # Relationships
    event = relationship("Event", back_populates="orders")
    buyer = relationship("User", back_populates="orders")

    def __repr__(self):
        return f"<Order {self.stripe_id}>"
