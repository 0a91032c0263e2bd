from uuid import uuid4
from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from evently.models.base import Base, utcnow
from evently.models.custom_types import UUIDType

class Event(Base):
    """
    Model for events listed by organizers.

    Attributes:
        id (UUID): Primary key
        title (str): Event title, searched case-insensitively
        description (str): Free text description
        location (str): Venue or "Online"
        image_url (str): Cover image URL
        start_date_time (datetime): When the event starts
        end_date_time (datetime): When the event ends
        price (str): Ticket price as entered by the organizer
        is_free (bool): Whether tickets are free; overrides ``price`` at checkout
        url (str): External event page
        created_at (datetime): Record creation timestamp, used for ordering
        category_id (UUID): Foreign key to categories
        organizer_id (UUID): Foreign key to users, cleared when the organizer is deleted

    Relationships:
        category: Many-to-one relationship with Category
        organizer: Many-to-one relationship with User
        orders: One-to-many relationship with Order
    """
    __tablename__ = "events"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    title = Column(String, nullable=False)
    description = Column(String)
    location = Column(String)
    image_url = Column(String, nullable=False)
    start_date_time = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    end_date_time = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    price = Column(String)
    is_free = Column(Boolean, default=False, nullable=False)
    url = Column(String)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    category_id = Column(UUIDType, ForeignKey("categories.id"))
    organizer_id = Column(UUIDType, ForeignKey("users.id"), nullable=True)

    # Relationships
    category = relationship("Category", back_populates="events")
    organizer = relationship("User", back_populates="events")
    orders = relationship("Order", back_populates="event")

    def __repr__(self):
        return f"<Event {self.title}>"
