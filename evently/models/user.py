from uuid import uuid4
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from evently.models.base import Base, utcnow
from evently.models.custom_types import UUIDType

class User(Base):
    """
    Model for user accounts.

    Attributes:
        id (UUID): Primary key
        clerk_id (str): Identity provider's user id, used for updates and deletion
        email (str): Unique email address
        username (str): Unique display handle
        first_name (str): Given name
        last_name (str): Family name
        photo (str): Avatar URL
        created_at (datetime): Record creation timestamp

    Relationships:
        events: Events organized by the user
        orders: Orders bought by the user
    """
    __tablename__ = "users"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    clerk_id = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, nullable=False)
    username = Column(String, unique=True, nullable=False)
    first_name = Column(String)
    last_name = Column(String)
    photo = Column(String)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    # Relationships
    events = relationship("Event", back_populates="organizer", passive_deletes=True)
    orders = relationship("Order", back_populates="buyer", passive_deletes=True)

    def __repr__(self):
        return f"<User {self.username}>"
