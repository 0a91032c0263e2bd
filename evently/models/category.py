from uuid import uuid4
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from evently.models.base import Base
from evently.models.custom_types import UUIDType

class Category(Base):
    """Event category, e.g. "Music" or "Tech"."""
    __tablename__ = "categories"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    name = Column(String, unique=True, nullable=False)

    events = relationship("Event", back_populates="category")

    def __repr__(self):
        return f"<Category {self.name}>"
