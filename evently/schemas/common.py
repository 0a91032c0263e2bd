"""
Pydantic models and helpers shared by every entity.
"""

from typing import Generic, List, TypeVar, Union
from uuid import UUID
from pydantic import BaseModel

from evently.exceptions import ValidationError

T = TypeVar("T")

class Page(BaseModel, Generic[T]):
    """One page of results plus the page count for the whole result set."""
    data: List[T]
    total_pages: int

def to_uuid(value: Union[str, UUID], field: str = "id") -> UUID:
    """
    Coerce a path or body value to a UUID.

    Raises:
        ValidationError: If ``value`` is not a valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}: {value}")
