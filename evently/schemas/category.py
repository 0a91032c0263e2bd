"""
Pydantic models for categories.
"""

from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

class CreateCategoryParams(BaseModel):
    category_name: str = Field(..., min_length=1)

class CategoryResponse(BaseModel):
    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)
