"""
Pydantic models for users.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict

class CreateUserParams(BaseModel):
    """Model for creating a user from identity provider data"""
    clerk_id: str
    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[str] = None

class UpdateUserParams(BaseModel):
    """Model for updating a user; only the fields that are set are written"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    photo: Optional[str] = None

class UserResponse(BaseModel):
    """Model for user response"""
    id: UUID
    clerk_id: str
    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class OrganizerSummary(BaseModel):
    """The user fields embedded in event responses"""
    id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
