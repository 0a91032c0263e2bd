"""
Router for user endpoints.

Users are written by the identity provider integration, so update and delete
are addressed by the provider's id.
"""

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from evently.schemas.user import CreateUserParams, UpdateUserParams
from evently.services.user_service import UserService
from evently.utils.api_response import create_response
from evently.utils.database import get_db

router = APIRouter(
    prefix="/api/users",
    tags=["users"]
)

logger = logging.getLogger(__name__)

@router.post("")
async def create_user(user: CreateUserParams, db: AsyncSession = Depends(get_db)):
    """Create a user"""
    new_user = await UserService(db).create_user(user)
    return create_response(data=new_user, message="User created successfully", status_code=status.HTTP_201_CREATED)

@router.get("/{user_id}")
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    """Get a user by ID"""
    return create_response(data=await UserService(db).get_user_by_id(user_id))

@router.put("/clerk/{clerk_id}")
async def update_user(clerk_id: str, user: UpdateUserParams, db: AsyncSession = Depends(get_db)):
    """Update a user by identity provider id"""
    updated_user = await UserService(db).update_user(clerk_id, user)
    return create_response(data=updated_user, message="User updated successfully")

@router.delete("/clerk/{clerk_id}")
async def delete_user(clerk_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a user by identity provider id"""
    deleted_user = await UserService(db).delete_user(clerk_id)
    return create_response(data=deleted_user, message="User deleted successfully")
