"""
Router for category endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from evently.schemas.category import CreateCategoryParams
from evently.services.category_service import CategoryService
from evently.utils.api_response import create_response
from evently.utils.database import get_db

router = APIRouter(
    prefix="/api/categories",
    tags=["categories"]
)

@router.get("")
async def list_categories(db: AsyncSession = Depends(get_db)):
    return create_response(data=await CategoryService(db).get_all_categories())

@router.post("")
async def create_category(params: CreateCategoryParams, db: AsyncSession = Depends(get_db)):
    category = await CategoryService(db).create_category(params.category_name)
    return create_response(data=category, message="Category created successfully", status_code=status.HTTP_201_CREATED)
