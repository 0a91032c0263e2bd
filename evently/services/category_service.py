"""
Service for event categories.
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from evently.models.category import Category
from evently.repositories.category import CategoryRepository
from evently.schemas.category import CategoryResponse
from evently.utils.errors import handle_error

logger = logging.getLogger(__name__)

class CategoryService:
    """Service for creating and listing categories."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.categories = CategoryRepository(db_session)

    async def create_category(self, category_name: str) -> CategoryResponse:
        """Create a category named ``category_name``."""
        try:
            new_category = await self.categories.create({"name": category_name})
            logger.info(f"Created category {new_category.name}")
            return CategoryResponse.model_validate(new_category)
        except Exception as e:
            await self.db_session.rollback()
            handle_error(e, "create_category")

    async def get_all_categories(self) -> List[CategoryResponse]:
        """List every category, sorted by name."""
        try:
            categories = await self.categories.get_all()
            return [CategoryResponse.model_validate(category) for category in categories]
        except Exception as e:
            handle_error(e, "get_all_categories")

    async def get_category_by_name(self, name: str) -> Optional[Category]:
        """First category whose name contains ``name``, ignoring case."""
        return await self.categories.get_by_name(name)
