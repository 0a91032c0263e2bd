"""
Repository for Category model operations.
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from evently.repositories.base import BaseRepository, contains_pattern
from evently.models.category import Category

class CategoryRepository(BaseRepository[Category]):
    """Repository for Category database operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    async def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Category]:
        stmt = select(Category).order_by(Category.name).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Optional[Category]:
        """
        Get the first category whose name contains ``name``, ignoring case.

        Args:
            name (str): Full or partial category name

        Returns:
            Optional[Category]: First match by name, None if nothing matches
        """
        stmt = (
            select(Category)
            .where(Category.name.ilike(contains_pattern(name), escape="\\"))
            .order_by(Category.name)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
