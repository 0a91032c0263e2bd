"""
Base repository pattern implementation for database operations.

This module provides a generic async repository that specific model
repositories extend. It includes the common CRUD operations and the paging
helpers every listing uses.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement
import logging

from evently.models.base import Base

# Type variable for the model
T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

def contains_pattern(text: str) -> str:
    """
    Build a LIKE pattern matching ``text`` anywhere in a column.

    LIKE wildcards in ``text`` are escaped; use with ``escape="\\\\"``.
    """
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"

class BaseRepository(Generic[T]):
    """
    Generic repository for database operations.

    Attributes:
        db (AsyncSession): SQLAlchemy async session
        model (Type[T]): SQLAlchemy model class
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize the repository with a database session and model class.

        Args:
            db (AsyncSession): SQLAlchemy async session
            model (Type[T]): SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """
        Get all records with optional pagination.

        Args:
            skip (int): Number of records to skip
            limit (Optional[int]): Maximum number of records to return

        Returns:
            List[T]: List of model instances
        """
        stmt = select(self.model).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, id: Any, options: Sequence[Any] = ()) -> Optional[T]:
        """
        Get a record by ID.

        Args:
            id (Any): Primary key value
            options: Loader options, e.g. ``selectinload(...)``

        Returns:
            Optional[T]: Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id).options(*options)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, data: Dict[str, Any]) -> T:
        """
        Create a new record.

        Args:
            data (Dict[str, Any]): Dictionary of field values

        Returns:
            T: Created model instance
        """
        db_item = self.model(**data)
        self.db.add(db_item)
        await self.db.commit()
        await self.db.refresh(db_item)
        return db_item

    async def update(self, id: Any, data: Dict[str, Any]) -> Optional[T]:
        """
        Update a record by ID.

        Args:
            id (Any): Primary key value
            data (Dict[str, Any]): Dictionary of field values to update

        Returns:
            Optional[T]: Updated model instance if found, None otherwise
        """
        db_item = await self.get_by_id(id)
        if db_item:
            self._apply(db_item, data)
            await self.db.commit()
            await self.db.refresh(db_item)
        return db_item

    async def delete(self, id: Any) -> Optional[T]:
        """
        Delete a record by ID.

        Args:
            id (Any): Primary key value

        Returns:
            Optional[T]: The deleted instance, None if not found
        """
        db_item = await self.get_by_id(id)
        if db_item:
            await self.db.delete(db_item)
            await self.db.commit()
        return db_item

    async def count(self, conditions: Sequence[ColumnElement] = ()) -> int:
        """Count the records matching all ``conditions``."""
        stmt = select(func.count()).select_from(self.model).where(*conditions)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def find_page(
        self,
        conditions: Sequence[ColumnElement] = (),
        skip: int = 0,
        limit: int = 100,
        options: Sequence[Any] = (),
    ) -> List[T]:
        """
        Get one page of records matching ``conditions``, newest first.

        Args:
            conditions: WHERE clauses combined with AND
            skip (int): Number of records to skip
            limit (int): Maximum number of records to return
            options: Loader options

        Returns:
            List[T]: Matching model instances
        """
        stmt = (
            select(self.model)
            .where(*conditions)
            .order_by(self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
            .options(*options)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    def _apply(db_item: T, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            if hasattr(db_item, key):
                setattr(db_item, key, value)
