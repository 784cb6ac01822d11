"""
Base CRUD operations for SQLAlchemy models.

Provides the criteria-based bulk operations shared by the model-specific
CRUD classes. Methods never commit; the caller owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from raglab.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Subclasses specify the model class and express their queries as
    filter criteria over its columns.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def add_many(self, session: AsyncSession, rows: Sequence[dict[str, Any]]) -> list[ModelT]:
        """
        Insert one instance per row and flush so ids are assigned in order.

        Args:
            session: Async database session
            rows: Model field values per instance

        Returns:
            Created model instances, in row order
        """
        instances = [self.model(**row) for row in rows]
        session.add_all(instances)
        await session.flush()
        return instances

    async def list_where(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        order_by: Any = None,
    ) -> Sequence[ModelT]:
        """
        Retrieve the instances matching every criterion.

        Args:
            session: Async database session
            *criteria: SQL filter expressions
            order_by: Optional ordering column

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_where(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> int:
        """
        Delete the rows matching every criterion.

        Returns:
            Number of deleted rows
        """
        result = await session.execute(delete(self.model).where(*criteria))
        return result.rowcount

    async def count_where(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> int:
        """Number of rows matching every criterion."""
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        result = await session.execute(stmt)
        return int(result.scalar_one())
