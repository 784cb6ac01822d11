"""
Chunk record CRUD operations.

Provides collection-scoped reads and the replace-many write used by the
durable vector store. Methods never commit; the caller owns the
transaction.

Dependencies: sqlalchemy, raglab.boundary.db.models
System role: Chunk record persistence operations
"""

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from raglab.boundary.db.CRUD.base_crud import BaseCRUD
from raglab.boundary.db.models.chunk_record_model import ChunkRecordModel


class ChunkRecordCRUD(BaseCRUD[ChunkRecordModel]):
    """
    CRUD operations for ChunkRecordModel.

    Extends BaseCRUD with collection-scoped queries and keyed replacement.
    """

    def __init__(self) -> None:
        """Initialize ChunkRecordCRUD with ChunkRecordModel."""
        super().__init__(ChunkRecordModel)

    async def replace_many(
        self,
        session: AsyncSession,
        collection: str,
        provenance: str,
        rows: Sequence[dict[str, Any]],
    ) -> list[ChunkRecordModel]:
        """
        Delete existing records with the same keys, then insert all rows.

        Args:
            session: Async database session inside an open transaction
            collection: Target collection
            provenance: Provenance shared by every row
            rows: Column values per record (chunk_id, text, chunk_metadata,
                vector, dimension)

        Returns:
            Inserted model instances, in insertion order
        """
        await self.delete_where(
            session,
            ChunkRecordModel.collection == collection,
            ChunkRecordModel.provenance == provenance,
            ChunkRecordModel.chunk_id.in_([row["chunk_id"] for row in rows]),
        )
        return await self.add_many(
            session,
            [{"collection": collection, "provenance": provenance, **row} for row in rows],
        )

    async def list_by_collection(
        self,
        session: AsyncSession,
        collection: str,
    ) -> Sequence[ChunkRecordModel]:
        """
        Retrieve every record of a collection in insertion order.

        Args:
            session: Async database session
            collection: Collection to read

        Returns:
            Sequence of ChunkRecordModels ordered by id
        """
        return await self.list_where(
            session,
            ChunkRecordModel.collection == collection,
            order_by=ChunkRecordModel.id,
        )

    async def delete_by_collection(self, session: AsyncSession, collection: str) -> int:
        """
        Delete every record of a collection.

        Returns:
            Number of deleted rows
        """
        return await self.delete_where(session, ChunkRecordModel.collection == collection)

    async def count_by_collection(self, session: AsyncSession, collection: str) -> int:
        """Number of records stored in a collection."""
        return await self.count_where(session, ChunkRecordModel.collection == collection)


chunk_record_crud = ChunkRecordCRUD()
