"""
Chunk collection CRUD operations.

Registers the dimension of a collection atomically. claim_dimension
inserts the collection row if absent and then locks it, so concurrent
first writers agree on a single dimension and later writers of the same
collection are serialized until the holder commits.

Dependencies: sqlalchemy, raglab.boundary.db.models
System role: Collection dimension registry operations
"""

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from raglab.boundary.db.CRUD.base_crud import BaseCRUD
from raglab.boundary.db.models.chunk_collection_model import ChunkCollectionModel

# Dialects with INSERT ... ON CONFLICT DO NOTHING
_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class ChunkCollectionCRUD(BaseCRUD[ChunkCollectionModel]):
    """CRUD operations for ChunkCollectionModel."""

    def __init__(self) -> None:
        """Initialize ChunkCollectionCRUD with ChunkCollectionModel."""
        super().__init__(ChunkCollectionModel)

    async def get_dimension(
        self,
        session: AsyncSession,
        collection: str,
        for_update: bool = False,
    ) -> int | None:
        """
        Dimension adopted by a collection.

        Args:
            session: Async database session
            collection: Collection name
            for_update: Lock the row until the transaction ends

        Returns:
            Stored dimension, None when the collection has no row
        """
        stmt = select(ChunkCollectionModel.dimension).where(ChunkCollectionModel.collection == collection)
        if for_update:
            stmt = stmt.with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def claim_dimension(self, session: AsyncSession, collection: str, dimension: int) -> int:
        """
        Register `dimension` for an unregistered collection and lock its row.

        Must run first in the put transaction. On PostgreSQL the conflict
        insert waits for a concurrent first writer to finish; on SQLite the
        insert takes the database write lock.

        Args:
            session: Async database session inside an open transaction
            collection: Collection name
            dimension: Dimension of the batch about to be written

        Returns:
            The collection's dimension: `dimension` for a new collection,
            otherwise the one registered earlier
        """
        conflict_insert = _CONFLICT_INSERTS.get(session.get_bind().dialect.name)
        if conflict_insert is not None:
            stmt = (
                conflict_insert(ChunkCollectionModel)
                .values(collection=collection, dimension=dimension)
                .on_conflict_do_nothing(index_elements=[ChunkCollectionModel.collection])
            )
            await session.execute(stmt)

        stored = await self.get_dimension(session, collection, for_update=True)
        if stored is None:
            # Other dialects: a racing first writer fails on the primary key
            await self.add_many(session, [{"collection": collection, "dimension": dimension}])
            return dimension
        return stored

    async def delete_collection(self, session: AsyncSession, collection: str) -> int:
        """Drop the collection row so the next put may adopt a new dimension."""
        return await self.delete_where(session, ChunkCollectionModel.collection == collection)


chunk_collection_crud = ChunkCollectionCRUD()
