"""
Durable vector store over SQLAlchemy async ORM.

Records are rows of the chunk_records table, namespaced by collection.
Each put runs in one transaction that first claims the collection's row
in chunk_collections (registering the dimension on first use and locking
it), then deletes existing keys and inserts the batch. Concurrent writers
of one collection are serialized on that row, so a collection never holds
two dimensions, and a failure or cancellation rolls the whole batch back.
Similarity is computed client-side over the collection's rows in
insertion order.

Dependencies: sqlalchemy, numpy (via similarity), raglab.boundary.db
System role: Durable vector store for multi-run evaluation
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from raglab.boundary.db.CRUD.chunk_collection_crud import ChunkCollectionCRUD
from raglab.boundary.db.CRUD.chunk_record_crud import ChunkRecordCRUD
from raglab.boundary.db.models.chunk_record_model import ChunkRecordModel
from raglab.boundary.vdb.base import (
    check_dimension,
    check_put_batch,
    check_uniform_dimension,
    dedupe_latest,
)
from raglab.boundary.vdb.similarity import rank_by_similarity
from raglab.boundary.vdb.vector_schemas import ScoredChunk, SearchResult, StoredRecord
from raglab.core.exceptions import StorageError
from raglab.models.chunk import Chunk, Vector

logger = logging.getLogger(__name__)


class SQLVectorStore:
    """
    Vector store persisted in a relational database.

    Attributes:
        collection: Namespace of the records this store reads and writes
    """

    name = "sql"

    def __init__(
        self,
        session_factory: async_sessionmaker,
        collection: str = "default",
        crud: ChunkRecordCRUD | None = None,
        collections: ChunkCollectionCRUD | None = None,
    ) -> None:
        """
        Initialize store.

        Args:
            session_factory: Async session factory bound to the database
            collection: Collection name for all operations
            crud: Record CRUD instance (defaults to ChunkRecordCRUD())
            collections: Collection CRUD instance (defaults to ChunkCollectionCRUD())
        """
        self._session_factory = session_factory
        self.collection = collection
        self._crud = crud or ChunkRecordCRUD()
        self._collections = collections or ChunkCollectionCRUD()

    async def put(self, chunks: Sequence[Chunk], vectors: Sequence[Vector], provenance: str) -> None:
        """
        Insert a batch in one transaction; existing keys are replaced.

        Raises:
            ValueError: chunks and vectors differ in length
            ConfigurationError: Vector dimension differs from the collection's
            StorageError: Database failure (nothing from the batch is kept)
        """
        dimension = check_put_batch(chunks, vectors)
        if dimension is None:
            return

        rows = [
            {
                "chunk_id": chunk.chunk_id,
                "text": chunk.text,
                "chunk_metadata": dict(chunk.metadata),
                "vector": [float(v) for v in vector],
                "dimension": dimension,
            }
            for chunk, vector in dedupe_latest(chunks, vectors)
        ]

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    existing = await self._collections.claim_dimension(session, self.collection, dimension)
                    check_dimension(existing, dimension, "put")
                    await self._crud.replace_many(session, self.collection, provenance, rows)
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:put - Transaction rolled back: {type(e).__name__}")
            raise StorageError(
                f"Failed to store {len(rows)} records: {e}",
                operation="put",
                details={"collection": self.collection},
            ) from e

        logger.debug(f"{__name__}:put - Stored {len(rows)} records in collection={self.collection}")

    async def _read_collection(
        self, session: AsyncSession, operation: str
    ) -> tuple[Sequence[ChunkRecordModel], int | None]:
        """Rows of the collection in insertion order and the dimension they share."""
        records = await self._crud.list_by_collection(session, self.collection)
        dimension = check_uniform_dimension((record.dimension for record in records), operation)
        return records, dimension

    async def search(self, query_vector: Vector, top_k: int) -> SearchResult:
        """
        Rank the collection's chunks by cosine similarity to `query_vector`.

        Returns:
            SearchResult: At most min(top_k, stored) matches, best first,
                and the number of rows read for ranking

        Raises:
            ConfigurationError: Query dimension differs from the collection's,
                or the stored rows disagree on dimension
            StorageError: Database failure
        """
        try:
            async with self._session_factory() as session:
                if top_k <= 0:
                    return SearchResult([], await self._crud.count_by_collection(session, self.collection))
                records, dimension = await self._read_collection(session, "query")
        except SQLAlchemyError as e:
            raise StorageError(
                f"Failed to read collection: {e}",
                operation="query",
                details={"collection": self.collection},
            ) from e

        if not records:
            return SearchResult([], 0)
        check_dimension(dimension, len(query_vector), "query")

        ranked = rank_by_similarity(query_vector, [record.vector for record in records], top_k)
        return SearchResult([ScoredChunk(records[index].to_chunk(), score) for index, score in ranked], len(records))

    async def query(self, query_vector: Vector, top_k: int) -> list[ScoredChunk]:
        return (await self.search(query_vector, top_k)).matches

    async def scan(self) -> list[StoredRecord]:
        """
        Every record of the collection in insertion order.

        Raises:
            ConfigurationError: Stored rows disagree on dimension
            StorageError: Database failure
        """
        try:
            async with self._session_factory() as session:
                records, _ = await self._read_collection(session, "scan")
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read collection: {e}", operation="scan") from e

        return [
            StoredRecord(provenance=record.provenance, chunk=record.to_chunk(), vector=list(record.vector))
            for record in records
        ]

    async def clear(self) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    deleted = await self._crud.delete_by_collection(session, self.collection)
                    await self._collections.delete_collection(session, self.collection)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to clear collection: {e}", operation="clear") from e

        logger.info(f"{__name__}:clear - Removed {deleted} records from collection={self.collection}")

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                return await self._crud.count_by_collection(session, self.collection)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to count records: {e}", operation="count") from e
