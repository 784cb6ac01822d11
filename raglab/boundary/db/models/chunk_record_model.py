"""
Chunk record ORM model.

One row per stored (provenance, chunk_id) pair of a collection. The
autoincrement id carries insertion order, which breaks similarity ties.

Dependencies: sqlalchemy, raglab.boundary.db.base
System role: Durable vector store table
"""

from typing import Any

from sqlalchemy import JSON, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from raglab.boundary.db.base import Base, TimestampMixin
from raglab.models.chunk import Chunk


class ChunkRecordModel(Base, TimestampMixin):
    """
    Stored chunk with its embedding.

    Attributes:
        id: Autoincrement primary key (insertion order)
        collection: Namespace shared by records queried together
        provenance: Source identifier supplied at ingest
        chunk_id: Order-derived chunk identifier within the provenance
        text: Exact chunk text
        chunk_metadata: Opaque chunk metadata (column "metadata")
        vector: Embedding as a JSON array of floats
        dimension: Length of vector
        created_at: Insert timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Constraints:
        (collection, provenance, chunk_id): UNIQUE; re-puts replace the row
    """

    __tablename__ = "chunk_records"
    __table_args__ = (
        UniqueConstraint("collection", "provenance", "chunk_id", name="uq_chunk_records_key"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    collection: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    provenance: Mapped[str] = mapped_column(String(255), nullable=False)
    chunk_id: Mapped[str] = mapped_column(String(255), nullable=False)

    text: Mapped[str] = mapped_column(Text, nullable=False)
    chunk_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata",
        JSON,
        nullable=False,
        default=dict,
    )
    vector: Mapped[list[float]] = mapped_column(JSON, nullable=False)
    dimension: Mapped[int] = mapped_column(Integer, nullable=False)

    def to_chunk(self) -> Chunk:
        """Rebuild the domain chunk from this row."""
        return Chunk(chunk_id=self.chunk_id, text=self.text, metadata=dict(self.chunk_metadata or {}))
