"""
Chunk collection ORM model.

One row per collection of the durable vector store, holding the vector
dimension the collection adopted on its first put. Writers lock this row
for the length of their put transaction.

Dependencies: sqlalchemy, raglab.boundary.db.base
System role: Per-collection dimension registry
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from raglab.boundary.db.base import Base, TimestampMixin


class ChunkCollectionModel(Base, TimestampMixin):
    """
    Collection of stored chunk records.

    Attributes:
        collection: Collection name (primary key)
        dimension: Vector length every record of the collection shares
        created_at: Insert timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "chunk_collections"

    collection: Mapped[str] = mapped_column(String(255), primary_key=True)
    dimension: Mapped[int] = mapped_column(Integer, nullable=False)
