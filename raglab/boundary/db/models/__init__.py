"""ORM models registered with Base.metadata."""

from raglab.boundary.db.models.chunk_collection_model import ChunkCollectionModel
from raglab.boundary.db.models.chunk_record_model import ChunkRecordModel

__all__ = ["ChunkCollectionModel", "ChunkRecordModel"]
