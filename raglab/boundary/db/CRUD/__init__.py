"""
CRUD operations for database models.

Exports the base CRUD class and the model CRUDs with pre-instantiated
singletons for direct use.

Usage:
    from raglab.boundary.db.CRUD import chunk_record_crud

    records = await chunk_record_crud.list_by_collection(session, "default")
"""

from raglab.boundary.db.CRUD.base_crud import BaseCRUD
from raglab.boundary.db.CRUD.chunk_collection_crud import ChunkCollectionCRUD, chunk_collection_crud
from raglab.boundary.db.CRUD.chunk_record_crud import ChunkRecordCRUD, chunk_record_crud

__all__ = [
    "BaseCRUD",
    "ChunkCollectionCRUD",
    "ChunkRecordCRUD",
    "chunk_collection_crud",
    "chunk_record_crud",
]
