"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - ChunkRecordModel, ChunkCollectionModel: Durable vector store tables
  - BaseCRUD, ChunkRecordCRUD, ChunkCollectionCRUD: CRUD operations
  - create_all_tables(), drop_all_tables(): Schema management

Dependencies: sqlalchemy, raglab.configs
System role: Database adapter for the durable vector store
"""

from raglab.boundary.db.base import Base, TimestampMixin
from raglab.boundary.db.connection import get_async_engine, get_async_session_factory
from raglab.boundary.db.models import ChunkCollectionModel, ChunkRecordModel
from raglab.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCollectionCRUD,
    ChunkRecordCRUD,
    chunk_collection_crud,
    chunk_record_crud,
)
from raglab.boundary.db.create_tables import create_all_tables, drop_all_tables

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChunkCollectionModel",
    "ChunkRecordModel",
    # CRUD
    "BaseCRUD",
    "ChunkCollectionCRUD",
    "ChunkRecordCRUD",
    "chunk_collection_crud",
    "chunk_record_crud",
    # Schema
    "create_all_tables",
    "drop_all_tables",
]
