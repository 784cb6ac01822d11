"""Boundary adapters: relational database and vector storage."""
