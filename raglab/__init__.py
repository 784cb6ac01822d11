"""
raglab - retrieval-augmented-generation indexing and lookup pipeline.

Chunk text, embed the chunks in batches, persist them in a vector store
and retrieve the most relevant chunks for a query through the
EvaluationEngine.
"""

__version__ = "0.1.0"
