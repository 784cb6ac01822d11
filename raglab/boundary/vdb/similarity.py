"""
Cosine similarity ranking with numpy.

Dependencies: numpy
System role: Similarity scoring shared by all vector store variants
"""

from typing import Sequence

import numpy as np


def cosine_scores(query: Sequence[float], vectors: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Cosine similarity of `query` against every row of `vectors`.

    A zero-norm query or row scores 0.0.

    Args:
        query: Query vector
        vectors: Stored vectors, all of the query's dimension

    Returns:
        np.ndarray: One score per stored vector
    """
    if len(vectors) == 0:
        return np.zeros(0, dtype=np.float64)

    q = np.asarray(query, dtype=np.float64)
    matrix = np.asarray(vectors, dtype=np.float64)

    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)
    dots = matrix @ q
    scores = np.zeros(len(matrix), dtype=np.float64)
    np.divide(dots, norms, out=scores, where=norms > 0)
    return scores


def top_k_indices(scores: np.ndarray, top_k: int) -> list[tuple[int, float]]:
    """
    Positions of the `top_k` highest scores, best first.

    Equal scores keep their original (insertion) order.

    Returns:
        list[tuple[int, float]]: (index into scores, score) pairs
    """
    if top_k <= 0 or len(scores) == 0:
        return []

    order = np.argsort(-scores, kind="stable")[:top_k]
    return [(int(i), float(scores[i])) for i in order]


def rank_by_similarity(
    query: Sequence[float],
    vectors: Sequence[Sequence[float]],
    top_k: int,
) -> list[tuple[int, float]]:
    """Indices of the `top_k` vectors most similar to `query`, best first."""
    if top_k <= 0 or len(vectors) == 0:
        return []
    return top_k_indices(cosine_scores(query, vectors), top_k)
