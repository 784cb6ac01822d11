"""
Okapi BM25 lexical scoring over chunk texts.

Texts are lower-cased and split into word tokens. The index is built per
call from the texts given, so scores are relative to that corpus.

Dependencies: rank_bm25, numpy
System role: Lexical relevance for the bm25 and hybrid retrievers
"""

import re
from typing import Sequence

import numpy as np
from rank_bm25 import BM25Okapi

_TOKEN = re.compile(r"\w+")


def tokenize(text: str) -> list[str]:
    """Lower-cased word tokens of `text`."""
    return _TOKEN.findall(text.lower())


def bm25_scores(query: str, texts: Sequence[str]) -> np.ndarray:
    """
    BM25 score of `query` against every text.

    Args:
        query: Query text
        texts: Corpus, one entry per stored chunk

    Returns:
        np.ndarray: One score per text; all zeros when the query or the
            corpus has no tokens
    """
    corpus = [tokenize(text) for text in texts]
    query_tokens = tokenize(query)
    if not query_tokens or not any(corpus):
        return np.zeros(len(corpus), dtype=np.float64)

    return np.asarray(BM25Okapi(corpus).get_scores(query_tokens), dtype=np.float64)
