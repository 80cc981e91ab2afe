from __future__ import annotations

"""
Lexical BM25 index over the full-row text of every record.

Documents are added one at a time while the index is open, then
``consolidate()`` freezes it and builds a ``rank_bm25.BM25Plus`` model
over the tokenised corpus.  After that point the index is read-only:
further ``add_document`` calls are rejected.  Queries are tokenised with
the exact same pipeline as documents (see :mod:`uiux_kit.normalize`).

Only documents sharing at least one term with the query are returned,
ordered by BM25 score (best first) with ties broken by document id.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from loguru import logger
from rank_bm25 import BM25Plus

from .config import BM25_B, BM25_DELTA, BM25_K1
from .normalize import normalize_query, tokenize


class IndexFrozenError(RuntimeError):
    """Raised when a document is added after the index was consolidated."""


class IndexNotReadyError(RuntimeError):
    """Raised when the index is queried before ``consolidate()``."""


class TextIndex:
    def __init__(self, k1: float = BM25_K1, b: float = BM25_B, delta: float = BM25_DELTA):
        self.k1 = k1
        self.b = b
        self.delta = delta
        self.doc_ids: List[int] = []
        self.corpus_tokens: List[List[str]] = []
        self._doc_terms: List[Set[str]] = []
        self._positions: Dict[int, int] = {}
        self._vocabulary: Set[str] = set()
        self._bm25: Optional[BM25Plus] = None
        self._consolidated = False

    @property
    def consolidated(self) -> bool:
        return self._consolidated

    def __len__(self) -> int:
        return len(self.doc_ids)

    def add_document(self, doc_id: int, text: str) -> None:
        if self._consolidated:
            raise IndexFrozenError("Index is consolidated; no more documents can be added")
        if doc_id in self._positions:
            raise ValueError(f"Duplicate document id: {doc_id}")
        tokens = tokenize(text)
        self._positions[doc_id] = len(self.doc_ids)
        self.doc_ids.append(doc_id)
        self.corpus_tokens.append(tokens)
        self._doc_terms.append(set(tokens))
        self._vocabulary.update(tokens)

    def consolidate(self) -> "TextIndex":
        """Freeze the index and fit BM25 statistics.  Idempotent."""
        if self._consolidated:
            return self
        # BM25Plus cannot score a corpus without tokens (zero average length)
        if self._vocabulary:
            self._bm25 = BM25Plus(self.corpus_tokens, k1=self.k1, b=self.b, delta=self.delta)
            logger.info(
                "Constructed BM25Plus index over {} documents ({} terms)",
                len(self.doc_ids),
                len(self._vocabulary),
            )
        else:
            logger.warning("Text index has no terms; every query will match nothing")
        self._consolidated = True
        return self

    def query(self, text: str, top_n: Optional[int] = None) -> List[Tuple[int, float]]:
        """
        Return ``(doc_id, score)`` pairs for documents that contain at
        least one query term, sorted by ``(-score, doc_id)``.
        """
        if not self._consolidated:
            raise IndexNotReadyError("Index must be consolidated before querying")
        tokens = tokenize(normalize_query(text))
        known = [t for t in tokens if t in self._vocabulary]
        if not known or self._bm25 is None:
            return []

        scores = self._bm25.get_scores(tokens)
        wanted = set(known)
        pairs = [
            (doc_id, float(scores[pos]))
            for pos, doc_id in enumerate(self.doc_ids)
            if self._doc_terms[pos] & wanted
        ]
        pairs.sort(key=lambda x: (-x[1], x[0]))
        if top_n is not None:
            return pairs[:top_n]
        return pairs


def build_text_index(
    documents: Iterable[Tuple[int, str]],
    k1: float = BM25_K1,
    b: float = BM25_B,
    delta: float = BM25_DELTA,
) -> TextIndex:
    """Add every ``(doc_id, text)`` pair and consolidate."""
    index = TextIndex(k1=k1, b=b, delta=delta)
    for doc_id, text in documents:
        index.add_document(doc_id, text)
    return index.consolidate()
