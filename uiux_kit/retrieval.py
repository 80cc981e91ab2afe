from __future__ import annotations

"""
Query engine over the consolidated text index.

The index ranks every document globally; this module maps document ids
back to their owning category and record and applies the optional
category filter *after* ranking, so survivors keep their global order.
Scanning stops as soon as ``limit`` hits have been collected.

Example::

    engine = QueryEngine(index, doc_meta)
    for hit in engine.search("glassmorphism dark", [Category.UI_STYLES], limit=3):
        print(hit.category, hit.score, hit.record)
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from loguru import logger

from .config import SEARCH_DEFAULT_LIMIT, Category, Record
from .text_index import TextIndex


@dataclass(frozen=True)
class DocMeta:
    category: Category
    row_index: int
    record: Record


@dataclass(frozen=True)
class SearchHit:
    doc_id: int
    score: float
    category: Category
    record: Record


class QueryEngine:
    def __init__(self, index: TextIndex, doc_meta: Dict[int, DocMeta]):
        self.index = index
        self.doc_meta = doc_meta

    def search(
        self,
        query: str,
        categories: Optional[Iterable[Category]] = None,
        limit: int = SEARCH_DEFAULT_LIMIT,
    ) -> List[SearchHit]:
        """Ranked search, best first, optionally restricted to ``categories``."""
        if not query or not query.strip() or limit <= 0:
            return []

        allowed = set(categories) if categories is not None else None
        results: List[SearchHit] = []
        for doc_id, score in self.index.query(query):
            meta = self.doc_meta.get(doc_id)
            if meta is None:
                continue
            if allowed is not None and meta.category not in allowed:
                continue
            results.append(
                SearchHit(doc_id=doc_id, score=score, category=meta.category, record=meta.record)
            )
            if len(results) >= limit:
                break

        logger.debug("Search {!r} -> {} hits", query, len(results))
        return results
