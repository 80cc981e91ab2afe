from __future__ import annotations

"""
The knowledge base: loaded records, the text index built over them and
the query engine that ties the two together.

An instance is built once (``load_all``) and is read-only afterwards, so
any number of queries may run against it.  There is no process-wide
instance; callers own theirs::

    kb = create_knowledge_base("path/to/data")
    kit = generate_ui_kit("SaaS dashboard with React", kb=kb)
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from loguru import logger

from .config import DATA_DIR, SEARCH_DEFAULT_LIMIT, Category, Record
from .normalize import combine_row_text
from .record_store import load_all
from .retrieval import DocMeta, QueryEngine, SearchHit
from .text_index import TextIndex, build_text_index


class UIUXKnowledgeBase:
    def __init__(self, data_dir: Union[str, Path, None] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.raw_data: Dict[Category, List[Record]] = {cat: [] for cat in Category}
        self.doc_meta: Dict[int, DocMeta] = {}
        self.index: Optional[TextIndex] = None
        self.engine: Optional[QueryEngine] = None

    @property
    def loaded(self) -> bool:
        return self.engine is not None

    def load_all(self) -> "UIUXKnowledgeBase":
        """Load every dataset and build the index.  Raises ``DataCorruptError``."""
        self.raw_data = load_all(self.data_dir)
        self.build_index()
        return self

    def build_index(self) -> None:
        # Document ids run densely across categories in declaration order
        doc_meta: Dict[int, DocMeta] = {}
        documents = []
        doc_counter = 0
        for category in Category:
            for row_index, row in enumerate(self.raw_data.get(category, [])):
                documents.append((doc_counter, combine_row_text(row)))
                doc_meta[doc_counter] = DocMeta(category=category, row_index=row_index, record=row)
                doc_counter += 1

        self.index = build_text_index(documents)
        self.doc_meta = doc_meta
        self.engine = QueryEngine(self.index, doc_meta)
        logger.info("Indexed {} documents", doc_counter)

    def records(self, category: Category) -> List[Record]:
        return self.raw_data.get(category, [])

    def search(
        self,
        query: str,
        categories: Optional[Iterable[Category]] = None,
        limit: int = SEARCH_DEFAULT_LIMIT,
    ) -> List[SearchHit]:
        if self.engine is None:
            logger.warning("Knowledge base searched before load_all(); returning no hits")
            return []
        return self.engine.search(query, categories, limit)

    def smart_recommendation(self, query: str) -> Dict[Category, List[Record]]:
        from .kit import smart_recommendation

        return smart_recommendation(self, query)

    def stats(self) -> Dict[str, object]:
        return {
            "records": {cat.value: len(self.raw_data.get(cat, [])) for cat in Category},
            "documents": len(self.doc_meta),
        }


def create_knowledge_base(data_dir: Union[str, Path, None] = None) -> UIUXKnowledgeBase:
    """Construct a knowledge base and load it synchronously."""
    kb = UIUXKnowledgeBase(data_dir)
    return kb.load_all()
