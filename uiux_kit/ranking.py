from __future__ import annotations

"""
Per-category ranking strategies used by the kit composer.

``LexicalRank`` serves a category from BM25 search and falls back to
dataset order when nothing overlaps lexically, so a requested category
is never left empty while it has records.  ``KeywordPriorityRank``
bypasses the text ranker entirely and orders tech stacks by their
React/Next.js preference score.
"""

from enum import Enum
from typing import TYPE_CHECKING, List

from loguru import logger

from .config import KIT_TOP_K, Category, Record
from .relevance import RelevanceDecision, tech_priority

if TYPE_CHECKING:
    from .knowledge_base import UIUXKnowledgeBase


class RankStrategy(str, Enum):
    LEXICAL = "lexical"
    KEYWORD_PRIORITY = "keyword_priority"


class LexicalRank:
    tag = RankStrategy.LEXICAL

    def rank(self, kb: "UIUXKnowledgeBase", query: str, category: Category, limit: int = KIT_TOP_K) -> List[Record]:
        hits = kb.search(query, [category], limit)
        if hits:
            return [h.record for h in hits]
        records = kb.records(category)
        if records:
            logger.debug("No lexical match in '{}'; using dataset order", category.value)
        return records[:limit]


class KeywordPriorityRank:
    tag = RankStrategy.KEYWORD_PRIORITY

    def rank(self, kb: "UIUXKnowledgeBase", query: str, category: Category, limit: int = KIT_TOP_K) -> List[Record]:
        # sorted() is stable: equal priorities keep dataset order
        ordered = sorted(kb.records(category), key=tech_priority, reverse=True)
        return ordered[:limit]


STRATEGIES = {
    RankStrategy.LEXICAL: LexicalRank(),
    RankStrategy.KEYWORD_PRIORITY: KeywordPriorityRank(),
}


def strategy_for(category: Category, decision: RelevanceDecision):
    """Pick the ranking strategy for ``category`` under ``decision``."""
    if category is Category.TECH_STACKS and decision.prefers_react:
        return STRATEGIES[RankStrategy.KEYWORD_PRIORITY]
    return STRATEGIES[RankStrategy.LEXICAL]
