from __future__ import annotations

"""
Keyword heuristics deciding which categories a query asks for.

Participation is driven by the static ``CATEGORY_RULES`` table in
:mod:`uiux_kit.config`: a category is requested when it is on by
default or when any of its trigger keywords occurs in the lower-cased
query.  Broad categories (styles, palettes, fonts, ...) are always on;
charts, animations and icons only appear when the query implies them.

The same module scores technology stacks for the React/Next.js
preference used when a query names React explicitly.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .config import (
    CATEGORY_RULES,
    NEXT_KEYWORDS,
    NEXT_PRIORITY,
    REACT_KEYWORDS,
    REACT_PRIORITY,
    TECH_PRIORITY_FIELD,
    Category,
    CategoryRule,
)
from .normalize import combine_row_text


@dataclass(frozen=True)
class RelevanceDecision:
    requested: Dict[Category, bool]
    matched_keywords: Dict[Category, List[str]] = field(default_factory=dict)
    prefers_react: bool = False

    def requested_categories(self) -> List[Category]:
        return [cat for cat in Category if self.requested.get(cat, False)]


def _lower(query: Optional[str]) -> str:
    return (query or "").lower()


def matched_keywords(category: Category, query: str, rules: Mapping[Category, CategoryRule] = CATEGORY_RULES) -> List[str]:
    ql = _lower(query)
    return [k for k in rules[category].keywords if k in ql]


def is_requested(category: Category, query: str, rules: Mapping[Category, CategoryRule] = CATEGORY_RULES) -> bool:
    rule = rules[category]
    return rule.default_on or bool(matched_keywords(category, query, rules))


def prefers_react(query: str) -> bool:
    ql = _lower(query)
    return any(k in ql for k in REACT_KEYWORDS)


def assess_query(query: str, rules: Mapping[Category, CategoryRule] = CATEGORY_RULES) -> RelevanceDecision:
    """Evaluate the rule table for one query."""
    requested: Dict[Category, bool] = {}
    matches: Dict[Category, List[str]] = {}
    for category in Category:
        hits = matched_keywords(category, query, rules)
        if hits:
            matches[category] = hits
        requested[category] = rules[category].default_on or bool(hits)
    return RelevanceDecision(
        requested=requested,
        matched_keywords=matches,
        prefers_react=prefers_react(query),
    )


def tech_priority(record: Mapping[str, str]) -> int:
    """
    Hand-scored preference for a tech stack record:
    React+Next (3) > React (2) > Next (1) > other (0).

    Scored on the ``technologies`` column.  A record without that column is
    scored on its whole row text instead, so ``{"stack_name": "React Starter"}``
    scores 2 rather than 0.
    """
    if TECH_PRIORITY_FIELD in record:
        text = str(record.get(TECH_PRIORITY_FIELD) or "").lower()
    else:
        text = combine_row_text(record).lower()
    score = 0
    if "react" in text:
        score += REACT_PRIORITY
    if any(k in text for k in NEXT_KEYWORDS):
        score += NEXT_PRIORITY
    return score
