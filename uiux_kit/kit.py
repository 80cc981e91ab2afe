from __future__ import annotations

"""
Kit composition: turn one query into a multi-category recommendation.

For every category the relevance heuristic requests, the selected
ranking strategy picks up to ``KIT_TOP_K`` records.  The resulting
per-category lists are then folded into a :class:`RecommendationKit`
where singular fields keep the best record and list fields keep the
whole short list.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger

from .config import KIT_TOP_K, Category, Record, RecommendationKit
from .knowledge_base import UIUXKnowledgeBase, create_knowledge_base
from .ranking import strategy_for
from .relevance import assess_query


def smart_recommendation(
    kb: UIUXKnowledgeBase,
    query: str,
    top_k: int = KIT_TOP_K,
) -> Dict[Category, List[Record]]:
    """
    Map each requested category to its ranked records.  Categories the
    heuristic does not request are absent from the result.
    """
    decision = assess_query(query)
    output: Dict[Category, List[Record]] = {}
    for category in decision.requested_categories():
        strategy = strategy_for(category, decision)
        output[category] = strategy.rank(kb, query, category, top_k)

    logger.info(
        "Recommendation for {!r}: {}",
        query,
        {cat.value: len(recs) for cat, recs in output.items()},
    )
    return output


def _first(records: Optional[List[Record]]) -> Optional[Record]:
    return records[0] if records else None


def _optional_list(recs: Dict[Category, List[Record]], category: Category) -> Optional[List[Record]]:
    if category not in recs:
        return None
    return list(recs[category])


def compose_kit(query: str, recs: Dict[Category, List[Record]]) -> RecommendationKit:
    return RecommendationKit(
        query=query,
        product=_first(recs.get(Category.PRODUCTS)),
        ui_style=_first(recs.get(Category.UI_STYLES)),
        color_palette=_first(recs.get(Category.COLOR_PALETTES)),
        font_pairing=_first(recs.get(Category.FONT_PAIRINGS)),
        layout_template=_first(recs.get(Category.LAYOUT_TEMPLATES)),
        buttons=list(recs.get(Category.BUTTON_STYLES, [])),
        ctas=list(recs.get(Category.CTA_COMPONENTS, [])),
        charts=_optional_list(recs, Category.CHART_TYPES),
        animations=_optional_list(recs, Category.ANIMATIONS),
        icons=_optional_list(recs, Category.ICON_STYLES),
        tech_stack=_first(recs.get(Category.TECH_STACKS)),
    )


def generate_ui_kit(
    query: str,
    kb: Optional[UIUXKnowledgeBase] = None,
    data_dir: Union[str, Path, None] = None,
) -> RecommendationKit:
    """High-level entry point: query in, :class:`RecommendationKit` out."""
    knowledge_base = kb if kb is not None else create_knowledge_base(data_dir)
    recs = smart_recommendation(knowledge_base, query)
    return compose_kit(query, recs)
