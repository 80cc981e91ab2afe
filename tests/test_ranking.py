"""Tests for per-category ranking strategies."""

from __future__ import annotations

from uiux_kit.config import Category
from uiux_kit.knowledge_base import create_knowledge_base
from uiux_kit.ranking import (
    KeywordPriorityRank,
    LexicalRank,
    RankStrategy,
    strategy_for,
)
from uiux_kit.relevance import assess_query


def _names(records, key="stack_name"):
    return [r[key] for r in records]


def test_strategy_selection():
    react = assess_query("react app")
    plain = assess_query("vue app")
    assert strategy_for(Category.TECH_STACKS, react).tag is RankStrategy.KEYWORD_PRIORITY
    assert strategy_for(Category.TECH_STACKS, plain).tag is RankStrategy.LEXICAL
    assert strategy_for(Category.UI_STYLES, react).tag is RankStrategy.LEXICAL


def test_keyword_priority_orders_react_and_next(kb):
    ranked = KeywordPriorityRank().rank(kb, "react", Category.TECH_STACKS, limit=10)
    assert _names(ranked) == ["Next.js Fullstack", "React SPA", "Next Only", "Vue Nuxt"]


def test_keyword_priority_truncates(kb):
    ranked = KeywordPriorityRank().rank(kb, "react", Category.TECH_STACKS, limit=3)
    assert _names(ranked) == ["Next.js Fullstack", "React SPA", "Next Only"]


def test_keyword_priority_ties_keep_dataset_order(make_data_dir):
    stacks = [
        {"stack_name": "Rails", "technologies": "Ruby on Rails"},
        {"stack_name": "React A", "technologies": "React"},
        {"stack_name": "Django", "technologies": "Django"},
        {"stack_name": "React B", "technologies": "React, Redux"},
        {"stack_name": "Laravel", "technologies": "Laravel"},
    ]
    kb = create_knowledge_base(make_data_dir({Category.TECH_STACKS: stacks}))
    ranked = KeywordPriorityRank().rank(kb, "react", Category.TECH_STACKS, limit=5)
    assert _names(ranked) == ["React A", "React B", "Rails", "Django", "Laravel"]


def test_keyword_priority_does_not_reorder_source(kb):
    before = list(kb.records(Category.TECH_STACKS))
    KeywordPriorityRank().rank(kb, "react", Category.TECH_STACKS)
    assert kb.records(Category.TECH_STACKS) == before


def test_lexical_rank_uses_search_hits(kb):
    ranked = LexicalRank().rank(kb, "glassmorphism", Category.UI_STYLES, limit=3)
    assert _names(ranked, "style_name") == ["Glassmorphism"]


def test_lexical_rank_falls_back_to_dataset_order(make_data_dir):
    styles = [{"style_name": f"Style {i}", "description": f"look number {i}"} for i in range(5)]
    kb = create_knowledge_base(make_data_dir({Category.UI_STYLES: styles}))
    ranked = LexicalRank().rank(kb, "zebra", Category.UI_STYLES, limit=3)
    assert ranked == styles[:3]


def test_lexical_rank_on_empty_category(make_data_dir):
    empty = create_knowledge_base(make_data_dir({Category.UI_STYLES: [{"style_name": "Only"}]}))
    assert LexicalRank().rank(empty, "anything", Category.ICON_STYLES) == []
